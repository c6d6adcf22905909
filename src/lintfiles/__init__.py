from lintfiles.file_resolver import (
    FileRecord,
    ResolveOptions,
    list_files_to_process,
    resolve_file_glob_patterns,
)

__all__ = [
    "FileRecord",
    "ResolveOptions",
    "list_files_to_process",
    "resolve_file_glob_patterns",
]
