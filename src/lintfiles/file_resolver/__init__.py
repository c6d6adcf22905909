"""
File discovery for lint-style tools: pattern normalization, glob expansion
and two-tier (default and custom) ignore classification.

No imports from `lintfiles` outside this package.

Usage::

    from lintfiles.file_resolver import (
        ResolveOptions,
        list_files_to_process,
        resolve_file_glob_patterns,
    )

    options = ResolveOptions(extensions=(".js", ".jsx"), ignore_pattern=("dist/",))
    patterns = resolve_file_glob_patterns(["src/", "lib/*.js"], options)
    for record in list_files_to_process(patterns, options):
        print(record.filename, record.ignored)
"""

from lintfiles.file_resolver.defaults import DEFAULT_EXTENSIONS, DEFAULT_IGNORE_DIRS
from lintfiles.file_resolver.errors import FileResolverError, IgnoreFileError
from lintfiles.file_resolver.glob_walker import glob_sync
from lintfiles.file_resolver.ignored_paths import IgnoredPaths
from lintfiles.file_resolver.resolver import (
    list_files_to_process,
    process_path,
    resolve_file_glob_patterns,
)
from lintfiles.file_resolver.types import FileRecord, ResolveOptions

__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_IGNORE_DIRS",
    "FileRecord",
    "FileResolverError",
    "IgnoreFileError",
    "IgnoredPaths",
    "ResolveOptions",
    "glob_sync",
    "list_files_to_process",
    "process_path",
    "resolve_file_glob_patterns",
]
