"""
Pattern normalization and file collection.

Turns command-line patterns into an ordered, deduplicated list of absolute
files, classifying each against the default and custom ignore rules.
"""

from __future__ import annotations

import logging
import os
import re
import stat
from collections.abc import Callable, Sequence
from dataclasses import replace

from lintfiles.file_resolver.glob_walker import glob_sync
from lintfiles.file_resolver.ignored_paths import IgnoredPaths
from lintfiles.file_resolver.types import FileRecord, ResolveOptions

log = logging.getLogger(__name__)

# Matches `.hidden` or `/.hidden` segments, but not `./relative` or `../relative`.
_DOTFILES_PATTERN = re.compile(r"(?:(?:^\.)|(?:[/\\]\.))[^/\\.].*")


def process_path(options: ResolveOptions | None = None) -> Callable[[str], str]:
    """
    Build a function that rewrites a directory path into a glob matching every
    file with one of the configured extensions beneath it, at any depth.

    Other paths are returned unchanged. Results always use `/` separators.
    """
    options = options or ResolveOptions()
    cwd = options.effective_cwd
    extensions = [ext[1:] if ext.startswith(".") else ext for ext in options.extensions]

    if len(extensions) == 1:
        suffix = f"/**/*.{extensions[0]}"
    else:
        suffix = "/**/*.{" + ",".join(extensions) + "}"

    def to_glob(pathname: str) -> str:
        new_path = pathname
        resolved = os.path.abspath(os.path.join(cwd, pathname))

        if os.path.isdir(resolved):
            new_path = re.sub(r"[/\\]$", "", pathname) + suffix

        return new_path.replace("\\", "/")

    return to_glob


def resolve_file_glob_patterns(
    patterns: Sequence[str], options: ResolveOptions | None = None
) -> list[str]:
    """Resolve directory patterns into glob patterns, dropping empty strings."""
    to_glob = process_path(options)
    return [to_glob(p) for p in patterns if p]


def _is_regular_file(path: str) -> bool:
    """True if `path` exists and is a regular file. Errors from `stat` propagate."""
    if not os.path.exists(path):
        return False
    return stat.S_ISREG(os.stat(path).st_mode)


def list_files_to_process(
    glob_patterns: Sequence[str], options: ResolveOptions | None = None
) -> list[FileRecord]:
    """
    Build the ordered list of absolute files to process.

    Each pattern is handled as:
    - Existing file → resolved to its real path and always reported; marked
      `ignored` if it matches an ignore rule (unless `ignore` is disabled)
    - Anything else → glob-expanded; matches hitting an ignore rule are dropped

    A filename is reported at most once; the first occurrence wins.
    """
    options = options or ResolveOptions()
    cwd = options.effective_cwd
    files: list[FileRecord] = []
    added_filenames: set[str] = set()

    # Local to this call. Unset dotfiles behaves as False, so at most two engines are built.
    ignored_paths_cache: dict[ResolveOptions, IgnoredPaths] = {}

    def get_ignored_paths(opts: ResolveOptions) -> IgnoredPaths:
        key = replace(opts, dotfiles=opts.dotfiles is True)
        if key not in ignored_paths_cache:
            ignored_paths_cache[key] = IgnoredPaths(key)
        return ignored_paths_cache[key]

    def add_file(filename: str, is_direct_path: bool, ignored_paths: IgnoredPaths) -> None:
        if filename in added_filenames:
            return

        should_process_custom_ignores = options.ignore
        should_lint_ignored_direct_paths = not options.ignore
        file_matches_ignore_patterns = ignored_paths.contains(filename, "default") or (
            should_process_custom_ignores and ignored_paths.contains(filename, "custom")
        )

        if file_matches_ignore_patterns and is_direct_path and not should_lint_ignored_direct_paths:
            files.append(FileRecord(filename, ignored=True))
            added_filenames.add(filename)
        elif not file_matches_ignore_patterns or (
            is_direct_path and should_lint_ignored_direct_paths
        ):
            files.append(FileRecord(filename, ignored=False))
            added_filenames.add(filename)
        else:
            log.debug("Dropping ignored glob match %s", filename)

    log.debug("Creating list of files to process.")
    for pattern in glob_patterns:
        file = os.path.abspath(os.path.join(cwd, pattern))

        if _is_regular_file(file):
            log.debug("Direct path %s", file)
            add_file(os.path.realpath(file), True, get_ignored_paths(options))
            continue

        glob_includes_dotfiles = _DOTFILES_PATTERN.search(pattern) is not None
        new_options = options
        if options.dotfiles is None:
            new_options = replace(options, dotfiles=glob_includes_dotfiles)

        ignored_paths = get_ignored_paths(new_options)
        should_skip = ignored_paths.get_ignored_folders_checker()

        log.debug("Expanding glob %r (dotfiles=%s)", pattern, new_options.dotfiles)
        for glob_match in glob_sync(pattern, cwd=cwd, dot=True, nodir=True, should_skip=should_skip):
            add_file(os.path.abspath(os.path.join(cwd, glob_match)), False, ignored_paths)

    return files
