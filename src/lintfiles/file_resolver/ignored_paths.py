"""Default and custom ignore rules, compiled with pathspec."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

import pathspec

from lintfiles.file_resolver.defaults import DEFAULT_IGNORE_DIRS, DOTFILE_IGNORE, IGNORE_FILENAME
from lintfiles.file_resolver.errors import IgnoreFileError
from lintfiles.file_resolver.types import ResolveOptions

log = logging.getLogger(__name__)

_TIERS = ("default", "custom")


def _read_ignore_file(path: Path) -> list[str]:
    """
    Read ignore rules from `path`, dropping blank lines and comments.
    Raises `IgnoreFileError` if the file can't be read as UTF-8 text.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IgnoreFileError(f"Cannot read ignore file: {path} ({e})") from e
    return [line for line in text.splitlines() if line.strip() and not line.strip().startswith("#")]


def _compile(lines: list[str], source: str) -> pathspec.PathSpec:
    try:
        return pathspec.PathSpec.from_lines("gitignore", lines)
    except ValueError as e:
        raise IgnoreFileError(f"Invalid ignore pattern in {source}: {e}") from e


def _relative_posix(path: str, base: str) -> str | None:
    """Path of `path` relative to `base` in POSIX form, or `None` if outside `base`."""
    rel = os.path.relpath(path, base)
    if rel == os.curdir or rel == os.pardir or rel.startswith(os.pardir + os.sep):
        return None
    return rel.replace(os.sep, "/")


class IgnoredPaths:
    """
    Answers whether a path matches a default or custom ignore rule.

    Default rules are the dependency directories plus, unless `dotfiles` is
    enabled, every dot-prefixed file and directory. Custom rules come from the
    ignore file (`ignore_path`, or `.lintfilesignore` in `cwd`) and inline
    `ignore_pattern` entries, and are only loaded when `ignore` is enabled.
    Paths are matched relative to the ignore file's directory, or `cwd`.
    """

    def __init__(self, options: ResolveOptions) -> None:
        self._options: ResolveOptions = options
        self._cwd: str = os.path.abspath(options.effective_cwd)
        if options.ignore_path:
            ignore_file = os.path.abspath(os.path.join(self._cwd, options.ignore_path))
            self._base_dir: str = os.path.dirname(ignore_file)
        else:
            ignore_file = None
            self._base_dir = self._cwd

        default_lines = list(DEFAULT_IGNORE_DIRS)
        if options.dotfiles is not True:
            default_lines += DOTFILE_IGNORE
        self._default_lines: list[str] = default_lines
        self._default_spec: pathspec.PathSpec = _compile(default_lines, "default rules")

        custom_lines: list[str] = []
        if options.ignore:
            if ignore_file is not None:
                log.debug("Loading ignore file %s", ignore_file)
                custom_lines += _read_ignore_file(Path(ignore_file))
            else:
                default_file = Path(self._cwd) / IGNORE_FILENAME
                if default_file.is_file():
                    log.debug("Loading ignore file %s", default_file)
                    custom_lines += _read_ignore_file(default_file)
            custom_lines += [p for p in options.ignore_pattern if p.strip()]
        self._custom_lines: list[str] = custom_lines
        self._custom_spec: pathspec.PathSpec = _compile(custom_lines, "custom rules")
        self._folders_checker: Callable[[str], bool] | None = None

    @property
    def base_dir(self) -> str:
        return self._base_dir

    def contains(self, path: str, tier: str | None = None) -> bool:
        """
        Check `path` against the `"default"` tier, the `"custom"` tier, or both
        when `tier` is `None`. Relative paths are resolved against `cwd`.
        """
        if tier is not None and tier not in _TIERS:
            raise ValueError(f"Unknown ignore tier: {tier!r}")

        absolute = os.path.abspath(os.path.join(self._cwd, path))
        rel = _relative_posix(absolute, self._base_dir)
        if rel is None:
            return False

        if tier in (None, "default") and self._default_spec.match_file(rel):
            return True
        if tier in (None, "custom") and self._custom_spec.match_file(rel):
            return True
        return False

    def get_ignored_folders_checker(self) -> Callable[[str], bool]:
        """
        Return a predicate telling the glob walker which directories to prune.
        Directories are matched relative to the same base directory as `contains`.
        """
        if self._folders_checker is not None:
            return self._folders_checker

        lines = list(self._default_lines)
        if self._options.ignore:
            lines += self._custom_lines
        spec = _compile(lines, "directory rules")
        base_dir = self._base_dir

        def should_skip_directory(absolute_path: str) -> bool:
            rel = _relative_posix(absolute_path, base_dir)
            if rel is None:
                return False
            return spec.match_file(rel + "/")

        self._folders_checker = should_skip_directory
        return should_skip_directory
