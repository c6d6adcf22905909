"""Option and result types for file resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass

from lintfiles.file_resolver.defaults import DEFAULT_EXTENSIONS


@dataclass(frozen=True)
class ResolveOptions:
    """
    Options for pattern resolution and file collection.

    Instances are hashable so they can key the per-call ignore engine cache.
    `dotfiles=None` means "derive from each pattern"; `True`/`False` is used as given.
    `ignore=False` disables custom ignore rules and reports ignored direct paths
    as not ignored.
    """

    cwd: str | None = None
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    ignore: bool = True
    ignore_path: str | None = None
    ignore_pattern: tuple[str, ...] = ()
    dotfiles: bool | None = None

    def __post_init__(self) -> None:
        # A single string or a list is accepted; both are stored as tuples.
        for name in ("extensions", "ignore_pattern"):
            value = getattr(self, name)
            object.__setattr__(self, name, (value,) if isinstance(value, str) else tuple(value))

    @property
    def effective_cwd(self) -> str:
        """`cwd`, or the process working directory when unset."""
        return self.cwd or os.getcwd()


@dataclass(frozen=True)
class FileRecord:
    """A file to process. `ignored` is only ever true for directly named files."""

    filename: str
    ignored: bool
