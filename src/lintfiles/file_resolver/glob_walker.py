"""
Synchronous glob expansion with directory pruning.

Braces (`{a,b}`) are expanded up front with `bracex`; each expanded pattern is
then matched with `wcmatch.glob` globstar semantics. The filesystem is walked
from the pattern's literal prefix with `os.walk()`, pruning directories in
place when `should_skip` says so.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

import bracex
from wcmatch import glob

log = logging.getLogger(__name__)


def _raise(error: OSError) -> None:
    raise error


def _split_literal_prefix(pattern: str, flags: int) -> tuple[str, str]:
    """
    Split a brace-free `pattern` into its leading non-magic directories and the
    remainder. The remainder is empty when the pattern has no magic at all.
    """
    segments = pattern.split("/")
    for i, segment in enumerate(segments):
        if glob.is_magic(segment, flags=flags):
            prefix = "/".join(segments[:i])
            if not prefix and pattern.startswith("/"):
                prefix = "/"
            return prefix, "/".join(segments[i:])
    return pattern, ""


def _max_depth(rest: str) -> int | None:
    """Deepest directory level `rest` can match below the walk root, or `None` if unbounded."""
    if "**" in rest:
        return None
    return rest.count("/")


def _glob_one(
    pattern: str,
    cwd: str,
    flags: int,
    nodir: bool,
    should_skip: Callable[[str], bool] | None,
) -> list[str]:
    prefix, rest = _split_literal_prefix(pattern, flags)

    if not rest:
        # No magic: the pattern names a single path.
        target = os.path.join(cwd, pattern)
        if os.path.isfile(target) or (not nodir and os.path.exists(target)):
            return [pattern]
        return []

    root = os.path.join(cwd, prefix) if prefix else cwd
    if not os.path.isdir(root):
        return []

    max_depth = _max_depth(rest)
    matches: list[str] = []

    # Symlinked directories are only followed when the depth is bounded (no `**`).
    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_raise, followlinks=max_depth is not None
    ):
        rel_dir = os.path.relpath(dirpath, root)
        depth = 0 if rel_dir == os.curdir else rel_dir.count(os.sep) + 1

        if max_depth is not None and depth >= max_depth:
            candidate_dirs = list(dirnames)
            dirnames[:] = []
        else:
            # Prune in place (prevents descent)
            dirnames[:] = [
                d
                for d in dirnames
                if not (should_skip and should_skip(os.path.join(dirpath, d)))
            ]
            candidate_dirs = dirnames

        candidates = list(filenames)
        if not nodir:
            candidates += candidate_dirs

        for name in candidates:
            rel = name if depth == 0 else os.path.join(rel_dir, name)
            rel = rel.replace(os.sep, "/")
            if glob.globmatch(rel, rest, flags=flags):
                matches.append(f"{prefix.rstrip('/')}/{rel}" if prefix else rel)

    return matches


def glob_sync(
    pattern: str,
    *,
    cwd: str,
    dot: bool = True,
    nodir: bool = True,
    should_skip: Callable[[str], bool] | None = None,
) -> list[str]:
    """
    Expand `pattern` relative to `cwd` and return the sorted, unique matches.

    Matches keep the pattern's literal prefix, so relative patterns yield
    relative paths. `should_skip` is called with the absolute path of each
    directory found during the walk; returning true prunes that subtree.
    """
    flags = glob.GLOBSTAR
    if dot:
        flags |= glob.DOTGLOB

    matches: set[str] = set()
    for expanded in bracex.expand(pattern):
        matches.update(_glob_one(expanded, cwd, flags, nodir, should_skip))

    result = sorted(matches)
    log.debug("Glob %r matched %d paths", pattern, len(result))
    return result
