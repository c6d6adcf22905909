"""
Default extensions and ignore rules for file discovery.

Ignore rules use gitignore syntax. Directory patterns end with `/`.
"""

from __future__ import annotations

DEFAULT_EXTENSIONS: tuple[str, ...] = (".js",)

# Dependency directories, rooted at the ignore base directory.
DEFAULT_IGNORE_DIRS: list[str] = [
    "/node_modules/",
    "/bower_components/",
]

# Added to the default tier unless dotfiles are enabled.
DOTFILE_IGNORE: list[str] = [".*"]

IGNORE_FILENAME = ".lintfilesignore"
