"""
Project config for lintfiles file discovery.

A project can pin its discovery settings in `.lintfiles.toml`, `lintfiles.toml`,
or a `[tool.lintfiles]` table in `pyproject.toml`, found by walking up from the
directory patterns are resolved against. Settings may sit at the top level or
under `[file-discovery]`. A relative `ignore-path` is taken relative to the
config file, so the project works the same from any subdirectory.

Explicit CLI flags override the config; the config overrides built-in defaults.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

if TYPE_CHECKING:
    from lintfiles.cli import Options

_STANDALONE_NAMES = (".lintfiles.toml", "lintfiles.toml")
_SECTION = "file-discovery"


class ConfigError(ValueError):
    """Raised when a config file holds a value of the wrong type."""


@dataclass(frozen=True)
class LintfilesConfig:
    """Discovery settings from a config file. `None` means "not configured"."""

    extensions: list[str] | None = None
    ignore: bool | None = None
    ignore_path: str | None = None
    ignore_pattern: list[str] | None = None
    dotfiles: bool | None = None

    def configured(self) -> dict[str, Any]:
        """Settings that were actually present in the file."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


def _string_list(key: str, value: Any, source: Path) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ConfigError(f"{source}: `{key}` must be a string or a list of strings")


def _boolean(key: str, value: Any, source: Path) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{source}: `{key}` must be true or false")
    return value


def _tool_table(path: Path) -> dict[str, Any] | None:
    """The lintfiles settings table in `path`, or `None` if the file has none."""
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name != "pyproject.toml":
        return data
    table = data.get("tool", {}).get("lintfiles")
    return table if isinstance(table, dict) else None


def find_config_file(start_dir: Path) -> Path | None:
    """
    Nearest config file at or above `start_dir`. Within a directory, the
    standalone files win over `pyproject.toml`, which only counts when it has
    a `[tool.lintfiles]` table. Unparseable `pyproject.toml` files are skipped.
    """
    for directory in (start_dir.resolve(), *start_dir.resolve().parents):
        for name in _STANDALONE_NAMES:
            if (directory / name).is_file():
                return directory / name
        pyproject = directory / "pyproject.toml"
        if pyproject.is_file():
            try:
                if _tool_table(pyproject) is not None:
                    return pyproject
            except (tomllib.TOMLDecodeError, OSError):
                pass
    return None


def load_config(config_path: Path) -> LintfilesConfig:
    """
    Read and validate discovery settings from `config_path`. Unknown keys are
    ignored; values of the wrong type raise `ConfigError`.
    """
    table = _tool_table(config_path) or {}
    settings = dict(table)
    section = settings.pop(_SECTION, None)
    if isinstance(section, dict):
        settings.update(section)

    config = LintfilesConfig()
    for key, value in settings.items():
        if key == "extensions":
            config = replace(config, extensions=_string_list(key, value, config_path))
        elif key == "ignore-pattern":
            config = replace(config, ignore_pattern=_string_list(key, value, config_path))
        elif key in ("ignore", "dotfiles"):
            config = replace(config, **{key: _boolean(key, value, config_path)})
        elif key == "ignore-path":
            if not isinstance(value, str):
                raise ConfigError(f"{config_path}: `{key}` must be a string")
            ignore_path = config_path.parent.resolve() / value
            config = replace(config, ignore_path=str(ignore_path))
    return config


def merge_cli_with_config(options: Options, config: LintfilesConfig | None, explicit_flags: set[str]) -> Options:
    """Return `options` with config settings applied to every field not set on the command line."""
    if config is None:
        return options
    updates = {name: value for name, value in config.configured().items() if name not in explicit_flags}
    return replace(options, **updates)
