#!/usr/bin/env python3
"""
lintfiles: Resolve file patterns into the files a linter should process

Common usage:
  lintfiles src/
  lintfiles --ext .js --ext .jsx src/ test/
  lintfiles "lib/**/*.js" --ignore-pattern "lib/vendor/"
  lintfiles --no-ignore build/bundle.js

Directories expand to every file with a matching extension beneath them.
Files matching an ignore rule are dropped from glob results; files named
directly are reported with a warning instead.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from lintfiles.config import find_config_file, load_config, merge_cli_with_config
from lintfiles.file_resolver import (
    DEFAULT_EXTENSIONS,
    FileResolverError,
    ResolveOptions,
    list_files_to_process,
    resolve_file_glob_patterns,
)
from lintfiles.logging import configure_logging

IGNORED_FILE_WARNING = "File ignored because of a matching ignore pattern. Use --no-ignore to override."


@dataclass
class Options:
    """Command-line options for the lintfiles tool."""

    patterns: list[str]
    extensions: list[str]
    ignore: bool
    ignore_path: str | None
    ignore_pattern: list[str]
    dotfiles: bool | None
    cwd: str | None
    debug: bool
    version: bool

    def to_resolve_options(self) -> ResolveOptions:
        return ResolveOptions(
            cwd=self.cwd,
            extensions=tuple(self.extensions),
            ignore=self.ignore,
            ignore_path=self.ignore_path,
            ignore_pattern=tuple(self.ignore_pattern),
            dotfiles=self.dotfiles,
        )


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns `(options, explicit_flags)`, where `explicit_flags` holds the
    `Options` fields the user actually passed (for config merge precedence).
    Tracked flags default to `None` so presence can be told apart from a
    value equal to the default.
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="lintfiles",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        type=str,
        default=[],
        help="Files, directories, or glob patterns to resolve",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        dest="extensions",
        metavar="EXT",
        help="File extension to include when expanding directories (default: .js). Can be repeated",
    )
    parser.add_argument(
        "--no-ignore",
        action="store_const",
        const=False,
        default=None,
        dest="ignore",
        help="Disable custom ignore rules and report ignored direct paths as files to process",
    )
    parser.add_argument(
        "--ignore-path",
        type=str,
        default=None,
        dest="ignore_path",
        metavar="FILE",
        help="Ignore file to use instead of .lintfilesignore",
    )
    parser.add_argument(
        "--ignore-pattern",
        action="append",
        default=None,
        dest="ignore_pattern",
        metavar="PATTERN",
        help="Inline ignore rule in gitignore syntax. Can be repeated",
    )
    parser.add_argument(
        "--dotfiles",
        action="store_const",
        const=True,
        default=None,
        help="Include dotfiles for every pattern (default: only when a pattern names one)",
    )
    parser.add_argument(
        "--cwd",
        type=str,
        default=None,
        metavar="DIR",
        help="Directory to resolve relative patterns against (default: current directory)",
    )
    parser.add_argument("--debug", action="store_true", help="Log file discovery details to stderr")
    parser.add_argument("--version", action="store_true", help="Show version information and exit")
    opts = parser.parse_args(args)

    tracked = ("extensions", "ignore", "ignore_path", "ignore_pattern", "dotfiles")
    explicit_flags = {name for name in tracked if getattr(opts, name) is not None}

    return (
        Options(
            patterns=opts.patterns,
            extensions=opts.extensions if opts.extensions is not None else list(DEFAULT_EXTENSIONS),
            ignore=opts.ignore if opts.ignore is not None else True,
            ignore_path=opts.ignore_path,
            ignore_pattern=opts.ignore_pattern if opts.ignore_pattern is not None else [],
            dotfiles=opts.dotfiles,
            cwd=opts.cwd,
            debug=opts.debug,
            version=opts.version,
        ),
        explicit_flags,
    )


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the lintfiles CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("lintfiles")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if options.debug:
        configure_logging(logging.DEBUG)

    if not options.patterns:
        print(
            "Error: No input specified. Provide files, directories, or glob patterns."
            " Use --help for more options.",
            file=sys.stderr,
        )
        return 1

    try:
        base_dir = Path(options.cwd) if options.cwd else Path.cwd()
        config_path = find_config_file(base_dir)
        if config_path:
            options = merge_cli_with_config(options, load_config(config_path), explicit_flags)

        resolve_options = options.to_resolve_options()
        patterns = resolve_file_glob_patterns(options.patterns, resolve_options)
        records = list_files_to_process(patterns, resolve_options)
    except (FileResolverError, OSError, ValueError) as e:  # ConfigError and TOMLDecodeError are ValueErrors
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for record in records:
        if record.ignored:
            print(f"{record.filename}: {IGNORED_FILE_WARNING}", file=sys.stderr)
        else:
            print(record.filename)

    return 0


if __name__ == "__main__":
    sys.exit(main())
