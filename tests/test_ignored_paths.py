"""Tests for default and custom ignore rules."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintfiles.file_resolver import IgnoredPaths, IgnoreFileError, ResolveOptions
from lintfiles.file_resolver.ignored_paths import (
    _read_ignore_file,  # pyright: ignore[reportPrivateUsage]
)


def test_default_tier_matches_dependency_dirs(tmp_path: Path):
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path)))
    assert ignored.contains("node_modules/pkg/index.js", "default")
    assert ignored.contains("bower_components/lib/x.js", "default")
    assert not ignored.contains("node_modules/pkg/index.js", "custom")
    assert not ignored.contains("src/index.js")


def test_default_tier_is_rooted(tmp_path: Path):
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path)))
    assert not ignored.contains("src/node_modules/x.js", "default")


def test_dotfiles_ignored_unless_enabled(tmp_path: Path):
    assert IgnoredPaths(ResolveOptions(cwd=str(tmp_path))).contains(".eslintrc.js", "default")
    assert IgnoredPaths(ResolveOptions(cwd=str(tmp_path), dotfiles=False)).contains(
        "src/.cache/x.js", "default"
    )
    assert not IgnoredPaths(ResolveOptions(cwd=str(tmp_path), dotfiles=True)).contains(
        ".eslintrc.js"
    )


def test_absolute_paths_are_relative_to_cwd(tmp_path: Path):
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path)))
    assert ignored.contains(str(tmp_path / "node_modules" / "a.js"), "default")


def test_paths_outside_base_never_match(tmp_path: Path):
    project = tmp_path / "project"
    project.mkdir()
    ignored = IgnoredPaths(ResolveOptions(cwd=str(project), ignore_pattern=("*.js",)))
    assert ignored.contains("a.js", "custom")
    assert not ignored.contains(str(tmp_path / "a.js"))
    assert not ignored.contains("../.hidden.js")


def test_custom_tier_from_default_ignore_file(tmp_path: Path):
    (tmp_path / ".lintfilesignore").write_text("# comment\n\nbuild/\n*.min.js\n")
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path)))
    assert ignored.contains("build/out.js", "custom")
    assert ignored.contains("src/app.min.js", "custom")
    assert not ignored.contains("src/app.js", "custom")
    assert not ignored.contains("build/out.js", "default")


def test_custom_tier_skipped_when_ignore_disabled(tmp_path: Path):
    (tmp_path / ".lintfilesignore").write_text("build/\n")
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path), ignore=False, ignore_pattern=("x.js",)))
    assert not ignored.contains("build/out.js", "custom")
    assert not ignored.contains("x.js", "custom")


def test_ignore_path_sets_base_dir(tmp_path: Path):
    config = tmp_path / "config"
    config.mkdir()
    (config / "ignore").write_text("*.gen.js\n")
    (tmp_path / ".lintfilesignore").write_text("src/\n")
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path), ignore_path="config/ignore"))
    assert ignored.base_dir == str(config)
    assert ignored.contains("config/a.gen.js", "custom")
    # Outside the ignore file's directory
    assert not ignored.contains("a.gen.js", "custom")
    # .lintfilesignore is replaced, not merged
    assert not ignored.contains("config/src/a.js", "custom")


def test_inline_patterns_with_negation(tmp_path: Path):
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path), ignore_pattern=("lib/*", "!lib/keep.js")))
    assert ignored.contains("lib/drop.js", "custom")
    assert not ignored.contains("lib/keep.js", "custom")


def test_single_string_ignore_pattern(tmp_path: Path):
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path), ignore_pattern="dist/"))
    assert ignored.contains("dist/bundle.js", "custom")


def test_unknown_tier_rejected(tmp_path: Path):
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path)))
    with pytest.raises(ValueError):
        ignored.contains("a.js", "everything")


def test_missing_ignore_path_raises(tmp_path: Path):
    with pytest.raises(IgnoreFileError):
        IgnoredPaths(ResolveOptions(cwd=str(tmp_path), ignore_path="missing-ignore"))


def test_missing_ignore_path_allowed_when_ignore_disabled(tmp_path: Path):
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path), ignore=False, ignore_path="missing"))
    assert not ignored.contains("a.js")


def test_read_ignore_file_non_utf8(tmp_path: Path):
    ignore_file = tmp_path / ".lintfilesignore"
    ignore_file.write_bytes(b"\x80\x81\x82\xff\xfe")
    with pytest.raises(IgnoreFileError):
        _read_ignore_file(ignore_file)


def test_read_ignore_file_strips_comments(tmp_path: Path):
    ignore_file = tmp_path / "ignore"
    ignore_file.write_text("# header\n\n  \nbuild/\n  # indented comment\n*.log\n")
    assert _read_ignore_file(ignore_file) == ["build/", "*.log"]


def test_folders_checker(tmp_path: Path):
    (tmp_path / ".lintfilesignore").write_text("build/\n")
    should_skip = IgnoredPaths(ResolveOptions(cwd=str(tmp_path))).get_ignored_folders_checker()
    assert should_skip(str(tmp_path / "node_modules"))
    assert should_skip(str(tmp_path / ".git"))
    assert should_skip(str(tmp_path / "build"))
    assert should_skip(str(tmp_path / "src" / "build"))
    assert not should_skip(str(tmp_path / "src"))
    assert not should_skip(str(tmp_path.parent / ".elsewhere"))


def test_folders_checker_respects_dotfiles_and_ignore(tmp_path: Path):
    (tmp_path / ".lintfilesignore").write_text("build/\n")
    should_skip = IgnoredPaths(
        ResolveOptions(cwd=str(tmp_path), dotfiles=True, ignore=False)
    ).get_ignored_folders_checker()
    assert not should_skip(str(tmp_path / ".git"))
    assert not should_skip(str(tmp_path / "build"))
    assert should_skip(str(tmp_path / "node_modules"))


def test_folders_checker_is_reused(tmp_path: Path):
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path)))
    assert ignored.get_ignored_folders_checker() is ignored.get_ignored_folders_checker()


def test_folders_checker_uses_ignore_file_directory(tmp_path: Path):
    config = tmp_path / "config"
    config.mkdir()
    (config / ".myignore").write_text("/lib/\n")
    ignored = IgnoredPaths(ResolveOptions(cwd=str(tmp_path), ignore_path="config/.myignore"))
    should_skip = ignored.get_ignored_folders_checker()
    assert not should_skip(str(tmp_path / "lib"))
    assert should_skip(str(config / "lib"))
    assert should_skip(str(config / "lib")) == ignored.contains("config/lib/a.js", "custom")
