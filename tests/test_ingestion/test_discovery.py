"""Tests for source file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from react_lens.ingestion.discovery import discover_files


def _touch(root: Path, rel: str, content: str = "") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    _touch(tmp_path, "src/App.tsx")
    _touch(tmp_path, "src/index.js")
    _touch(tmp_path, "src/util.ts")
    _touch(tmp_path, "src/Legacy.JSX")
    _touch(tmp_path, "src/styles.css")
    _touch(tmp_path, "node_modules/react/index.js")
    _touch(tmp_path, ".cache/Hidden.tsx")
    _touch(tmp_path, "generated/Gen.tsx")
    _touch(tmp_path, "src/skip.gen.ts")
    _touch(tmp_path, ".gitignore", "generated/\n*.gen.ts\n")
    return tmp_path


def test_finds_sources_sorted_and_absolute(tree: Path) -> None:
    files = discover_files(tree, skip_dirs=["node_modules"])
    rel = [f.relative_to(tree).as_posix() for f in files]
    assert rel == [
        "src/App.tsx",
        "src/Legacy.JSX",
        "src/index.js",
        "src/util.ts",
    ]
    assert all(f.is_absolute() for f in files)


def test_dependency_dirs_skipped_by_default(tree: Path) -> None:
    _touch(tree, "dist/bundle.js")
    _touch(tree, "build/App.tsx")
    rel = {f.relative_to(tree).as_posix() for f in discover_files(tree)}
    assert "node_modules/react/index.js" not in rel
    assert "dist/bundle.js" not in rel
    assert "build/App.tsx" not in rel
    assert "src/App.tsx" in rel


def test_skip_dirs_are_configurable(tree: Path) -> None:
    files = discover_files(tree, skip_dirs=())
    rel = {f.relative_to(tree).as_posix() for f in files}
    assert "node_modules/react/index.js" in rel


def test_hidden_directories_skipped(tree: Path) -> None:
    rel = {f.relative_to(tree).as_posix() for f in discover_files(tree)}
    assert ".cache/Hidden.tsx" not in rel


def test_gitignore_respected(tree: Path) -> None:
    rel = {f.relative_to(tree).as_posix() for f in discover_files(tree)}
    assert "generated/Gen.tsx" not in rel
    assert "src/skip.gen.ts" not in rel


def test_file_root_with_source_extension(tree: Path) -> None:
    target = tree / "src" / "App.tsx"
    assert discover_files(target) == [target.resolve()]


def test_file_root_with_other_extension(tree: Path) -> None:
    assert discover_files(tree / "src" / "styles.css") == []


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Path does not exist"):
        discover_files(tmp_path / "missing")


def test_symlink_outside_root_skipped(tmp_path: Path) -> None:
    outside = tmp_path / "outside"
    _touch(outside, "Secret.tsx")
    root = tmp_path / "project"
    _touch(root, "App.tsx")
    (root / "linked").symlink_to(outside, target_is_directory=True)

    rel = [f.relative_to(root.resolve()).as_posix() for f in discover_files(root)]
    assert rel == ["App.tsx"]
