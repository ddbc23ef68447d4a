"""Find the JSX-capable source files under a path."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

import pathspec

from react_lens.constants import DEFAULT_SKIP_DIRS, SOURCE_EXTENSIONS


def discover_files(
    root: Path | str,
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> list[Path]:
    """Return absolute paths of source files under ``root``, sorted.

    * A root that is itself a file yields ``[root]`` when its extension
      is recognized, otherwise nothing.
    * Skips hidden directories and directories named in ``skip_dirs``
      (node_modules, dist, build and friends unless overridden).
    * Honours the root's ``.gitignore`` via pathspec.
    * Symlinks resolving outside the root are skipped.

    Raises :class:`FileNotFoundError` when ``root`` does not exist.
    """
    base = Path(root).resolve()
    if not base.exists():
        msg = f"Path does not exist: {base}"
        raise FileNotFoundError(msg)
    if base.is_file():
        return [base] if _is_source(base) else []

    ignored = _gitignore_for(base)
    skipped = frozenset(skip_dirs)
    return sorted(
        path
        for path in _iter_tree(base, skipped, ignored)
        if _is_source(path)
    )


def _is_source(path: Path) -> bool:
    return path.suffix.lower() in SOURCE_EXTENSIONS


def _escapes(entry: Path, base: Path) -> bool:
    return entry.is_symlink() and not entry.resolve().is_relative_to(base)


def _iter_tree(
    base: Path,
    skipped: frozenset[str],
    ignored: pathspec.GitIgnoreSpec,
) -> Iterator[Path]:
    """Yield every kept regular file below ``base``."""
    pending = [base]
    while pending:
        directory = pending.pop()
        for entry in directory.iterdir():
            if _escapes(entry, base):
                continue
            rel = entry.relative_to(base).as_posix()
            if entry.is_dir():
                hidden = entry.name.startswith(".")
                if hidden or entry.name in skipped:
                    continue
                if not ignored.match_file(f"{rel}/"):
                    pending.append(entry)
            elif entry.is_file() and not ignored.match_file(rel):
                yield entry


def _gitignore_for(base: Path) -> pathspec.GitIgnoreSpec:
    try:
        lines = (base / ".gitignore").read_text(encoding="utf-8")
    except OSError:
        lines = ""
    return pathspec.GitIgnoreSpec.from_lines(lines.splitlines())
