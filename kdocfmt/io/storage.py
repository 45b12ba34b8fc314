"""Source file storage abstraction.

Responsibilities:
- Discover Kotlin source files below the paths a run was given.
- Read and write source text with a fixed encoding.
"""

from __future__ import annotations

from collections.abc import Iterable
from fnmatch import fnmatch
from pathlib import Path


class SourceStore:
    """Filesystem-backed access to Kotlin source files."""

    def discover(
        self,
        paths: Iterable[Path],
        extensions: Iterable[str],
        exclude: Iterable[str] = (),
    ) -> list[Path]:
        """Return sorted unique source files under the given paths.

        Directories are searched recursively for files with one of `extensions`;
        explicitly named files are taken as given. Files whose POSIX path matches
        any `exclude` glob are skipped.

        Raises:
            FileNotFoundError: If a given path does not exist.
        """

        suffixes = frozenset(extensions)
        patterns = tuple(exclude)
        found: set[Path] = set()
        for path in paths:
            if path.is_dir():
                candidates = [
                    candidate
                    for candidate in path.rglob("*")
                    if candidate.is_file() and candidate.suffix in suffixes
                ]
            elif path.is_file():
                candidates = [path]
            else:
                raise FileNotFoundError(f"Source path not found: `{path}`.")
            for candidate in candidates:
                if any(fnmatch(candidate.as_posix(), pattern) for pattern in patterns):
                    continue
                found.add(candidate)
        return sorted(found)

    def load_text(self, path: Path) -> str:
        """Load source text."""

        return path.read_text(encoding="utf-8")

    def save_text(self, path: Path, content: str) -> Path:
        """Save source text and return the path."""

        path.write_text(content, encoding="utf-8")
        return path
