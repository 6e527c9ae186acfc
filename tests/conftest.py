"""Shared fixtures for ftg tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from ftg.scanner import Entry


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a standard test directory tree.

    Structure::

        root/
        ├── README.md
        ├── docs/
        │   └── guide.md
        ├── src/
        │   ├── api/
        │   │   ├── auth.py
        │   │   └── user.py
        │   └── models/
        │       └── user.py
        └── tests/
            └── test_user.py
    """
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("guide")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "api").mkdir()
    (tmp_path / "src" / "api" / "auth.py").write_text("auth")
    (tmp_path / "src" / "api" / "user.py").write_text("user")
    (tmp_path / "src" / "models").mkdir()
    (tmp_path / "src" / "models" / "user.py").write_text("user")
    (tmp_path / "tests").mkdir()
    (tmp_path / "tests" / "test_user.py").write_text("test")
    (tmp_path / "README.md").write_text("readme")
    return tmp_path


SAMPLE_TREE_LINES = [
    "├── [F] README.md",
    "├── [D] docs",
    "│   └── [F] guide.md",
    "├── [D] src",
    "│   ├── [D] api",
    "│   │   ├── [F] auth.py",
    "│   │   └── [F] user.py",
    "│   └── [D] models",
    "│       └── [F] user.py",
    "└── [D] tests",
    "    └── [F] test_user.py",
]


@pytest.fixture
def noisy_tree(tmp_path: Path) -> Path:
    """Tree with entries covered by the built-in exclusions.

    Structure::

        root/
        ├── .git/
        │   └── HEAD
        ├── Cargo.lock
        ├── node_modules/
        │   └── pkg/
        │       └── index.js
        ├── src/
        │   └── main.rs
        └── target/
            └── debug/
    """
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref")
    (tmp_path / "Cargo.lock").write_text("lock")
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "pkg" / "index.js").write_text("js")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.rs").write_text("fn main() {}")
    (tmp_path / "target" / "debug").mkdir(parents=True)
    return tmp_path


FAKE_ROOT = Path("/fake/root")


def file_entry(name: str, parent: Path = FAKE_ROOT) -> Entry:
    """Return a file Entry under the given parent."""
    return Entry(name=name, is_dir=False, path=parent / name)


def dir_entry(name: str, parent: Path = FAKE_ROOT) -> Entry:
    """Return a directory Entry under the given parent."""
    return Entry(name=name, is_dir=True, path=parent / name)


class FakeFileSystem:
    """In-memory directory listings keyed by path.

    Paths missing from ``listings`` raise ``PermissionError`` when listed.
    Every listed path is recorded in ``listed``.
    """

    def __init__(self, listings: dict[Path, list[Entry]]) -> None:
        self.listings = listings
        self.listed: list[Path] = []

    def __call__(self, path: Path) -> list[Entry]:
        self.listed.append(path)
        if path not in self.listings:
            raise PermissionError(13, "Permission denied", str(path))
        return list(self.listings[path])

