"""Shared pytest fixtures for findr tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from test_fixtures import make_tree

SAMPLE_FILES = [
    "report.txt",
    "report_final.txt",
    "readme.md",
]


@pytest.fixture
def search_tree(tmp_path: Path) -> Path:
    """Directory holding report.txt, report_final.txt and readme.md."""
    root = tmp_path / "tree"
    root.mkdir()
    return make_tree(root, SAMPLE_FILES)


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """A few levels of directories with matching and non-matching files."""
    root = tmp_path / "nested"
    root.mkdir()
    make_tree(
        root,
        [
            "report.txt",
            "docs/report_2024.md",
            "docs/notes.md",
            "src/app/report_builder.py",
            "src/app/main.py",
        ],
    )
    (root / "report_dir").mkdir()
    return root


@pytest.fixture
def wide_tree(tmp_path: Path) -> Path:
    """Many files so a scan takes long enough to overlap with the next one."""
    root = tmp_path / "wide"
    root.mkdir()
    files = []
    for d in range(20):
        for f in range(25):
            files.append(f"dir{d}/a_{f}.txt")
            files.append(f"dir{d}/ab_{f}.txt")
            files.append(f"dir{d}/b_{f}.txt")
    return make_tree(root, files)


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep log files out of the real config directory."""
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("FINDR_LOG_DIR", str(log_dir))
    return log_dir
