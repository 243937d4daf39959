from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Write a {relative path: text} mapping under tmp_path/src and return the root."""

    def _make(files: dict[str, str], root: str = "src") -> Path:
        base = tmp_path / root
        base.mkdir(parents=True, exist_ok=True)
        for rel, text in files.items():
            path = base / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return base

    return _make
