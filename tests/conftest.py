import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


def page(body: str) -> str:
    return f"<html><head></head><body>{body}</body></html>"


@pytest.fixture
def write_doc(tmp_path):
    """Write a markup document under tmp_path/docs and return its path as a string."""
    docs_dir = tmp_path / "docs"
    docs_dir.mkdir(exist_ok=True)

    def _write(name: str, body: str, raw: bool = False) -> str:
        path = docs_dir / name
        path.write_text(body if raw else page(body), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def docs_dir(tmp_path, write_doc):
    """A directory with one empty document and one containing 'go go go'."""
    write_doc("empty.xhtml", "")
    write_doc("go.xhtml", "<p>go go go</p>")
    return str(tmp_path / "docs")
