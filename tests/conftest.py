"""Shared pytest fixtures for dmark tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_DOCUMENT = """\
#h1 Introduction

#p[lang=en] I %em{love} %link[href=https://example.com/?a=1%,b=2]{markup}.
  It continues here.

#ul
  #li One
  #li Two %%
"""


@pytest.fixture
def sample_document() -> str:
    """Return a small document exercising blocks, inline elements and escapes."""
    return SAMPLE_DOCUMENT


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a factory writing a document into the temp directory."""

    def _write(content: str, name: str = "doc.dmark") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
