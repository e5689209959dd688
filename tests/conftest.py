from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A fixture that materializes small include trees on disk.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_files(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Return a helper writing {relative_path: content} under tmp_path.

    Parent directories are created as needed; the helper returns tmp_path.
    Content is written in binary mode so line terminators stay exact.
    """
    def _make(files: Dict[str, str]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content.encode("utf-8"))
        return tmp_path

    return _make


@pytest.fixture
def header() -> str:
    from singleinclude.domain.constants import DEFAULT_HEADER
    return DEFAULT_HEADER
