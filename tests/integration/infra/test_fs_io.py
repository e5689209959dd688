from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, canonicalization, line reading and output
persistence.
"""

import os
from unittest.mock import patch

from singleinclude.infra.fs import (
    canonical_path,
    normalize_path,
    read_source_lines,
    write_output_file,
)


def test_normalize_path_expansion():
    with patch.dict(os.environ, {"SI_TEST_VAR": "my_folder"}):
        path = normalize_path("$SI_TEST_VAR/sub")
        assert path.endswith(os.path.join("my_folder", "sub"))
        assert os.path.isabs(path)


def test_normalize_path_fallback():
    assert normalize_path("  ", fallback="/tmp") == os.path.abspath("/tmp")
    assert normalize_path(None) == ""


def test_canonical_path_collapses_relative_segments(tmp_path):
    (tmp_path / "a").mkdir()
    spelled = os.path.join(str(tmp_path), "a", "..", "a")

    assert canonical_path(spelled) == os.path.realpath(tmp_path / "a")


def test_read_source_lines_strips_terminators(tmp_path):
    f = tmp_path / "x.h"
    f.write_bytes(b"a\r\nb\n\nc")

    assert read_source_lines(str(f)) == ["a", "b", "", "c"]


def test_write_output_file_creates_parents(tmp_path):
    target = tmp_path / "deep" / "dir" / "out.h"

    ok, err = write_output_file(str(target), "x\ny\n")

    assert ok and err is None
    assert target.read_bytes() == b"x\ny\n"


def test_write_output_file_reports_failure(tmp_path):
    ok, err = write_output_file(str(tmp_path), "x")

    assert ok is False
    assert err
