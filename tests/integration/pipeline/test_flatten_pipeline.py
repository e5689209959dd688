from __future__ import annotations

"""
Integration tests for the Flatten Pipeline.

Runs the full pipeline against include trees on disk: pre-flight checks,
expansion, output persistence, dry-run and error reporting.
"""

import errno
import os
from pathlib import Path

import pytest

from singleinclude.core.include import expander as expander_module
from singleinclude.core.pipeline.engine import run_pipeline
from singleinclude.domain.constants import MAX_DEPTH_LIMIT, ExitCode
from singleinclude.domain.include_models import Disposition


@pytest.fixture
def project(make_files) -> Path:
    """
    /src
      main.h      -> "util.h", <lib.h>, <vector>, "util.h"
      util.h
    /inc
      lib.h       -> "util.h" (not next to lib.h, resolved via /src on the path)
    """
    return make_files({
        "src/main.h": (
            '#include "util.h"\n'
            "#include <lib.h>\n"
            "#include <vector>\n"
            '#include "util.h"\n'
            "int main_decl;\n"
        ),
        "src/util.h": "int util;\n",
        "inc/lib.h": '#include "util.h"\nint lib;\n',
    })


def test_pipeline_success_to_memory(project, header):
    result = run_pipeline({
        "input_path": str(project / "src" / "main.h"),
        "include_paths": [str(project / "inc"), str(project / "src")],
        "dry_run": True,
    })

    assert result.ok, result.error
    assert result.exit_code == ExitCode.OK
    assert result.text.startswith(header)
    assert result.text.count("int util;") == 1
    assert "#include <vector>\n" in result.text
    assert result.summary["expanded"] == 2
    assert result.summary["already_included"] == 2
    assert result.summary["not_found"] == 1
    assert result.summary["written"] is False

    lib_node = result.tree.children[1]
    assert lib_node.is_angled is True
    assert lib_node.children[0].disposition is Disposition.ALREADY_INCLUDED

    util = os.path.realpath(project / "src" / "util.h")
    assert util in result.included_files
    assert len(result.included_files) == 3


def test_pipeline_writes_output_file(project, tmp_path):
    out = tmp_path / "out" / "single.h"

    result = run_pipeline({
        "input_path": str(project / "src" / "main.h"),
        "include_paths": [str(project / "inc")],
        "output_path": str(out),
    })

    assert result.ok
    assert result.summary["written"] is True
    assert out.read_bytes().decode("utf-8") == result.text


def test_dry_run_does_not_write(project, tmp_path):
    out = tmp_path / "never.h"

    result = run_pipeline({
        "input_path": str(project / "src" / "main.h"),
        "output_path": str(out),
        "dry_run": True,
    })

    assert result.ok
    assert not out.exists()


def test_missing_root_file(tmp_path):
    result = run_pipeline({"input_path": str(tmp_path / "nope.h")})

    assert not result.ok
    assert result.exit_code == ExitCode.FILE_NOT_EXIST
    assert "File doesn't exist" in result.error


def test_root_must_be_regular_file(tmp_path):
    result = run_pipeline({"input_path": str(tmp_path)})

    assert result.exit_code == ExitCode.FILE_NOT_EXIST


def test_empty_input_path():
    result = run_pipeline({})

    assert result.exit_code == ExitCode.TOO_FEW_ARGUMENTS


def test_missing_include_directory(project, tmp_path):
    result = run_pipeline({
        "input_path": str(project / "src" / "main.h"),
        "include_paths": [str(tmp_path / "missing_dir")],
    })

    assert result.exit_code == ExitCode.DIR_NOT_EXIST
    assert "Directory doesn't exist" in result.error


def test_depth_error_discards_output(make_files):
    root = make_files({"a.h": '#include "a.h"\n'})

    result = run_pipeline({
        "input_path": str(root / "a.h"),
        "expand_all": True,
        "max_depth": 5,
    })

    assert not result.ok
    assert result.exit_code == ExitCode.FILE_ERROR
    assert result.text == ""
    assert result.tree is None
    assert "depth limit" in result.error


def test_deep_acyclic_chain_fails_cleanly_with_large_depth_request(make_files):
    files = {f"h{i}.h": f'#include "h{i + 1}.h"\n' for i in range(600)}
    files["h600.h"] = "LEAF\n"
    root = make_files(files)

    result = run_pipeline({"input_path": str(root / "h0.h"), "max_depth": 1000})

    assert not result.ok
    assert result.exit_code == ExitCode.FILE_ERROR
    assert result.text == ""
    assert f"depth limit ({MAX_DEPTH_LIMIT})" in result.error


def test_expand_all_cycle_with_large_depth_request(make_files):
    root = make_files({
        "a.h": '#include "b.h"\n',
        "b.h": '#include "a.h"\n',
    })

    result = run_pipeline({
        "input_path": str(root / "a.h"),
        "expand_all": True,
        "max_depth": 1000,
    })

    assert not result.ok
    assert result.exit_code == ExitCode.FILE_ERROR
    assert result.tree is None
    assert "depth limit" in result.error


def test_unreadable_include_discards_output(project, monkeypatch):
    util = os.path.realpath(project / "src" / "util.h")
    real_read = expander_module.read_source_lines

    def failing_read(path):
        if path == util:
            raise OSError(errno.EACCES, "Permission denied", path)
        return real_read(path)

    monkeypatch.setattr(expander_module, "read_source_lines", failing_read)

    result = run_pipeline({
        "input_path": str(project / "src" / "main.h"),
        "include_paths": [str(project / "inc")],
    })

    assert not result.ok
    assert result.exit_code == ExitCode.FILE_ERROR
    assert result.text == ""
    assert result.tree is None
    assert result.error.startswith("File error: Cannot open file")
    assert util in result.error


def test_display_flags_are_normalized_on_result(project):
    result = run_pipeline({
        "input_path": str(project / "src" / "main.h"),
        "print_tree": "yes",
        "dry_run": True,
    })
    assert result.ok
    assert result.print_tree is True
    assert result.verbose is False

    result = run_pipeline({
        "input_path": str(project / "src" / "main.h"),
        "verbose": 1,
        "dry_run": True,
    })
    assert result.verbose is True
    assert result.print_tree is True


def test_unwritable_output_is_file_error(project):
    # A directory cannot be opened as the output file
    result = run_pipeline({
        "input_path": str(project / "src" / "main.h"),
        "output_path": str(project / "src"),
    })

    assert result.exit_code == ExitCode.FILE_ERROR
    assert "Cannot open output file" in result.error


def test_undecodable_bytes_round_trip(tmp_path):
    root = tmp_path / "bin.h"
    root.write_bytes(b"const char* s = \"\xff\xfe\";\n")
    out = tmp_path / "bin_out.h"

    result = run_pipeline({"input_path": str(root), "output_path": str(out), "header": ""})

    assert result.ok
    assert out.read_bytes() == b"const char* s = \"\xff\xfe\";\n"
