from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Short and long option spellings.
2. Repeatable include paths keep their order.
3. Only flags actually given appear in the overrides.
"""

import pytest

from singleinclude.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_short_flags_mapping():
    args = parse_args(["-a", "-d", "-t", "-v", "-o", "out.h", "root.h"])

    overrides = args_to_overrides(args)

    assert overrides == {
        "input_path": "root.h",
        "output_path": "out.h",
        "expand_all": True,
        "dry_run": True,
        "print_tree": True,
        "verbose": True,
    }


def test_long_flags_mapping():
    args = parse_args(["--all", "--dry", "--tree", "--out", "o.h", "--max-depth", "7", "r.h"])

    overrides = args_to_overrides(args)

    assert overrides["expand_all"] is True
    assert overrides["dry_run"] is True
    assert overrides["print_tree"] is True
    assert overrides["output_path"] == "o.h"
    assert overrides["max_depth"] == 7


def test_include_paths_are_ordered():
    args = parse_args(["-I", "first", "--include", "second", "-Ithird", "r.h"])

    assert args_to_overrides(args)["include_paths"] == ["first", "second", "third"]


def test_defaults_are_absent_from_overrides():
    overrides = args_to_overrides(parse_args(["r.h"]))

    assert overrides == {"input_path": "r.h"}


def test_unknown_option_exits():
    with pytest.raises(SystemExit) as exc:
        parse_args(["--bogus", "r.h"])
    assert exc.value.code == 2
