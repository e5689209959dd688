from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the flattener and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from singleinclude.domain.constants import APP_VERSION, DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

_DESCRIPTION = "A small program to generate a single include file for C/C++"

_ALL_HELP = (
    "Expand all files found, no matter whether it has been expanded before. "
    "By default, if one file has been expanded before, it will be omitted later. "
    "This may be helpful if you use macros to choose which file to include, "
    "as this program does not understand macros."
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the SingleInclude CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="singleinclude",
        description=_DESCRIPTION,
    )

    p.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Root file to flatten.",
    )

    # --- Expansion Policy ---
    p.add_argument("-a", "--all", dest="expand_all", action="store_true", help=_ALL_HELP)
    p.add_argument(
        "-I", "--include",
        dest="include_paths",
        action="append",
        default=None,
        metavar="PATH",
        help="Add PATH to include paths (repeatable, searched in order).",
    )
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        metavar="N",
        help=f"Abort when includes nest deeper than N levels (default {DEFAULT_MAX_DEPTH}, at most {MAX_DEPTH_LIMIT}).",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--out",
        dest="output_path",
        default=None,
        metavar="FILE",
        help="Set the output file name to FILE. By default, the output is printed to the console.",
    )
    p.add_argument(
        "-d", "--dry",
        dest="dry_run",
        action="store_true",
        help="Dry run mode, do not output the flattened file.",
    )
    p.add_argument("-t", "--tree", dest="print_tree", action="store_true", help="Print dependency tree.")
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result and dependency tree as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print more information to stderr (implicitly includes --tree).",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        metavar="FILE",
        help="Load settings from a JSON file; command line flags take precedence.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        metavar="FILE",
        help="Also write diagnostics to a rotating log file.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Only flags actually given on the command line are present, so the
    result can be layered over a configuration file.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.files:
        overrides["input_path"] = args.files[0]
    if args.include_paths:
        overrides["include_paths"] = list(args.include_paths)
    if args.output_path is not None:
        overrides["output_path"] = args.output_path
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth

    if args.expand_all:
        overrides["expand_all"] = True
    if args.dry_run:
        overrides["dry_run"] = True
    if args.print_tree:
        overrides["print_tree"] = True
    if args.verbose:
        overrides["verbose"] = True

    return overrides
