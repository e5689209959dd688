from __future__ import annotations

"""
Core flatten pipeline.

This module coordinates a complete run:
1. Validates the configuration.
2. Checks and canonicalizes the root file and include directories.
3. Expands the root file recursively with a fresh inclusion ledger.
4. Writes the flattened output to disk (unless dry-run or stdout).
5. Packages text, dependency tree and statistics into a FlattenResult.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional

from singleinclude.core.include.expander import flatten
from singleinclude.core.pipeline.validator import validate_config
from singleinclude.domain.constants import ExitCode
from singleinclude.domain.errors import ConfigError, FileError, SingleIncludeError
from singleinclude.domain.include_models import FileNode
from singleinclude.domain.pipeline_models import (
    FlattenResult,
    create_error_result,
    create_success_result,
)
from singleinclude.infra.fs import (
    canonical_path,
    is_directory,
    is_regular_file,
    normalize_path,
    write_output_file,
)

logger = logging.getLogger(__name__)


def run_pipeline(config: Optional[Dict[str, Any]]) -> FlattenResult:
    """
    Execute a full flatten run.

    Fatal errors never escape: they are logged and returned as a failed
    result without any partial output.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        FlattenResult: Status, flattened text, tree and statistics.
    """
    logger.info("Flatten pipeline started.")

    # -------------------------------------------------------------------------
    # 1) Config Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    # -------------------------------------------------------------------------
    # 2) Pre-flight Path Checks
    # -------------------------------------------------------------------------
    try:
        input_path = resolve_input_file(cfg["input_path"])
        include_paths = resolve_include_dirs(cfg["include_paths"])
    except ConfigError as e:
        logger.error(str(e))
        return create_error_result(str(e), cfg, exit_code=e.exit_code)

    logger.debug(f"Target name: {input_path}")
    for p in include_paths:
        logger.debug(f"Include path: {p}")

    # -------------------------------------------------------------------------
    # 3) Recursive Expansion
    # -------------------------------------------------------------------------
    try:
        text, tree, ledger = flatten(
            input_path,
            include_paths,
            expand_all=cfg["expand_all"],
            max_depth=cfg["max_depth"],
            header=cfg["header"],
        )
    except SingleIncludeError as e:
        logger.error(f"Flatten aborted: {e}")
        return create_error_result(
            _describe_fatal(e), cfg,
            exit_code=e.exit_code,
            input_path=input_path,
            include_paths=include_paths,
        )

    # -------------------------------------------------------------------------
    # 4) Output Persistence
    # -------------------------------------------------------------------------
    output_path = cfg["output_path"]
    written = False
    if output_path and not cfg["dry_run"]:
        ok, err = write_output_file(output_path, text)
        if not ok:
            msg = f"File error: Cannot open output file: {output_path}"
            logger.error(f"{msg} ({err})")
            return create_error_result(
                msg, cfg,
                exit_code=ExitCode.FILE_ERROR,
                input_path=input_path,
                include_paths=include_paths,
            )
        written = True
        logger.info(f"Flattened output written to {output_path}")

    summary = summarize_tree(tree)
    summary.update({
        "lines": text.count("\n"),
        "written": written,
        "dry_run": cfg["dry_run"],
    })

    logger.info(
        f"Flatten finished: {summary['expanded']} expanded, "
        f"{summary['already_included']} omitted, {summary['not_found']} not found."
    )

    return create_success_result(
        cfg,
        input_path=input_path,
        include_paths=include_paths,
        text=text,
        tree=tree,
        included_files=list(ledger),
        summary_extra=summary,
    )


# -----------------------------------------------------------------------------
# PRE-FLIGHT HELPERS
# -----------------------------------------------------------------------------

def resolve_input_file(raw_path: str) -> str:
    """
    Check that the root file exists as a regular file and canonicalize it.

    Raises:
        ConfigError: TOO_FEW_ARGUMENTS when empty, FILE_NOT_EXIST otherwise.
    """
    if not raw_path:
        raise ConfigError("No input file given", exit_code=ExitCode.TOO_FEW_ARGUMENTS)
    path = normalize_path(raw_path)
    if not is_regular_file(path):
        raise ConfigError(f"{raw_path}: File doesn't exist", raw_path,
                          exit_code=ExitCode.FILE_NOT_EXIST)
    return canonical_path(path)


def resolve_include_dirs(raw_paths: List[str]) -> List[str]:
    """
    Check every include directory and canonicalize it, preserving order.

    Raises:
        ConfigError: DIR_NOT_EXIST for the first missing directory.
    """
    resolved: List[str] = []
    for raw in raw_paths:
        path = normalize_path(raw)
        if not is_directory(path):
            raise ConfigError(f"{raw}: Directory doesn't exist", raw,
                              exit_code=ExitCode.DIR_NOT_EXIST)
        resolved.append(canonical_path(path))
    return resolved


def summarize_tree(root: FileNode) -> Dict[str, Any]:
    """Count include occurrences per disposition, excluding the root."""
    counts = Counter(node.disposition.name.lower() for node in root.walk())
    # The root is always expanded and is not an include occurrence
    counts["expanded"] -= 1
    return {
        "expanded": counts.get("expanded", 0),
        "already_included": counts.get("already_included", 0),
        "not_found": counts.get("not_found", 0),
    }


def _describe_fatal(error: SingleIncludeError) -> str:
    if isinstance(error, FileError):
        return f"File error: {error}"
    return str(error)
