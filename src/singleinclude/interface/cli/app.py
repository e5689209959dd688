from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration layering (defaults, optional JSON file, command-line
overrides), pipeline execution and rendering of the flattened text,
dependency tree and errors.
"""

import io
import json
import sys
from typing import Any, Dict, List, Optional

from singleinclude.core.analysis.tree_renderer import (
    render_dependency_report,
    render_include_tree,
)
from singleinclude.core.pipeline.engine import run_pipeline
from singleinclude.core.pipeline.validator import validate_config
from singleinclude.domain.config import load_config
from singleinclude.domain.constants import ExitCode
from singleinclude.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    verbosity_to_level,
)
from singleinclude.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (see ExitCode).
    """
    _prepare_streams()

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help and --version exit with 0; usage errors with 2
        if e.code in (0, None):
            return ExitCode.OK
        return ExitCode.UNKNOWN_OPTION

    if not args.files:
        parser.print_help()
        print("Error: Too few arguments", file=sys.stderr)
        return ExitCode.TOO_FEW_ARGUMENTS
    if len(args.files) > 1:
        print("Error: Too many input files", file=sys.stderr)
        return ExitCode.TOO_MANY_INPUT

    # 2. Logging bootstrap (stdout carries the flattened text)
    logging_conf = LoggingConfig(
        level=verbosity_to_level(args.verbose),
        console=True,
        log_file=args.log_file,
    )
    configure_logging(logging_conf, force=True)
    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Configuration layering and normalization
    base_conf = load_config(args.config_file)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    cfg, warnings = validate_config(raw_conf, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    # A configuration file may ask for verbose output too
    if cfg["verbose"] and not args.verbose:
        configure_logging(logging_conf.with_verbosity(True), force=True)
        logger.debug("Verbose output enabled by the configuration file.")

    # 4. Pipeline execution phase
    try:
        result = run_pipeline(cfg)
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return ExitCode.INTERRUPTED

    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return int(result.exit_code)

    # 5. Output rendering phase
    if not result.dry_run and not result.output_path:
        sys.stdout.write(result.text)

    if args.json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    elif result.verbose:
        _print_lines(render_dependency_report(result))
    elif result.print_tree:
        _print_lines(render_include_tree(result.tree))

    sys.stdout.flush()
    return ExitCode.OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Layer command-line overrides over the base configuration.

    Include paths from the command line are searched after those from the
    configuration file; every other key is replaced.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is None:
            continue
        if k == "include_paths" and isinstance(out.get(k), list):
            out[k] = list(out[k]) + list(v)
        else:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def _prepare_streams() -> None:
    """Write UTF-8 and let undecodable source bytes pass through unchanged."""
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            try:
                stream.reconfigure(encoding="utf-8", errors="surrogateescape")
            except (ValueError, io.UnsupportedOperation):
                continue


# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
