from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object handed back by the flatten pipeline to the
interface layer, together with its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from singleinclude.domain.constants import ExitCode
from singleinclude.domain.include_models import FileNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FlattenResult:
    """
    Unified result object of a complete flatten run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        exit_code: Process exit code matching the outcome.
        input_path: Canonical root file processed.
        include_paths: Canonical search directories, in order.
        output_path: Destination file, empty when printing to stdout.
        dry_run: Whether writing the output was skipped.
        expand_all: Whether duplicate suppression was disabled.
        print_tree: Whether the dependency tree should be shown.
        verbose: Whether the full dependency report should be shown.
        text: Flattened output including the static header.
        tree: Root of the dependency tree (None on failure).
        included_files: Sorted canonical paths recorded by the ledger.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    exit_code: int

    input_path: str
    include_paths: List[str] = field(default_factory=list)
    output_path: str = ""
    dry_run: bool = False
    expand_all: bool = False
    print_tree: bool = False
    verbose: bool = False

    text: str = ""
    tree: Optional[FileNode] = None
    included_files: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "error": self.error,
            "exit_code": int(self.exit_code),
            "input_path": self.input_path,
            "include_paths": list(self.include_paths),
            "output_path": self.output_path,
            "dry_run": self.dry_run,
            "expand_all": self.expand_all,
            "print_tree": self.print_tree,
            "verbose": self.verbose,
            "tree": self.tree.to_dict() if self.tree else None,
            "included_files": list(self.included_files),
            "summary": dict(self.summary),
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        exit_code: int = ExitCode.FILE_ERROR,
        input_path: str = "",
        include_paths: Optional[List[str]] = None,
) -> FlattenResult:
    """
    Create a failed flatten result. Partial output is never carried.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        exit_code: Exit code matching the failure category.
        input_path: Root file as far as it could be resolved.
        include_paths: Search directories as far as they could be resolved.

    Returns:
        FlattenResult: An immutable error result object.
    """
    return FlattenResult(
        ok=False,
        error=error,
        exit_code=exit_code,
        input_path=input_path or cfg.get("input_path", ""),
        include_paths=include_paths if include_paths is not None else list(cfg.get("include_paths", [])),
        output_path=cfg.get("output_path", ""),
        dry_run=cfg.get("dry_run", False),
        expand_all=cfg.get("expand_all", False),
        print_tree=cfg.get("print_tree", False),
        verbose=cfg.get("verbose", False),
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_path: str,
        include_paths: List[str],
        text: str,
        tree: FileNode,
        included_files: List[str],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> FlattenResult:
    """
    Create a successful flatten result.

    Args:
        cfg: Final configuration used during execution.
        input_path: Canonical root file.
        include_paths: Canonical search directories.
        text: Flattened output including the header.
        tree: Root of the dependency tree.
        included_files: Ledger contents, sorted.
        summary_extra: Execution statistics.

    Returns:
        FlattenResult: An immutable success result object.
    """
    return FlattenResult(
        ok=True,
        error="",
        exit_code=ExitCode.OK,
        input_path=input_path,
        include_paths=include_paths,
        output_path=cfg.get("output_path", ""),
        dry_run=cfg.get("dry_run", False),
        expand_all=cfg.get("expand_all", False),
        print_tree=cfg.get("print_tree", False),
        verbose=cfg.get("verbose", False),
        text=text,
        tree=tree,
        included_files=included_files,
        summary=summary_extra or {},
    )
