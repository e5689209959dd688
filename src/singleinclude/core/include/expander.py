from __future__ import annotations

"""
Recursive Include Expander.

Flattens a source file by replacing each resolvable include directive with
the recursively flattened contents of its target. The dependency tree is
built as a byproduct: every call returns the flattened text together with
the FileNode describing the file it processed.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from singleinclude.core.include.ledger import InclusionLedger
from singleinclude.core.include.matcher import parse_directive
from singleinclude.core.include.resolver import resolve_include
from singleinclude.domain.constants import (
    BEGIN_MARKER,
    DEFAULT_HEADER,
    DEFAULT_MAX_DEPTH,
    END_MARKER,
    MAX_DEPTH_LIMIT,
    OMITTED_MARKER,
)
from singleinclude.domain.errors import FileError, IncludeDepthError
from singleinclude.domain.include_models import Directive, Disposition, FileNode
from singleinclude.infra.fs import canonical_path, read_source_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExpansionOptions:
    """
    Settings threaded explicitly through every recursive call.

    Attributes:
        search_paths: Configured include directories, in priority order.
        expand_all: Expand every occurrence, ignoring the ledger.
        max_depth: Deepest include nesting allowed before aborting.
    """
    search_paths: Tuple[str, ...] = ()
    expand_all: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def expand(
        path: str,
        ledger: InclusionLedger,
        options: ExpansionOptions,
        *,
        is_angled: bool = False,
        depth: int = 0,
) -> Tuple[str, FileNode]:
    """
    Flatten one file and every include reachable from it.

    The file enters the ledger before its body is scanned, so a file that
    includes itself (directly or through a cycle) resolves to an
    "already included" entry instead of recursing forever.

    Args:
        path: File to expand.
        ledger: Run-wide record of files whose expansion has started.
        options: Search paths and expansion policy.
        is_angled: Quoting style of the directive that led here.
        depth: Current include nesting, 0 for the root file.

    Returns:
        Tuple[str, FileNode]: Flattened text and the node for this file.

    Raises:
        FileError: If this file or any expanded descendant cannot be read.
        IncludeDepthError: If nesting exceeds options.max_depth.
    """
    if depth > options.max_depth:
        raise IncludeDepthError(path, options.max_depth)

    identity = canonical_path(path)
    try:
        lines = read_source_lines(identity)
    except OSError as e:
        raise FileError(f"Cannot open file {identity}: {e.strerror or e}", identity) from e

    ledger.add(identity)
    node = FileNode(path=identity, disposition=Disposition.EXPANDED, is_angled=is_angled)

    out: List[str] = []
    for line in lines:
        directive = parse_directive(line)
        if directive is None:
            out.append(line + "\n")
            continue
        out.append(_expand_directive(directive, identity, node, ledger, options, depth))

    return "".join(out), node


def flatten(
        root_path: str,
        search_paths: Sequence[str] = (),
        *,
        expand_all: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
        header: str = DEFAULT_HEADER,
) -> Tuple[str, FileNode, InclusionLedger]:
    """
    Run a complete expansion with a fresh ledger and prefix the header.

    Args:
        root_path: File to flatten.
        search_paths: Include directories, in priority order.
        expand_all: Disable duplicate suppression.
        max_depth: Recursion bound, 1 to MAX_DEPTH_LIMIT.
        header: Static comment block placed before the flattened text.

    Returns:
        Tuple[str, FileNode, InclusionLedger]: Output text, tree root and
        the ledger of every expanded file.

    Raises:
        ValueError: If max_depth is outside 1..MAX_DEPTH_LIMIT.
    """
    ledger = InclusionLedger()
    options = ExpansionOptions(
        search_paths=tuple(search_paths),
        expand_all=expand_all,
        max_depth=max_depth,
    )
    text, root = expand(root_path, ledger, options)
    return header + text, root, ledger


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _expand_directive(
        directive: Directive,
        including_file: str,
        parent: FileNode,
        ledger: InclusionLedger,
        options: ExpansionOptions,
        depth: int,
) -> str:
    """Resolve one directive, record its child node and return its text."""
    logger.debug(f"Found include file {directive.quoted_name} in {including_file}")

    resolved = resolve_include(
        directive.target_name,
        directive.is_angled,
        including_file,
        options.search_paths,
    )

    if resolved is None:
        logger.debug(
            f"Ignore include file {directive.quoted_name} because of not found "
            f"(may be system header)"
        )
        parent.children.append(
            FileNode(directive.target_name, Disposition.NOT_FOUND, directive.is_angled)
        )
        return directive.raw_text + "\n"

    if resolved in ledger and not options.expand_all:
        logger.debug(f"Include file {resolved} already expanded, omitted")
        parent.children.append(
            FileNode(resolved, Disposition.ALREADY_INCLUDED, directive.is_angled)
        )
        return OMITTED_MARKER.format(line=directive.raw_text)

    content, child = expand(
        resolved,
        ledger,
        options,
        is_angled=directive.is_angled,
        depth=depth + 1,
    )
    parent.children.append(child)
    return (
        BEGIN_MARKER.format(line=directive.raw_text)
        + content
        + END_MARKER.format(line=directive.raw_text)
    )
