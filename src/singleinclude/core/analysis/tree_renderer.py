from __future__ import annotations

"""
Include Tree Renderer.

Converts the dependency tree into ASCII lines, depth-first and pre-order,
and assembles the full dependency report printed in verbose mode.
"""

from typing import List

from singleinclude.domain.include_models import FileNode
from singleinclude.domain.pipeline_models import FlattenResult

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_include_tree(root: FileNode) -> List[str]:
    """
    Render a dependency tree as a list of lines.

    The root is printed flush left; descendants use standard ASCII
    connectors (├──, └──). Each line shows the quoted identity and the
    disposition label, e.g. `"/src/a.h" (expanded)`.

    Args:
        root: Tree root returned by the expander.

    Returns:
        List[str]: One line per node, in pre-order.
    """
    lines = [_format_node(root)]
    _render_children(root, lines, prefix="")
    return lines


def render_dependency_report(result: FlattenResult) -> List[str]:
    """
    Build the verbose report: target, search paths, ledger and tree.

    Args:
        result: A successful flatten result.

    Returns:
        List[str]: Report lines.
    """
    lines = [f"Target name: {result.input_path}", "Include paths:"]
    lines.extend(f"\t{p}" for p in result.include_paths)
    lines.append("All included files:")
    lines.extend(f"\t{p}" for p in result.included_files)
    lines.append("Tree view:")
    if result.tree is not None:
        lines.extend(render_include_tree(result.tree))
    return lines


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_children(node: FileNode, lines: List[str], prefix: str) -> None:
    total = len(node.children)
    for i, child in enumerate(node.children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_format_node(child)}")
        _render_children(child, lines, prefix + ("    " if is_last else "│   "))


def _format_node(node: FileNode) -> str:
    return f"{node.quoted_name} ({node.disposition.label})"
