from __future__ import annotations

"""
Unit tests for the Include Tree Renderer.

Verifies pre-order traversal, connector indentation, quoting style and
disposition labels, and the layout of the verbose dependency report.
"""

from singleinclude.core.analysis.tree_renderer import (
    render_dependency_report,
    render_include_tree,
)
from singleinclude.domain.include_models import Disposition, FileNode
from singleinclude.domain.pipeline_models import create_success_result


def _sample_tree() -> FileNode:
    """
    a.h
      b.h (expanded)
        <vector> (not found)
      c.h (already included)
    """
    b = FileNode("/p/b.h", Disposition.EXPANDED, False, [
        FileNode("vector", Disposition.NOT_FOUND, True),
    ])
    c = FileNode("/p/b.h", Disposition.ALREADY_INCLUDED, False)
    return FileNode("/p/a.h", Disposition.EXPANDED, False, [b, c])


def test_render_single_node():
    lines = render_include_tree(FileNode("/p/a.h"))
    assert lines == ['"/p/a.h" (expanded)']


def test_render_nested_tree_pre_order():
    lines = render_include_tree(_sample_tree())

    assert lines == [
        '"/p/a.h" (expanded)',
        '├── "/p/b.h" (expanded)',
        '│   └── <vector> (not found)',
        '└── "/p/b.h" (already included)',
    ]


def test_dependency_report_sections():
    tree = _sample_tree()
    result = create_success_result(
        {"output_path": "", "dry_run": True},
        input_path="/p/a.h",
        include_paths=["/inc"],
        text="",
        tree=tree,
        included_files=["/p/a.h", "/p/b.h"],
    )

    lines = render_dependency_report(result)

    assert lines[0] == "Target name: /p/a.h"
    assert lines[1:3] == ["Include paths:", "\t/inc"]
    assert lines[3:6] == ["All included files:", "\t/p/a.h", "\t/p/b.h"]
    assert lines[6] == "Tree view:"
    assert lines[7:] == render_include_tree(tree)
