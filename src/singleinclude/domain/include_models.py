from __future__ import annotations

"""
Include Dependency Tree Data Models.

Provides the recursive node type recording, for every include directive
encountered while flattening, its resolved identity and disposition,
nested under the file that contains it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List

# -----------------------------------------------------------------------------
# DIRECTIVES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Directive:
    """
    A parsed include line.

    Attributes:
        raw_text: The source line without its line terminator.
        target_name: Filename written between the delimiters.
        is_angled: True for <...>, False for "...".
    """
    raw_text: str
    target_name: str
    is_angled: bool

    @property
    def quoted_name(self) -> str:
        return quote_name(self.target_name, self.is_angled)


class Disposition(Enum):
    """Outcome of one include occurrence."""
    EXPANDED = "expanded"
    ALREADY_INCLUDED = "already included"
    NOT_FOUND = "not found"

    @property
    def label(self) -> str:
        return self.value


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class FileNode:
    """
    A node of the include dependency tree.

    Children are appended in source order while the file is scanned and the
    node is left untouched once its subtree is complete. Each node owns its
    children exclusively; the same physical file may appear at several
    places in the tree.

    Attributes:
        path: Canonical path when resolved, raw target name otherwise.
        disposition: What happened to this include occurrence.
        is_angled: Quoting style of the directive that produced this node.
        children: One node per include directive found in this file.
    """
    path: str
    disposition: Disposition = Disposition.EXPANDED
    is_angled: bool = False
    children: List["FileNode"] = field(default_factory=list)

    @property
    def quoted_name(self) -> str:
        return quote_name(self.path, self.is_angled)

    def walk(self) -> Iterator["FileNode"]:
        """Yield this node and every descendant, depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, path: str) -> List["FileNode"]:
        """Return every node in the subtree whose identity equals path."""
        return [node for node in self.walk() if node.path == path]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "disposition": self.disposition.label,
            "is_angled": self.is_angled,
            "children": [child.to_dict() for child in self.children],
        }


def quote_name(name: str, is_angled: bool) -> str:
    """Wrap a name in the delimiters of its include style."""
    if is_angled:
        return f"<{name}>"
    return f'"{name}"'
