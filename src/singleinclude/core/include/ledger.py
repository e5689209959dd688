from __future__ import annotations

"""
Inclusion Ledger.

Records the canonical identity of every file whose expansion has started
during one flatten run. Entries are only ever added.
"""

from typing import Iterator, Set


class InclusionLedger:
    """Set of canonical paths shared by reference across the recursion."""

    def __init__(self) -> None:
        self._paths: Set[str] = set()

    def add(self, path: str) -> None:
        self._paths.add(path)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))
