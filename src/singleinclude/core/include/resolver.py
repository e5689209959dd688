from __future__ import annotations

"""
Include Path Resolver.

Maps an include target onto a file by walking an ordered list of search
directories. Quoted includes look next to the including file first;
angled includes only consult the configured search paths.
"""

import logging
import os
from typing import List, Optional, Sequence

from singleinclude.infra.fs import canonical_path, is_regular_file

logger = logging.getLogger(__name__)


def build_search_list(
        is_angled: bool,
        including_file: str,
        search_paths: Sequence[str],
) -> List[str]:
    """
    Compute the directories tried for one include, in priority order.

    Args:
        is_angled: Quoting style of the directive.
        including_file: Path of the file containing the directive.
        search_paths: Configured include directories.

    Returns:
        List[str]: Candidate directories. The configured list is not mutated.
    """
    candidates = list(search_paths)
    if not is_angled:
        candidates.insert(0, os.path.dirname(including_file))
    return candidates


def resolve_include(
        target_name: str,
        is_angled: bool,
        including_file: str,
        search_paths: Sequence[str],
) -> Optional[str]:
    """
    Find the first regular file matching target_name.

    Args:
        target_name: Filename written in the directive.
        is_angled: Quoting style of the directive.
        including_file: Path of the file containing the directive.
        search_paths: Configured include directories.

    Returns:
        Optional[str]: Canonical path of the match, or None when no
        directory contains it (expected for genuine system headers).
    """
    if not target_name:
        return None

    for directory in build_search_list(is_angled, including_file, search_paths):
        candidate = os.path.join(directory, target_name)
        if is_regular_file(candidate):
            resolved = canonical_path(candidate)
            logger.debug(f"Include {target_name} resolved to {resolved}")
            return resolved

    return None
