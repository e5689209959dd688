from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and canonicalization, line reading for source
files, and persistence of the flattened output. Acts as an abstraction over
the 'os' module so the include core never touches raw file handles.
"""

import os
from typing import List, Optional, Tuple

# Byte-transparent decoding: undecodable bytes round-trip unchanged on write
SOURCE_ENCODING = "utf-8"
SOURCE_ERRORS = "surrogateescape"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str = "") -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path, or "" when both inputs are empty.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    if not p:
        return ""
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def canonical_path(path: str) -> str:
    """Collapse symlinks and relative segments into a single identity."""
    return os.path.realpath(path)


def is_regular_file(path: str) -> bool:
    return os.path.isfile(path)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)

# -----------------------------------------------------------------------------
# IO OPERATIONS
# -----------------------------------------------------------------------------

def read_source_lines(file_path: str) -> List[str]:
    """
    Read a source file completely and return its lines without terminators.

    Universal newline decoding normalizes CRLF and CR to LF. The handle is
    released before returning.

    Args:
        file_path: Path to the file.

    Returns:
        List[str]: Lines of the file, terminators stripped.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(file_path, "r", encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS) as f:
        return [line.rstrip("\n") for line in f]


def write_output_file(output_path: str, content: str) -> Tuple[bool, Optional[str]]:
    """
    Persist the flattened content, creating parent directories as needed.

    Args:
        output_path: Destination file.
        content: Text to write, LF terminated.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        parent = os.path.dirname(os.path.abspath(output_path))
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(output_path, "w", encoding=SOURCE_ENCODING,
                  errors=SOURCE_ERRORS, newline="\n") as out:
            out.write(content)
        return True, None
    except OSError as e:
        return False, str(e)
