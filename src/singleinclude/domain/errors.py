from __future__ import annotations

"""
Domain Exception Hierarchy.

Fatal conditions raised while flattening. Benign outcomes (an include that
cannot be resolved, a file that was already expanded) are never raised:
they are recorded as dispositions in the dependency tree.
"""

from typing import Optional

from singleinclude.domain.constants import ExitCode


class SingleIncludeError(Exception):
    """
    Base class for every fatal error surfaced to the caller.

    Attributes:
        exit_code: Process exit code the CLI should return.
    """
    exit_code: ExitCode = ExitCode.FILE_ERROR

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class FileError(SingleIncludeError):
    """A reachable file (root, include target or output) cannot be opened."""
    exit_code = ExitCode.FILE_ERROR


class IncludeDepthError(SingleIncludeError):
    """Include nesting exceeded the configured recursion bound."""
    exit_code = ExitCode.FILE_ERROR

    def __init__(self, path: str, max_depth: int) -> None:
        super().__init__(
            f"Include depth limit ({max_depth}) exceeded while expanding {path}",
            path,
        )
        self.max_depth = max_depth


class ConfigError(SingleIncludeError):
    """Pre-flight validation of the caller supplied paths failed."""

    def __init__(self, message: str, path: Optional[str] = None,
                 exit_code: ExitCode = ExitCode.FILE_NOT_EXIST) -> None:
        super().__init__(message, path)
        self.exit_code = exit_code
