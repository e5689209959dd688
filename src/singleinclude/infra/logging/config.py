from __future__ import annotations

"""
Logging Settings.

The CLI runs quiet (warnings and errors only) unless verbose output is
requested, in which case every expansion step is traced at DEBUG. INFO is
kept for library callers that want pipeline milestones without the trace.
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, Optional

QUIET_LEVEL = "WARNING"
VERBOSE_LEVEL = "DEBUG"

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging bootstrap.

    Attributes:
        level: One of DEBUG, INFO or WARNING.
        console: Mirror records to stderr (stdout carries flattened text).
        log_file: Optional path for a rotating log of the run.
        max_bytes: Rotation threshold of the log file.
        backup_count: Rotated log files kept next to the current one.
        console_fmt: Record layout on stderr.
        file_fmt: Record layout in the log file.
        datefmt: Timestamp layout in the log file.
    """
    level: str = QUIET_LEVEL
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    def with_verbosity(self, verbose: bool) -> LoggingConfig:
        """Copy of these settings at the level matching the verbose switch."""
        return replace(self, level=VERBOSE_LEVEL if verbose else QUIET_LEVEL)
