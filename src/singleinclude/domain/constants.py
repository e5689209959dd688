from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the static header injected at the top of
every flattened output, the marker comment templates that wrap expanded
includes, and the process exit codes shared by the CLI and the pipeline.
"""

from enum import IntEnum

APP_NAME = "SingleInclude"
APP_VERSION = "1.0.0"

DEFAULT_MAX_DEPTH = 200

# Each include level costs two interpreter frames; stay clear of the default
# recursion limit of 1000
MAX_DEPTH_LIMIT = 300

# Emitted verbatim at the top of every flattened output
DEFAULT_HEADER = (
    "// This file is generated automatically by SingleInclude\n"
    "// It's suggested not to edit anything below\n"
    "// If you found any issue, please report to "
    "https://github.com/dragon-archer/SingleInclude/issues\n"
)

# -----------------------------------------------------------------------------
# MARKER COMMENTS
# -----------------------------------------------------------------------------

# Wording is kept bit-exact with previously generated outputs ("expended").
BEGIN_MARKER = "// {line}\n"
END_MARKER = "// End {line}\n"
OMITTED_MARKER = "// {line} (omitted because it has been expended)\n"


# -----------------------------------------------------------------------------
# PROCESS EXIT CODES
# -----------------------------------------------------------------------------

class ExitCode(IntEnum):
    """Process exit codes returned by the command line interface."""
    OK = 0
    TOO_FEW_ARGUMENTS = 1
    FILE_NOT_EXIST = 2
    DIR_NOT_EXIST = 3
    UNKNOWN_OPTION = 4
    TOO_MANY_INPUT = 5
    FILE_ERROR = 6
    INTERRUPTED = 130
