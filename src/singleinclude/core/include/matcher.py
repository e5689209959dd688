from __future__ import annotations

"""
Include Directive Matcher.

Recognizes lines of the form `#include <name>` or `#include "name"` and
extracts the target filename and its quoting style. Matching is strictly
line-level: there is no awareness of comments, macros or line splicing.
"""

import re
from typing import Optional

from singleinclude.domain.include_models import Directive

# Whole-line match; anything else on the line makes it plain text
INCLUDE_RX = re.compile(r'^\s*#\s*include\s*(<.*>|".*")\s*$')

_NAME_TERMINATORS = frozenset('>"')


def is_directive(line: str) -> bool:
    return INCLUDE_RX.match(line) is not None


def parse_directive(line: str) -> Optional[Directive]:
    """
    Parse one source line into a Directive.

    The filename starts after the opening delimiter, skipping leading
    whitespace, and stops at the first closing delimiter or whitespace.

    Args:
        line: Source line without its line terminator.

    Returns:
        Optional[Directive]: The directive, or None for plain text.
    """
    m = INCLUDE_RX.match(line)
    if m is None:
        return None

    quoted = m.group(1)
    is_angled = quoted.startswith("<")

    body = quoted[1:].lstrip()
    end = 0
    while end < len(body) and body[end] not in _NAME_TERMINATORS and not body[end].isspace():
        end += 1

    return Directive(raw_text=line, target_name=body[:end], is_angled=is_angled)
