"""
worldcal.formatter.compiler
---------------------------
Single left-to-right scan turning a pattern string into directives.

Grammar:
  'text'      literal, up to the matching quote ('' is an empty literal)
  d D m y     day-of-month, day-of-year, month number, year; padded to the run length
  M E W       month, era, weekday name; run length 1..4+ selects the form
  space - /   passed through as one-character literals
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from ..core.errors import FormatSyntaxError
from ..core.types import Form
from .directives import NAMED, NUMERIC, Directive, Literal, Name, Number, merge_literals

logger = logging.getLogger(__name__)

QUOTE = "'"
PASS_THROUGH = frozenset(" -/")


def compile_pattern(pattern: str) -> Tuple[Directive, ...]:
    out: List[Directive] = []
    i, n = 0, len(pattern)

    while i < n:
        ch = pattern[i]

        if ch == QUOTE:
            end = pattern.find(QUOTE, i + 1)
            if end < 0:
                raise FormatSyntaxError(
                    f"Unterminated literal starting at position {i} in pattern {pattern!r}"
                )
            out.append(Literal(pattern[i + 1:end]))
            i = end + 1
            continue

        if ch in PASS_THROUGH:
            out.append(Literal(ch))
            i += 1
            continue

        if ch not in NUMERIC and ch not in NAMED:
            raise FormatSyntaxError(
                f"Unknown directive {ch!r} at position {i} in pattern {pattern!r}"
            )

        j = i
        while j < n and pattern[j] == ch:
            j += 1
        run = j - i

        if ch in NUMERIC:
            out.append(Number(ch, run))
        else:
            out.append(Name(ch, Form.from_count(run)))
        i = j

    directives = merge_literals(out)
    logger.debug("compiled %r into %d directives", pattern, len(directives))
    return directives
