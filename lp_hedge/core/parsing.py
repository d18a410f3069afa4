"""Fallible parsing of free-text numeric input"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParseResult:
    """
    Tagged outcome of parsing a raw text value.

    Exactly one of value / error is meaningful, selected by ok.
    """

    ok: bool
    value: Optional[float] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: float) -> ParseResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> ParseResult:
        return cls(ok=False, error=error)


def parse_number(text) -> ParseResult:
    """
    Parse user text into a finite float.

    Args:
        text: Raw field value (surrounding whitespace is ignored)

    Returns:
        ParseResult.success(value) or ParseResult.failure(reason)
    """
    if text is None:
        return ParseResult.failure("no value")

    raw = str(text).strip()
    if not raw:
        return ParseResult.failure("empty value")

    try:
        value = float(raw)
    except ValueError:
        return ParseResult.failure(f"not a number: {raw!r}")

    if not math.isfinite(value):
        return ParseResult.failure(f"not a finite number: {raw!r}")

    return ParseResult.success(value)
