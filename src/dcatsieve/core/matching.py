# matching.py
# SPDX-License-Identifier: MIT
"""Case-insensitive matching of distribution format labels.

Operators configure a regular expression that a distribution's ``format``
must match *in full* for its access URL to be harvested. A pattern that
fails to compile is never reported as an error: it is replaced by
:data:`DEFAULT_FORMAT_PATTERN` and a single warning is logged naming the
rejected pattern.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern

from .log import get_logger

__all__ = [
    "DEFAULT_FORMAT_PATTERN",
    "FormatMatcher",
    "compile_format_pattern",
]

log = get_logger(__name__)

# Any format label mentioning XML, e.g. "XML", "application/xml", "text/xml",
# "application/rdf+xml". Used whenever the configured pattern is unusable.
DEFAULT_FORMAT_PATTERN = r".*xml.*"


def compile_format_pattern(pattern: Optional[str]) -> tuple[Pattern[str], bool]:
    """
    Compile ``pattern`` case-insensitively, falling back to the default.

    Args:
        pattern (str | None): Operator-supplied regular expression.

    Returns:
        tuple[Pattern[str], bool]: The compiled pattern and whether the
        default had to be substituted.
    """
    try:
        return re.compile(pattern, re.IGNORECASE), False
    except (re.error, TypeError, ValueError, OverflowError) as exc:
        log.warning(
            "Invalid format pattern %r (%s); using default %r",
            pattern,
            exc,
            DEFAULT_FORMAT_PATTERN,
        )
    return re.compile(DEFAULT_FORMAT_PATTERN, re.IGNORECASE), True


class FormatMatcher:
    """Full-string, case-insensitive matcher for distribution formats.

    ``FormatMatcher("json").matches("JSON")`` is True while
    ``matches("application/json")`` is False: the whole label has to match.
    """

    __slots__ = ("_pattern", "_used_fallback")

    def __init__(self, pattern: Optional[str] = DEFAULT_FORMAT_PATTERN) -> None:
        self._pattern, self._used_fallback = compile_format_pattern(pattern)

    @property
    def pattern(self) -> Pattern[str]:
        return self._pattern

    @property
    def used_fallback(self) -> bool:
        """True when the supplied pattern was rejected and the default is in use."""
        return self._used_fallback

    def matches(self, candidate: Optional[str]) -> bool:
        if candidate is None:
            return False
        return self._pattern.fullmatch(candidate) is not None

    def __repr__(self) -> str:
        return f"FormatMatcher({self._pattern.pattern!r}, used_fallback={self._used_fallback})"
