# selection.py
# SPDX-License-Identifier: MIT
"""Pick the access URL to harvest from a record's distributions."""

from __future__ import annotations

from .interfaces import CatalogRecordLike
from .matching import FormatMatcher

__all__ = ["NO_MATCH", "select_access_url"]

NO_MATCH = ""


def select_access_url(record: CatalogRecordLike, matcher: FormatMatcher) -> str:
    """
    Return the access URL of the first distribution whose format matches.

    Distributions are checked in declared order and the first full match
    wins, even when later entries match too.

    Args:
        record (CatalogRecordLike): Record to inspect.
        matcher (FormatMatcher): Compiled format matcher.

    Returns:
        str: The selected access URL, or :data:`NO_MATCH` when no
        distribution qualifies.
    """
    for dist in getattr(record, "distributions", None) or ():
        if matcher.matches(dist.format):
            return dist.access_url or NO_MATCH
    return NO_MATCH
