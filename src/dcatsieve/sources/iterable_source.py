# iterable_source.py
# SPDX-License-Identifier: MIT

"""Record source backed by an in-memory iterable or a generator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from ..core.interfaces import CatalogRecordLike, RecordSource
from ..core.log import get_logger
from ..core.records import coerce_record

__all__ = ["IterableRecordSource"]

log = get_logger(__name__)


class IterableRecordSource(RecordSource):
    """Expose an iterable of records through the record-source contract.

    Every call to :meth:`iter_records` returns the same forward-only cursor,
    so a list is consumed once just like a feed parser would be. Mapping
    items (DCAT-JSON ``dataset`` entries) are turned into
    :class:`~dcatsieve.core.records.DcatRecord` when ``coerce`` is true;
    other objects are yielded untouched.

    Args:
        records (Iterable[Any]): Records, mappings, or a generator of either.
        coerce (bool): Whether to parse mapping items.
    """

    def __init__(self, records: Iterable[Any], *, coerce: bool = True) -> None:
        self._records = records
        self._coerce = coerce
        self._cursor: Iterator[CatalogRecordLike] | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def iter_records(self) -> Iterator[CatalogRecordLike]:
        """Return the shared record cursor; empty once the source is closed."""
        if self._closed:
            return iter(())
        if self._cursor is None:
            self._cursor = self._generate()
        return self._cursor

    def _generate(self) -> Iterator[CatalogRecordLike]:
        for item in self._records:
            if self._closed:
                return
            yield coerce_record(item) if self._coerce else item

    def close(self) -> None:
        """Close the cursor and the wrapped iterable, once."""
        if self._closed:
            return
        self._closed = True
        cursor, self._cursor = self._cursor, None
        if cursor is not None:
            cursor.close()
        close = getattr(self._records, "close", None)
        if callable(close):
            log.debug("Closing wrapped record iterable %s", type(self._records).__name__)
            close()
