# adaptor.py
# SPDX-License-Identifier: MIT
"""Lookahead iterator turning DCAT records into publishable resources.

:class:`DcatIteratorAdaptor` owns a record source and hands out
:class:`DcatIterator` objects. Each iterator pulls records lazily, skips
records with no distribution whose format matches the configured pattern,
and keeps at most one qualifying access URL buffered so that
:meth:`DcatIterator.has_next` can answer without consuming it.

Typical use::

    with DcatIteratorAdaptor("json", proxy, source) as adaptor:
        for resource in adaptor:
            publish(resource.access_url)

Closing the adaptor closes the source exactly once and ends every iterator
derived from it, including ones created later.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Self, Union

from .interfaces import CatalogRecordLike, Proxy, RecordSource
from .log import get_logger
from .matching import FormatMatcher
from .records import PublishableResource
from .selection import NO_MATCH, select_access_url

__all__ = [
    "IteratorState",
    "IteratorStats",
    "IteratorContext",
    "NoElementsAvailable",
    "DcatIterator",
    "DcatIteratorAdaptor",
]

log = get_logger(__name__)


class NoElementsAvailable(LookupError):
    """Raised by :meth:`DcatIterator.take` when no resource is pending.

    This signals caller misuse (taking without a successful ``has_next``)
    and is never raised for failures of the record source, which propagate
    unchanged.
    """


class IteratorState(Enum):
    """Lookahead state of a :class:`DcatIterator`."""

    EMPTY = "empty"  # nothing cached; more records may exist
    READY = "ready"  # one access URL cached
    DONE = "done"  # source exhausted, failed, or closed


@dataclass(slots=True)
class IteratorStats:
    """Counters for one iterator."""

    pulled: int = 0
    emitted: int = 0
    skipped: int = 0


@dataclass(frozen=True, slots=True)
class IteratorContext:
    """Immutable values every iterator of one adaptor shares."""

    proxy: Proxy
    matcher: FormatMatcher


class _SourceHandle:
    """Shared, closeable reference to the adaptor's record source."""

    __slots__ = ("source", "closed")

    def __init__(self, source: Optional[RecordSource]) -> None:
        self.source = source
        self.closed = False

    def open_cursor(self) -> Optional[Iterator[CatalogRecordLike]]:
        source = self.source
        if source is None:
            return None
        iter_records = getattr(source, "iter_records", None)
        if callable(iter_records):
            return iter(iter_records())
        return iter(source)

    def close(self) -> None:
        if self.closed:
            return
        source = self.source
        # Cleared before closing so a failing close is never retried.
        self.source = None
        self.closed = True
        if source is None:
            return
        close = getattr(source, "close", None)
        if callable(close):
            log.debug("Closing record source %s", type(source).__name__)
            close()


class DcatIterator:
    """
    Filtered, forward-only view over a record source.

    The iterator follows a has-more/take-one contract: :meth:`has_next`
    pulls records until one qualifies and caches its access URL;
    :meth:`take` turns the cached URL into a :class:`PublishableResource`.
    It also implements the Python iterator protocol, so ``for`` loops and
    ``list()`` work directly.

    ``has_next`` may block, since it pulls from the source. Exceptions raised
    by the source propagate and end the iteration.
    """

    __slots__ = ("_context", "_handle", "_cursor", "_state", "_pending_url", "_stats")

    def __init__(self, context: IteratorContext, handle: _SourceHandle) -> None:
        self._context = context
        self._handle = handle
        self._cursor = None if handle.closed else handle.open_cursor()
        self._state = IteratorState.EMPTY
        self._pending_url: Optional[str] = None
        self._stats = IteratorStats()

    @property
    def state(self) -> IteratorState:
        return self._state

    @property
    def stats(self) -> IteratorStats:
        return self._stats

    def has_next(self) -> bool:
        """
        Report whether another resource is available, pulling records if needed.

        Repeated calls without an intervening :meth:`take` return the same
        answer and pull nothing further.

        Returns:
            bool: True when a resource is cached and ready to take.
        """
        if self._handle.closed:
            self._finish()
            return False
        if self._state is IteratorState.READY:
            return True
        if self._state is IteratorState.DONE:
            return False
        cursor = self._cursor
        if cursor is None:
            self._finish()
            return False

        matcher = self._context.matcher
        stats = self._stats
        try:
            for record in cursor:
                stats.pulled += 1
                url = select_access_url(record, matcher)
                if url != NO_MATCH:
                    self._pending_url = url
                    self._state = IteratorState.READY
                    return True
                stats.skipped += 1
                log.debug(
                    "Skipping record #%d (%s): no distribution format matches %r",
                    stats.pulled,
                    getattr(record, "identifier", None),
                    matcher.pattern.pattern,
                )
        except Exception:
            self._finish()
            raise

        self._finish()
        log.debug(
            "Record source exhausted: pulled=%d emitted=%d skipped=%d",
            stats.pulled,
            stats.emitted,
            stats.skipped,
        )
        return False

    def take(self) -> PublishableResource:
        """
        Return the pending resource and clear the lookahead slot.

        Raises:
            NoElementsAvailable: If no successful :meth:`has_next` preceded
                this call, or the adaptor has been closed since.
        """
        if self._handle.closed:
            self._finish()
        if self._state is not IteratorState.READY or self._pending_url is None:
            raise NoElementsAvailable("no elements available; call has_next() first")
        resource = PublishableResource(proxy=self._context.proxy, access_url=self._pending_url)
        self._pending_url = None
        self._state = IteratorState.EMPTY
        self._stats.emitted += 1
        return resource

    def _finish(self) -> None:
        self._pending_url = None
        self._cursor = None
        self._state = IteratorState.DONE

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> PublishableResource:
        if not self.has_next():
            raise StopIteration
        return self.take()


class DcatIteratorAdaptor:
    """
    Adapt a DCAT record source into publishable resources.

    Args:
        format_pattern (str | FormatMatcher | None): Regular expression the
            whole distribution format must match, case-insensitively. An
            invalid pattern silently falls back to
            :data:`~dcatsieve.core.matching.DEFAULT_FORMAT_PATTERN`.
        proxy (Proxy): Collaborator handle copied into every resource.
        source (RecordSource | None): Record source. Objects without
            ``iter_records`` are iterated directly; ``close`` is optional.

    Iterators obtained from one adaptor keep separate lookahead slots but
    read from the same source, so interleaving them splits the records
    between them. None of this is thread-safe.
    """

    def __init__(
        self,
        format_pattern: Union[str, FormatMatcher, None],
        proxy: Proxy,
        source: Optional[RecordSource],
    ) -> None:
        matcher = (
            format_pattern
            if isinstance(format_pattern, FormatMatcher)
            else FormatMatcher(format_pattern)
        )
        self._context = IteratorContext(proxy=proxy, matcher=matcher)
        self._handle = _SourceHandle(source)

    @property
    def matcher(self) -> FormatMatcher:
        return self._context.matcher

    @property
    def proxy(self) -> Proxy:
        return self._context.proxy

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def __iter__(self) -> DcatIterator:
        return DcatIterator(self._context, self._handle)

    def close(self) -> None:
        """
        Close the adaptor and its record source.

        The source is closed on the first call only; later calls do nothing.
        If the source's own ``close`` raises, the error propagates from that
        first call, and the adaptor is closed regardless.
        """
        self._handle.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
