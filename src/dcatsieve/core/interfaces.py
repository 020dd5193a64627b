# interfaces.py
# SPDX-License-Identifier: MIT
"""Protocols describing the collaborators the adaptor consumes."""

from __future__ import annotations

from typing import Any, Iterable, Protocol, Sequence, runtime_checkable

__all__ = [
    "DistributionLike",
    "CatalogRecordLike",
    "RecordSource",
    "ClosableSource",
    "Proxy",
]


# Opaque collaborator handle copied into every PublishableResource; never inspected.
Proxy = Any


# -----------------------------------------------------------------------------
# Record shapes
# -----------------------------------------------------------------------------


@runtime_checkable
class DistributionLike(Protocol):
    """
    One candidate representation of a dataset.

    Attributes:
        format (str): Declared format label, e.g. ``"CSV"`` or
            ``"application/xml"``.
        access_url (str): Location the content can be retrieved from.
    """

    format: str
    access_url: str


@runtime_checkable
class CatalogRecordLike(Protocol):
    """A catalog record exposing its distributions in declared order."""

    distributions: Sequence[DistributionLike]


# -----------------------------------------------------------------------------
# Record sources
# -----------------------------------------------------------------------------


@runtime_checkable
class RecordSource(Protocol):
    """
    Forward-only producer of catalog records.

    Implementations are usually thin wrappers around a feed parser. The
    records they yield are read-only to this package and may be produced
    lazily; pulling the next record may block on I/O.
    """

    def iter_records(self) -> Iterable[CatalogRecordLike]:
        """
        Yield catalog records in feed order.

        Yields:
            CatalogRecordLike: Next record from the feed.
        """
        ...


@runtime_checkable
class ClosableSource(Protocol):
    """Optional extension for sources that hold a parser, file, or socket."""

    def close(self) -> None:
        """Release any held resources."""
        ...
