# records.py
# SPDX-License-Identifier: MIT
"""Data model for DCAT records, their distributions, and emitted resources."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from .interfaces import Proxy
from .log import get_logger

__all__ = [
    "DcatDistribution",
    "DcatRecord",
    "PublishableResource",
    "coerce_record",
]

log = get_logger(__name__)

# DCAT-JSON key first, then tolerated aliases seen in hand-built catalogs.
_FORMAT_KEYS = ("format", "mediaType")
_ACCESS_URL_KEYS = ("accessURL", "access_url", "downloadURL")
_DISTRIBUTION_KEYS = ("distribution", "distributions")


def _first_str(data: Mapping[str, Any], keys: Iterable[str]) -> str:
    """Return the first non-empty string value among ``keys``, or ``""``."""
    for key in keys:
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


@dataclass(frozen=True, slots=True)
class DcatDistribution:
    """
    One distribution entry of a DCAT dataset.

    Attributes:
        format (str): Declared format label. Empty when the feed omits it.
        access_url (str): URL the distribution is served from.
    """

    format: str = ""
    access_url: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DcatDistribution":
        """
        Build a distribution from a DCAT-JSON object.

        ``format`` falls back to ``mediaType`` and ``accessURL`` falls back to
        ``access_url`` then ``downloadURL``. Missing values become empty
        strings so the entry simply never matches.

        Args:
            data (Mapping[str, Any]): One element of a record's
                ``distribution`` array.

        Returns:
            DcatDistribution: Parsed entry.
        """
        return cls(
            format=_first_str(data, _FORMAT_KEYS),
            access_url=_first_str(data, _ACCESS_URL_KEYS),
        )


@dataclass(frozen=True, slots=True)
class DcatRecord:
    """
    A catalog record as seen by the adaptor.

    Attributes:
        distributions (tuple[DcatDistribution, ...]): Distributions in the
            order the feed declared them.
        identifier (str | None): Dataset identifier, used only in log lines.
        title (str | None): Dataset title, used only in log lines.
    """

    distributions: tuple[DcatDistribution, ...] = ()
    identifier: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DcatRecord":
        """Build a record from a DCAT-JSON ``dataset`` entry.

        A single distribution object is treated as a one-element list and
        non-mapping entries are dropped.
        """
        raw: Any = None
        for key in _DISTRIBUTION_KEYS:
            if key in data:
                raw = data[key]
                break
        if isinstance(raw, Mapping):
            raw = [raw]
        elif not isinstance(raw, (list, tuple)):
            if raw is not None:
                log.debug("Ignoring non-list distribution value of type %s", type(raw).__name__)
            raw = []

        dists = tuple(DcatDistribution.from_mapping(d) for d in raw if isinstance(d, Mapping))
        identifier = data.get("identifier")
        title = data.get("title")
        return cls(
            distributions=dists,
            identifier=identifier if isinstance(identifier, str) else None,
            title=title if isinstance(title, str) else None,
        )


def coerce_record(item: Any) -> Any:
    """Return ``item`` as a record: mappings are parsed, anything else is passed through."""
    if isinstance(item, Mapping):
        return DcatRecord.from_mapping(item)
    return item


@dataclass(frozen=True, slots=True)
class PublishableResource:
    """
    Output unit of the adaptor.

    A resource carries the selected access URL together with the proxy
    handle supplied by the harvesting job. It has no identity beyond its
    URL: equality and hashing ignore the proxy.

    Attributes:
        proxy (Proxy): Collaborator handle, passed through untouched.
        access_url (str): Selected distribution access URL.
    """

    proxy: Proxy = field(repr=False, compare=False)
    access_url: str
