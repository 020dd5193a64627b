# __init__.py
# SPDX-License-Identifier: MIT
"""
Top-level package exports for :mod:`dcatsieve`.

dcatsieve sits between a DCAT feed parser and a catalog publisher. It turns
each catalog record into at most one :class:`PublishableResource`: the access
URL of the first distribution whose ``format`` fully matches a configured,
case-insensitive regular expression. Records with no matching distribution
are skipped.

Operators should know that an invalid format pattern is *not* an error: it is
replaced by :data:`DEFAULT_FORMAT_PATTERN` and a warning is logged on the
``dcatsieve`` logger.

Examples:
    >>> from dcatsieve import DcatIteratorAdaptor, IterableRecordSource
    >>> source = IterableRecordSource([
    ...     {"distribution": [
    ...         {"format": "CSV", "accessURL": "https://example.org/a.csv"},
    ...         {"format": "JSON", "accessURL": "https://example.org/a.json"},
    ...     ]},
    ... ])
    >>> with DcatIteratorAdaptor("json", None, source) as adaptor:
    ...     [r.access_url for r in adaptor]
    ['https://example.org/a.json']
"""

from __future__ import annotations

try:
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("dcatsieve")
except Exception:  # PackageNotFoundError or source checkouts without metadata
    __version__ = "0.0.0+unknown"

from .core.adaptor import (
    DcatIterator,
    DcatIteratorAdaptor,
    IteratorState,
    IteratorStats,
    NoElementsAvailable,
)
from .core.config import DcatAdaptorConfig, LoggingConfig, load_config_from_path
from .core.interfaces import CatalogRecordLike, ClosableSource, DistributionLike, RecordSource
from .core.log import configure_logging, get_logger
from .core.matching import DEFAULT_FORMAT_PATTERN, FormatMatcher
from .core.records import DcatDistribution, DcatRecord, PublishableResource
from .core.selection import NO_MATCH, select_access_url
from .sources.iterable_source import IterableRecordSource

__all__ = [
    "__version__",
    "DcatIteratorAdaptor",
    "DcatIterator",
    "IteratorState",
    "IteratorStats",
    "NoElementsAvailable",
    "DcatAdaptorConfig",
    "LoggingConfig",
    "load_config_from_path",
    "RecordSource",
    "ClosableSource",
    "CatalogRecordLike",
    "DistributionLike",
    "configure_logging",
    "get_logger",
    "DEFAULT_FORMAT_PATTERN",
    "FormatMatcher",
    "DcatDistribution",
    "DcatRecord",
    "PublishableResource",
    "NO_MATCH",
    "select_access_url",
    "IterableRecordSource",
]
