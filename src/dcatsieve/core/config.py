# config.py
# SPDX-License-Identifier: MIT
"""Configuration for DCAT adaptors.

The only harvesting knob is the distribution format pattern; logging
settings ride along so a harvesting job can be configured from one file.
Configs round-trip through JSON and TOML.
"""
from __future__ import annotations

import json
import tomllib
import types
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from .adaptor import DcatIteratorAdaptor
from .interfaces import Proxy, RecordSource
from .log import DEFAULT_LOG_FORMAT, PACKAGE_LOGGER_NAME, configure_logging
from .matching import DEFAULT_FORMAT_PATTERN

__all__ = [
    "LoggingConfig",
    "DcatAdaptorConfig",
    "load_config_from_path",
]

T = TypeVar("T")


@dataclass(slots=True)
class LoggingConfig:
    """Controls the package logger; set propagate/logger_name to
    integrate with a host harvester's logging.
    """
    level: int | str = "INFO"
    propagate: bool = False
    fmt: Optional[str] = DEFAULT_LOG_FORMAT
    logger_name: str = PACKAGE_LOGGER_NAME

    def apply(self) -> None:
        configure_logging(
            level=self.level,
            propagate=self.propagate,
            fmt=self.fmt,
            logger_name=self.logger_name or PACKAGE_LOGGER_NAME,
        )


@dataclass(slots=True)
class DcatAdaptorConfig:
    """Settings for one DCAT harvesting job.

    Attributes:
        format_pattern (str): Regular expression a distribution's format
            must fully match (case-insensitive). Invalid patterns fall back
            to :data:`~dcatsieve.core.matching.DEFAULT_FORMAT_PATTERN` when
            the adaptor is built; they are not rejected here.
        logging (LoggingConfig): Package logger settings.
    """
    format_pattern: str = DEFAULT_FORMAT_PATTERN
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def build_adaptor(self, proxy: Proxy, source: Optional[RecordSource]) -> DcatIteratorAdaptor:
        """Create an adaptor over ``source`` using this config's pattern."""
        return DcatIteratorAdaptor(self.format_pattern, proxy, source)

    def to_dict(self) -> Dict[str, Any]:
        return _dataclass_to_dict(self)

    def to_json(self, path: Path | str, *, indent: int = 2) -> str:
        """Write the config as JSON and return the target path as a string."""
        target = Path(path)
        target.write_text(json.dumps(self.to_dict(), indent=indent, sort_keys=True), encoding="utf-8")
        return str(target)

    @classmethod
    def from_dict(cls: Type[T], data: Mapping[str, Any]) -> T:
        """Instantiate a config from a mapping.

        Raises:
            TypeError: If ``data`` is not a mapping.
            ValueError: If ``data`` holds keys that are not config fields.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Config must be a mapping; got {type(data).__name__}.")
        _reject_unknown_keys(cls, data)
        return _dataclass_from_dict(cls, data)

    @classmethod
    def from_json(cls: Type[T], path: Path | str) -> T:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.from_dict(payload)

    @classmethod
    def from_toml(cls: Type[T], path: Path | str) -> T:
        """
        Load a config from a TOML file.

        ``format_pattern`` is a top-level key and logging settings live in a
        ``[logging]`` table.
        """
        data = tomllib.loads(Path(path).read_bytes().decode("utf-8"))
        return cls.from_dict(data)


def load_config_from_path(path: str | Path) -> DcatAdaptorConfig:
    """Load a DcatAdaptorConfig from a ``.json`` or ``.toml`` file.

    Raises:
        ValueError: If the file extension is not ``.toml`` or ``.json``.
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".toml":
        return DcatAdaptorConfig.from_toml(p)
    if suffix == ".json":
        return DcatAdaptorConfig.from_json(p)
    raise ValueError(f"Unsupported config extension {p.suffix!r}; expected .toml or .json.")


def _reject_unknown_keys(cls: Type[Any], data: Mapping[str, Any]) -> None:
    allowed = {f.name for f in fields(cls)}
    unknown = sorted(str(k) for k in data if k not in allowed)
    if unknown:
        raise ValueError(
            f"Unsupported options for {cls.__name__}: {', '.join(unknown)}. "
            f"Allowed keys: {', '.join(sorted(allowed))}"
        )


def _dataclass_to_dict(obj: Any) -> Dict[str, Any]:
    """Serialize a dataclass to a JSON-friendly dict, skipping None values."""
    result: Dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        result[f.name] = _dataclass_to_dict(value) if is_dataclass(value) else value
    return result


def _dataclass_from_dict(cls: Type[T], data: Mapping[str, Any] | None) -> T:
    """Instantiate dataclass ``cls`` from ``data``, recursing into nested dataclasses."""
    if data is None:
        return cls()  # type: ignore[call-arg]
    type_hints = get_type_hints(cls)
    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _coerce_value(type_hints.get(f.name, f.type), data[f.name])
    return cls(**kwargs)  # type: ignore[arg-type]


def _coerce_value(expected_type: Any, value: Any) -> Any:
    base_type, _ = _strip_optional(expected_type)
    if value is None:
        return None
    if isinstance(base_type, type) and is_dataclass(base_type):
        if not isinstance(value, Mapping):
            raise TypeError(f"Expected a table for {base_type.__name__}; got {type(value).__name__}.")
        _reject_unknown_keys(base_type, value)
        return _dataclass_from_dict(base_type, value)
    if base_type in {str, float, bool}:
        return base_type(value)
    return value


def _strip_optional(typ: Any) -> Tuple[Any, bool]:
    """Return ``(inner, True)`` for ``Optional[inner]``, else ``(typ, False)``."""
    if get_origin(typ) in (Union, types.UnionType):
        args = [arg for arg in get_args(typ) if arg is not type(None)]
        if len(args) == 1:
            return args[0], True
    return typ, False
