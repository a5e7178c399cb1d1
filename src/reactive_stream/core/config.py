"""
Configuration for observables and the package's logging.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Union


@dataclass
class StreamConfig:
    """Stream behaviour and logging settings."""

    raise_producer_errors: bool = True   # Re-raise producer faults from subscribe()
    log_level: int = logging.INFO
    structured_logging: bool = False     # JSON log lines


def _parse_log_level(value: Union[int, str]) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid log level: {value!r}")
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {value!r}")
    return level


def load_stream_config_from_dict(data: Mapping[str, Any]) -> StreamConfig:
    """
    Load a StreamConfig from a dictionary (parsed YAML/JSON).

    Args:
        data: Mapping of StreamConfig field names to values. log_level may be
            an int or a level name such as "debug".

    Returns:
        StreamConfig with defaults for missing keys

    Raises:
        ValueError: On unknown keys or an invalid log level
    """
    known = {f.name for f in fields(StreamConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(map(repr, unknown)))}")

    values = dict(data)
    if "log_level" in values:
        values["log_level"] = _parse_log_level(values["log_level"])
    return StreamConfig(**values)
