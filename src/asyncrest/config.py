"""Loading and validation of :class:`~asyncrest.models.ClientConfig`.

Configuration is explicit: nothing is read from the environment. Callers
either construct :class:`~asyncrest.models.ClientConfig` directly or pass
a mapping or JSON file path to :func:`load_config`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from asyncrest.exceptions import ConfigError
from asyncrest.models import ClientConfig

ConfigSource = Union[Mapping[str, Any], str, Path, None]


def load_config(source: ConfigSource = None) -> ClientConfig:
    """Build a validated :class:`ClientConfig`.

    Args:
        source: ``None`` for defaults, a mapping of field values, or a path
            to a JSON file containing an object of field values.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, does
            not contain an object, or fails validation.
    """
    if source is None:
        return ClientConfig()

    if isinstance(source, Mapping):
        data: Any = dict(source)
        origin = "<mapping>"
    else:
        path = Path(source)
        origin = str(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read config file {origin}: {exc}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in config file {origin}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config in {origin} must be a JSON object")

    try:
        return ClientConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {origin}: {exc}") from exc


def merge_config(base: Optional[ClientConfig] = None, **overrides: Any) -> ClientConfig:
    """Return *base* (or the defaults) with *overrides* applied and validated.

    Raises:
        ConfigError: If an override names an unknown field or has a bad value.
    """
    data = (base or ClientConfig()).model_dump()
    data.update(overrides)
    return load_config(data)
