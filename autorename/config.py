"""Loading and saving the list of rename targets kept in ``config.json``."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from pathlib import Path

DEFAULT_CONFIG_PATH = "config.json"

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class ConfigError(Exception):
    """Raised when the configuration file cannot be read, parsed or written."""


def read_config(path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH) -> list[str]:
    """Return the saved name order.

    A missing file raises ``FileNotFoundError`` so that callers can tell the
    user to save a configuration first. Any other failure raises ConfigError.
    """
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise ConfigError(f"cannot read config file {os.fspath(path)!r}: {exc}") from exc

    try:
        value = json.loads(data)
    except (ValueError, UnicodeDecodeError) as exc:
        raise ConfigError(f"cannot parse config file {os.fspath(path)!r}: {exc}") from exc

    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(
            f"config file {os.fspath(path)!r} must hold a JSON array of strings"
        )
    return value


def _encode(names: list[str]) -> bytes:
    text = json.dumps(names, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _JSON_ESCAPES.items():
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def save_config(
    names: Iterable[str], path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH
) -> None:
    """Write the name order to ``path`` as a compact JSON array."""
    values = list(names)
    if not all(isinstance(item, str) for item in values):
        raise ConfigError("every configured name must be a string")
    payload = _encode(values)
    try:
        Path(path).write_bytes(payload)
    except OSError as exc:
        raise ConfigError(f"cannot save config file {os.fspath(path)!r}: {exc}") from exc