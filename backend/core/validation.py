"""Argument checks shared by the service layer.

Every check raises InvalidArgumentError (or ConfigurationError for wiring)
so callers can map failures uniformly.
"""

from __future__ import annotations

from typing import Any, Optional

from .exceptions import ConfigurationError, InvalidArgumentError

# Largest value a signed 64-bit INTEGER column can hold.
MAX_INTEGER = 2**63 - 1


def check_not_none(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} must be provided")


def check_positive(value: Optional[int], name: str) -> None:
    # bool is an int subclass; reject it explicitly
    if value is None or isinstance(value, bool) or not isinstance(value, int) or not 0 < value <= MAX_INTEGER:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")


def check_not_blank(value: Optional[str], name: str) -> None:
    if value is None or not str(value).strip():
        raise InvalidArgumentError(f"{name} must not be blank")


def check_config_not_none(value: Any, name: str) -> None:
    if value is None:
        raise ConfigurationError(f"{name} must be configured")
