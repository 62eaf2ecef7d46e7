"""Locale-invariant conversion of arbitrary values to text.

INVARIANT: ``to_invariant_string`` reports failure through its result,
never by raising. A value whose rendering raises is a failed conversion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Result of converting a value to text."""

    ok: bool
    text: str = ""
    error: str | None = None


def to_invariant_string(value: object) -> ConversionResult:
    """Render *value* as text without consulting the active locale.

    Enum members render as their member name and dates as ISO 8601.
    Bytes must be valid UTF-8. Any other object goes through ``str()``.
    """
    if isinstance(value, Enum):
        return ConversionResult(ok=True, text=value.name)
    if isinstance(value, str):
        return ConversionResult(ok=True, text=value)
    if isinstance(value, bool):
        return ConversionResult(ok=True, text="True" if value else "False")
    if isinstance(value, (int, float, Decimal)):
        return ConversionResult(ok=True, text=str(value))
    if isinstance(value, (datetime, date, time)):
        return ConversionResult(ok=True, text=value.isoformat())
    if isinstance(value, (bytes, bytearray)):
        try:
            return ConversionResult(ok=True, text=bytes(value).decode("utf-8"))
        except UnicodeDecodeError as exc:
            return ConversionResult(ok=False, error=f"Undecodable bytes: {exc.reason}")

    try:
        text = str(value)
    except Exception as exc:
        logger.debug("String conversion failed for %s", type(value).__name__, exc_info=True)
        return ConversionResult(ok=False, error=f"{type(exc).__name__}: {exc}")
    return ConversionResult(ok=True, text=text)
