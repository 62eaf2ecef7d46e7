"""ValidationContext — display metadata for the value under validation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

DEFAULT_DISPLAY_NAME = "The value"


class ValidationContext(BaseModel):
    """Describes where a validated value came from.

    Attributes:
        instance: The object (or bare value) being validated.
        display_name: Human-readable label embedded in failure messages.
        member_name: Field identifier reported on failures, if any.
        converted: True when the value was produced by an upstream type
            conversion. Rules built with ``ignore_if_converted`` skip such
            values.
    """

    model_config = {"frozen": True}

    instance: Any = None
    display_name: str = DEFAULT_DISPLAY_NAME
    member_name: str | None = None
    converted: bool = False

    @classmethod
    def for_value(cls, value: Any) -> ValidationContext:
        """Default context for a bare value with no bound member."""
        return cls(instance=value, display_name=DEFAULT_DISPLAY_NAME)
