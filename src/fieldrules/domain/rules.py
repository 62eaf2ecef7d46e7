"""Validation rule ABC and the state shared by every rule.

Each rule embeds a :class:`RuleState` holding its ``ignore_if_converted``
flag and the last failure message it produced. Concrete rules implement
``_check``; :meth:`ValidationRule.validate` owns the shared behavior.

INVARIANT: ``last_message`` is the only state a rule mutates while
validating. Outcomes never depend on it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from fieldrules.domain.context import ValidationContext
from fieldrules.domain.outcome import ValidationOutcome

logger = logging.getLogger(__name__)


@dataclass
class RuleState:
    """Per-rule configuration flag plus the last failure message."""

    ignore_if_converted: bool = False
    last_message: str | None = None


class ValidationRule(ABC):
    """Abstract base class for field validation rules.

    Usage::

        class NonBlankRule(ValidationRule):
            def _check(self, value, context):
                ...
    """

    def __init__(self, *, ignore_if_converted: bool = False) -> None:
        self._state = RuleState(ignore_if_converted=ignore_if_converted)

    @property
    def name(self) -> str:
        """Rule identifier used in log records."""
        return type(self).__name__

    @property
    def ignore_if_converted(self) -> bool:
        return self._state.ignore_if_converted

    @property
    def error_message(self) -> str | None:
        """Message of the most recent failing call, or None.

        Shared across callers: concurrent users should read the message
        from the returned outcome instead.
        """
        return self._state.last_message

    def validate(self, value: Any, context: ValidationContext | None = None) -> ValidationOutcome:
        """Validate *value*, returning a success or failure outcome."""
        if self._state.ignore_if_converted and context is not None and context.converted:
            return ValidationOutcome.success()

        outcome = self._check(value, context)
        if not outcome.ok:
            self._state.last_message = outcome.message
            logger.debug(
                "%s failed: %s",
                self.name,
                outcome.message,
                extra={"rule": self.name, "kind": str(outcome.kind)},
            )
        return outcome

    @abstractmethod
    def _check(self, value: Any, context: ValidationContext | None) -> ValidationOutcome:
        """Rule-specific check. Must not raise for any input value."""
        ...
