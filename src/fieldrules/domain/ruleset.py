"""RuleSet — explicit mapping from member names to their rules.

Replaces annotation scanning: the rules attached to a field are declared
on a RuleSet and can be inspected and exercised in isolation.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from typing import Any

from fieldrules.domain.context import ValidationContext
from fieldrules.domain.outcome import ValidationOutcome
from fieldrules.domain.rules import ValidationRule

logger = logging.getLogger(__name__)


class RuleSet:
    """Ordered collection of rules keyed by member name.

    Usage::

        rules = RuleSet().add("first_name", AlphaRule("-", " "))
        failures = rules.validate({"first_name": "Mary - Jane"})
    """

    def __init__(self) -> None:
        self._rules: dict[str, list[ValidationRule]] = {}

    @property
    def members(self) -> list[str]:
        """Member names in declaration order."""
        return list(self._rules)

    def add(self, member_name: str, *rules: ValidationRule) -> RuleSet:
        """Attach *rules* to *member_name*. Returns self for chaining."""
        for rule in rules:
            if not isinstance(rule, ValidationRule):
                msg = f"Expected a ValidationRule, got {type(rule).__name__}"
                raise TypeError(msg)
        self._rules.setdefault(member_name, []).extend(rules)
        return self

    def rules_for(self, member_name: str) -> tuple[ValidationRule, ...]:
        return tuple(self._rules.get(member_name, ()))

    def validate_member(
        self,
        member_name: str,
        value: Any,
        *,
        instance: Any = None,
        display_name: str | None = None,
        converted: bool = False,
    ) -> list[ValidationOutcome]:
        """Run every rule for *member_name* and return the failures.

        The display name defaults to the member name.
        """
        context = ValidationContext(
            instance=instance if instance is not None else value,
            display_name=display_name or member_name,
            member_name=member_name,
            converted=converted,
        )
        failures: list[ValidationOutcome] = []
        for rule in self._rules.get(member_name, ()):
            outcome = rule.validate(value, context)
            if not outcome.ok:
                failures.append(outcome)
        return failures

    def validate(
        self,
        instance: Mapping[str, Any] | object,
        *,
        converted: Collection[str] = (),
    ) -> list[ValidationOutcome]:
        """Validate every declared member of *instance*.

        Mappings are read by key, other objects by attribute. Missing
        members read as None. Members listed in *converted* are flagged
        as produced by an upstream conversion; it must be a collection of
        names, not a single string.
        """
        if isinstance(converted, str):
            msg = "converted must be a collection of member names, not a str"
            raise TypeError(msg)
        converted_names = frozenset(converted)
        failures: list[ValidationOutcome] = []
        for member_name in self._rules:
            if isinstance(instance, Mapping):
                value = instance.get(member_name)
            else:
                value = getattr(instance, member_name, None)
            failures.extend(
                self.validate_member(
                    member_name,
                    value,
                    instance=instance,
                    converted=member_name in converted_names,
                )
            )
        if failures:
            logger.debug(
                "Validation produced %d failure(s) across %d member(s)",
                len(failures),
                len(self._rules),
            )
        return failures
