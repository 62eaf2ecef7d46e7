"""ValidationOutcome and ErrorKind — the result contract of every rule.

INVARIANT: Rules report failures as values, never as exceptions.
A success carries no payload; a failure carries a kind, a rendered
message, and the member names the failure applies to.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ErrorKind(StrEnum):
    """Failure classifications produced by the built-in rules."""

    VALUE_MUST_BE_STRING = "ValueMustBeString"
    CAN_ONLY_CONTAIN_LETTERS = "CanOnlyContainLetters"
    CAN_ONLY_CONTAIN_LETTERS_AND_SPECIAL_CHARACTERS = "CanOnlyContainLettersAndSpecialCharacters"


class ValidationOutcome(BaseModel):
    """Result of a single rule invocation.

    Attributes:
        ok: Whether the value passed the rule.
        kind: Error classification when ``ok`` is False.
        message: Rendered failure message when ``ok`` is False.
        member_names: Members the failure applies to. May be empty, or
            hold a single ``None`` when the context had no bound member.
    """

    model_config = {"frozen": True}

    ok: bool
    kind: ErrorKind | None = None
    message: str | None = None
    member_names: tuple[str | None, ...] = ()

    @classmethod
    def success(cls) -> ValidationOutcome:
        return _SUCCESS

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        member_names: tuple[str | None, ...] = (),
    ) -> ValidationOutcome:
        return cls(ok=False, kind=kind, message=message, member_names=member_names)

    def __bool__(self) -> bool:
        return self.ok


_SUCCESS = ValidationOutcome(ok=True)
