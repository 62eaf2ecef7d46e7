"""AlphaRule — accept only A-Z / a-z, plus optional extra substrings.

Extra entries are removed from the text before the letter check, one
entry at a time in declaration order, as literal substrings. An entry
``"ab"`` removes every ``"ab"``, not every ``a`` and ``b``. Text that
strips down to nothing is valid.
"""

from __future__ import annotations

import re
from typing import Any

from fieldrules.domain.context import ValidationContext
from fieldrules.domain.conversion import to_invariant_string
from fieldrules.domain.messages import DEFAULT_CATALOG, MessageCatalog
from fieldrules.domain.outcome import ErrorKind, ValidationOutcome
from fieldrules.domain.rules import ValidationRule

ALPHA_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z]+")


def strip_extra_characters(text: str, extra_characters: tuple[str, ...]) -> str:
    """Remove each extra entry from *text*, sequentially.

    Examples:
        >>> strip_extra_characters("Mary - Jane", ("-", " "))
        'MaryJane'
        >>> strip_extra_characters("aab", ("a", "ab"))
        'b'
    """
    for extra in extra_characters:
        text = text.replace(extra, "")
    return text


class AlphaRule(ValidationRule):
    """Rule requiring a value's text to contain letters only.

    Extra characters are passed positionally, e.g.
    ``AlphaRule("-", " ", "+")`` accepts ``"Mary-Jane Smith+"``.
    """

    def __init__(
        self,
        *extra_characters: str,
        ignore_if_converted: bool = False,
        catalog: MessageCatalog | None = None,
    ) -> None:
        super().__init__(ignore_if_converted=ignore_if_converted)
        for extra in extra_characters:
            if not isinstance(extra, str):
                msg = f"Extra characters must be strings, got {type(extra).__name__}"
                raise TypeError(msg)
        self._extra_characters: tuple[str, ...] = extra_characters
        self._catalog = catalog or DEFAULT_CATALOG

    @property
    def extra_characters(self) -> tuple[str, ...]:
        return self._extra_characters

    def _check(self, value: Any, context: ValidationContext | None) -> ValidationOutcome:
        if value is None:
            return ValidationOutcome.success()

        if context is None:
            context = ValidationContext.for_value(value)

        converted = to_invariant_string(value)
        if not converted.ok:
            return ValidationOutcome.failure(
                ErrorKind.VALUE_MUST_BE_STRING,
                self._catalog.format(ErrorKind.VALUE_MUST_BE_STRING, context.display_name),
            )

        text = strip_extra_characters(converted.text, self._extra_characters)
        if not text or ALPHA_PATTERN.fullmatch(text):
            return ValidationOutcome.success()

        if self._extra_characters:
            kind = ErrorKind.CAN_ONLY_CONTAIN_LETTERS_AND_SPECIAL_CHARACTERS
            message = self._catalog.format(
                kind, context.display_name, "".join(self._extra_characters)
            )
        else:
            kind = ErrorKind.CAN_ONLY_CONTAIN_LETTERS
            message = self._catalog.format(kind, context.display_name)
        return ValidationOutcome.failure(kind, message, (context.member_name,))

    def __repr__(self) -> str:
        return (
            f"AlphaRule(extra_characters={self._extra_characters!r}, "
            f"ignore_if_converted={self.ignore_if_converted})"
        )
