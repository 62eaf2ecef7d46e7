"""Message catalog for rule failures.

Templates use positional placeholders: ``{0}`` is the display name of
the validated field and ``{1}`` (where present) the rule parameter,
e.g. the concatenated extra characters of an alpha rule.
"""

from __future__ import annotations

from pydantic import BaseModel, ValidationInfo, field_validator

from fieldrules.domain.outcome import ErrorKind

# Positional arguments each template is rendered with.
TEMPLATE_ARITY: dict[str, int] = {
    "value_must_be_string": 1,
    "can_only_contain_letters": 1,
    "can_only_contain_letters_and_special_characters": 2,
}


def check_template(template: str, arity: int) -> str:
    """Ensure *template* renders with *arity* positional arguments.

    Raises:
        ValueError: If the template has unknown, named, or malformed
            placeholders.
    """
    try:
        template.format(*(["x"] * arity))
    except (IndexError, KeyError, ValueError, AttributeError, TypeError) as exc:
        msg = f"Template {template!r} must use only placeholders {{0}}..{{{arity - 1}}}: {exc!r}"
        raise ValueError(msg) from exc
    return template


class MessageCatalog(BaseModel):
    """One message template per :class:`ErrorKind`."""

    model_config = {"frozen": True, "extra": "forbid"}

    value_must_be_string: str = "{0} must be a string."
    can_only_contain_letters: str = "{0} can only contain letters."
    can_only_contain_letters_and_special_characters: str = (
        "{0} can only contain letters and the following characters: {1}."
    )

    @field_validator("*")
    @classmethod
    def _check_placeholders(cls, value: str, info: ValidationInfo) -> str:
        return check_template(value, TEMPLATE_ARITY[info.field_name])

    def template(self, kind: ErrorKind) -> str:
        """Return the raw template registered for *kind*."""
        return {
            ErrorKind.VALUE_MUST_BE_STRING: self.value_must_be_string,
            ErrorKind.CAN_ONLY_CONTAIN_LETTERS: self.can_only_contain_letters,
            ErrorKind.CAN_ONLY_CONTAIN_LETTERS_AND_SPECIAL_CHARACTERS: (
                self.can_only_contain_letters_and_special_characters
            ),
        }[kind]

    def format(self, kind: ErrorKind, *args: object) -> str:
        """Render the template for *kind* with positional *args*.

        Examples:
            >>> MessageCatalog().format(ErrorKind.CAN_ONLY_CONTAIN_LETTERS, "Name")
            'Name can only contain letters.'
        """
        return self.template(kind).format(*args)


DEFAULT_CATALOG = MessageCatalog()
