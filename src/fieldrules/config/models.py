"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fieldrules.toml only contains
overrides. An empty file (or none at all) yields the built-in catalog.
Unknown keys are rejected so that typos surface at load time.
"""

from __future__ import annotations

from pydantic import BaseModel, ValidationInfo, field_validator

from fieldrules.domain.messages import TEMPLATE_ARITY, MessageCatalog, check_template


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    verbose: bool = False
    json_output: bool = False


class MessagesConfig(BaseModel):
    """[messages] section — overrides for failure message templates."""

    model_config = {"frozen": True, "extra": "forbid"}

    value_must_be_string: str | None = None
    can_only_contain_letters: str | None = None
    can_only_contain_letters_and_special_characters: str | None = None

    @field_validator("*")
    @classmethod
    def _check_placeholders(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is None:
            return None
        return check_template(value, TEMPLATE_ARITY[info.field_name])

    def to_catalog(self) -> MessageCatalog:
        """Build a catalog, keeping defaults for templates not overridden."""
        overrides = self.model_dump(exclude_none=True)
        return MessageCatalog(**overrides)
