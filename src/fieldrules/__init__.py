"""fieldrules — declarative field validation rules."""

from fieldrules.domain.alpha import AlphaRule
from fieldrules.domain.context import ValidationContext
from fieldrules.domain.messages import MessageCatalog
from fieldrules.domain.outcome import ErrorKind, ValidationOutcome
from fieldrules.domain.rules import ValidationRule
from fieldrules.domain.ruleset import RuleSet

__version__ = "0.1.0"

__all__ = [
    "AlphaRule",
    "ErrorKind",
    "MessageCatalog",
    "RuleSet",
    "ValidationContext",
    "ValidationOutcome",
    "ValidationRule",
    "__version__",
]
