"""passguard - rule-based password validation with aggregated failure messages."""

from passguard.core.errors import OutcomeAccessError, PassguardError
from passguard.core.format_outcome import format_outcome
from passguard.core.password_validator import PasswordValidator, Rule
from passguard.core.validation_outcome import Err, Ok, ValidationOutcome

__all__ = [
    "Err",
    "Ok",
    "OutcomeAccessError",
    "PassguardError",
    "PasswordValidator",
    "Rule",
    "ValidationOutcome",
    "format_outcome",
]
