"""Example Password Rules - the three illustrative checks and their messages.

Invariants:
    - Every predicate is pure: str -> bool, no IO, no state
    - Character classes are explicit ASCII sets, never locale-dependent
      (non-ASCII letters never satisfy the case rule)
    - Registration order in build_example_validator: length, digit, case

Design Decisions:
    - Messages as module constants: single source of truth for driver and tests
    - string.ascii_* membership over str.islower/isupper: the latter accept
      any Unicode letter, which would make the rule depend on the alphabet
"""

import string

from passguard.core.password_validator import PasswordValidator


MIN_LENGTH_EXCLUSIVE: int = 8

LENGTH_MESSAGE = "password length must be greater than 8 chars."
DIGIT_MESSAGE = "password must contain a digit."
CASE_MESSAGE = "password must contain both of lower and upper case."

_DIGITS = frozenset(string.digits)
_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)


def has_min_length(password: str) -> bool:
    return len(password) > MIN_LENGTH_EXCLUSIVE


def has_digit(password: str) -> bool:
    return any(ch in _DIGITS for ch in password)


def has_mixed_case(password: str) -> bool:
    has_lower = any(ch in _LOWER for ch in password)
    has_upper = any(ch in _UPPER for ch in password)
    return has_lower and has_upper


def build_example_validator() -> PasswordValidator:
    """Validator with the length, digit and case rules, in that order."""
    return (
        PasswordValidator()
        .add_rule(has_min_length, LENGTH_MESSAGE)
        .add_rule(has_digit, DIGIT_MESSAGE)
        .add_rule(has_mixed_case, CASE_MESSAGE)
    )
