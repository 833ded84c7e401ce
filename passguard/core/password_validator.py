"""Password Validator - ordered rule registry evaluated as a batch.

Invariants:
    - Rules are append-only: never removed or reordered once added
    - validate() is PURE: no IO, no mutation, same input -> same outcome
    - Every rule is evaluated; Err carries ALL failing messages, never just the first
    - Err message order == rule registration order, one message per failing rule
    - Zero rules -> Ok for every candidate (vacuous truth)

Design Decisions:
    - Rules are (predicate, message) pairs, not subclasses (ADR: strategy via callables)
    - add_rule returns self for chained registration (builder style)
    - Predicate exceptions propagate: a crashing rule is a bug, not a failed password
"""

from collections.abc import Callable
from dataclasses import dataclass

from passguard.core.validation_outcome import Err, Ok, ValidationOutcome


Predicate = Callable[[str], bool]


@dataclass(frozen=True)
class Rule:
    """A predicate over the candidate paired with its failure message."""
    predicate: Predicate
    message: str

    def check(self, candidate: str) -> str | None:
        """Return the failure message, or None when the predicate holds."""
        if self.predicate(candidate):
            return None
        return self.message


class PasswordValidator:
    """Holds validation rules and runs them against candidate passwords."""

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def add_rule(self, predicate: Predicate, message: str) -> "PasswordValidator":
        """Append a rule. Returns self so registrations can be chained."""
        self._rules.append(Rule(predicate, message))
        return self

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def validate(self, candidate: str) -> ValidationOutcome:
        """Run every rule against `candidate`.

        Returns Ok() if all rules pass, otherwise Err with the messages of
        the failing rules in registration order.
        """
        results = [rule.check(candidate) for rule in self._rules]
        failures = tuple(msg for msg in results if msg is not None)
        if not failures:
            return Ok()
        return Err(failures)
