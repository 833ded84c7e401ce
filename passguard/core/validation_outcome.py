"""Validation Outcome - two-variant result of a validation call.

Invariants:
    - Exactly two variants: Ok (no payload) and Err (ordered failure messages)
    - Both variants are frozen: an outcome never changes after construction
    - Payload access on the wrong variant raises OutcomeAccessError, never returns junk
    - Err.messages is a tuple in rule-registration order

Design Decisions:
    - Frozen dataclasses over a bool + list pair: caller must check the variant
      before reading the payload (ADR: no boolean-plus-out-parameter API)
    - __match_args__ from dataclass: `match outcome: case Err(messages): ...` works
"""

from dataclasses import dataclass

from passguard.core.errors import ErrorContext, OutcomeAccessError


@dataclass(frozen=True)
class Ok:
    """All rules passed."""

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> None:
        return None

    def unwrap_err(self) -> tuple[str, ...]:
        raise OutcomeAccessError(
            "called unwrap_err() on an Ok outcome",
            context=ErrorContext(variant="ok"),
        )

    def err(self) -> tuple[str, ...] | None:
        return None


@dataclass(frozen=True)
class Err:
    """One or more rules failed. One message per failed rule."""

    messages: tuple[str, ...]

    def __post_init__(self):
        # Accept any sequence, store a tuple so the outcome stays immutable
        object.__setattr__(self, "messages", tuple(self.messages))

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> None:
        raise OutcomeAccessError(
            f"called unwrap() on an Err outcome: {list(self.messages)}",
            messages=self.messages,
            context=ErrorContext(variant="err"),
        )

    def unwrap_err(self) -> tuple[str, ...]:
        return self.messages

    def err(self) -> tuple[str, ...] | None:
        return self.messages


ValidationOutcome = Ok | Err
