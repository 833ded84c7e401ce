"""Validation Outcome - tests for the Ok/Err variants and their accessors.

Tests cover:
    - Variant predicates (is_ok / is_err)
    - unwrap / unwrap_err succeed on the right variant, raise on the wrong one
    - err() never raises
    - Err stores messages as a tuple, outcomes are frozen
    - Structural pattern matching on both variants
"""

import dataclasses

import pytest

from passguard.core.errors import ErrorCategory, OutcomeAccessError, PassguardError
from passguard.core.validation_outcome import Err, Ok


# ─── Ok ──────────────────────────────────────────────────────────

def test_ok_variant_predicates():
    assert Ok().is_ok()
    assert not Ok().is_err()


def test_ok_unwrap_returns_none():
    assert Ok().unwrap() is None


def test_ok_unwrap_err_raises():
    with pytest.raises(OutcomeAccessError) as exc_info:
        Ok().unwrap_err()
    assert exc_info.value.code == "OUTCOME_ACCESS_ERROR"
    assert exc_info.value.category == ErrorCategory.USAGE
    assert exc_info.value.context.variant == "ok"


def test_ok_err_is_none():
    assert Ok().err() is None


def test_ok_instances_are_equal():
    assert Ok() == Ok()
    assert Ok() != Err(("x",))


# ─── Err ─────────────────────────────────────────────────────────

def test_err_variant_predicates():
    outcome = Err(("bad",))
    assert outcome.is_err()
    assert not outcome.is_ok()


def test_err_unwrap_err_returns_messages():
    assert Err(("a", "b")).unwrap_err() == ("a", "b")


def test_err_unwrap_raises_with_messages():
    with pytest.raises(OutcomeAccessError) as exc_info:
        Err(("a", "b")).unwrap()
    assert exc_info.value.messages == ("a", "b")
    assert exc_info.value.context.variant == "err"
    assert isinstance(exc_info.value, PassguardError)


def test_err_converts_list_to_tuple():
    outcome = Err(["a", "b"])
    assert outcome.messages == ("a", "b")
    assert outcome == Err(("a", "b"))


def test_err_is_frozen():
    outcome = Err(("a",))
    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome.messages = ("b",)


def test_err_is_hashable():
    assert hash(Err(("a",))) == hash(Err(("a",)))


# ─── Pattern matching ────────────────────────────────────────────

def _describe(outcome) -> str:
    match outcome:
        case Ok():
            return "ok"
        case Err(messages):
            return f"err:{len(messages)}"
    return "unknown"


def test_match_on_variants():
    assert _describe(Ok()) == "ok"
    assert _describe(Err(("a", "b"))) == "err:2"
