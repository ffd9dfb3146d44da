"""Outcome state machine tests: construction, error accumulation, and access."""

from __future__ import annotations

import pytest

from ensured.config import override_settings
from ensured.errors import ArgumentError, NullArgumentError, OutcomeError
from ensured.outcome import Outcome, ValuedOutcome

pytestmark = pytest.mark.unit


class TestOutcomeConstruction:
    """Success and failure are fixed at construction."""

    def test_success_has_no_errors(self) -> None:
        outcome = Outcome.succeed()

        assert outcome.success is True
        assert outcome.to_bool() is True
        assert outcome.errors == ()
        assert outcome.first_error() is None

    def test_failure_seeds_errors_in_order(self, null_error, range_error) -> None:
        outcome = Outcome.fail(null_error, range_error)

        assert outcome.success is False
        assert outcome.is_failure()
        assert outcome.errors == (null_error, range_error)

    def test_failure_wraps_strings_and_skips_none(self) -> None:
        outcome = Outcome.fail("name is taken", None)

        assert len(outcome.errors) == 1
        assert isinstance(outcome.errors[0], OutcomeError)
        assert str(outcome.errors[0]) == "name is taken"

    def test_failure_without_errors_is_rejected(self) -> None:
        with pytest.raises(ArgumentError) as exc:
            Outcome.fail()
        assert exc.value.param_name == "errors"

        with pytest.raises(ArgumentError):
            ValuedOutcome.fail(None)

    def test_failure_without_errors_allowed_when_not_required(self) -> None:
        with override_settings(require_failure_errors=False):
            outcome = Outcome.fail()

        assert outcome.is_failure()
        assert outcome.errors == ()

    def test_determine(self, null_error) -> None:
        ok = Outcome.determine(None)
        assert ok.is_success()
        assert ok.errors == ()

        failed = Outcome.determine(null_error)
        assert failed.is_failure()
        assert failed.errors == (null_error,)


class TestErrorAccumulation:
    """with_error appends in place and never flips the flag."""

    def test_with_error_appends_and_returns_same_instance(
        self, null_error, range_error
    ) -> None:
        outcome = Outcome.fail(null_error)

        chained = outcome.with_error(range_error).with_error("also wrong")

        assert chained is outcome
        assert outcome.success is False
        assert outcome.errors[:2] == (null_error, range_error)
        assert isinstance(outcome.errors[2], OutcomeError)

    def test_with_error_on_success_keeps_success(self, null_error) -> None:
        outcome = Outcome.succeed().with_error(null_error)

        assert outcome.is_success()
        assert outcome.errors == (null_error,)

    def test_errors_is_a_snapshot(self, null_error) -> None:
        outcome = Outcome.fail(null_error)
        snapshot = outcome.errors

        outcome.with_error("later")

        assert len(snapshot) == 1
        assert len(outcome.errors) == 2


class TestAccess:
    """Explicit accessors replace implicit coercion."""

    def test_truthiness_is_refused(self, null_error) -> None:
        with pytest.raises(TypeError, match="is_success"):
            bool(Outcome.succeed())
        with pytest.raises(TypeError):
            if ValuedOutcome.fail(null_error):
                pass

    def test_valued_success_exposes_value(self) -> None:
        outcome = ValuedOutcome.succeed(42)

        assert outcome.is_success()
        assert outcome.value == 42
        assert outcome.unwrap() == 42
        assert outcome.unwrap_or_default(0) == 42

    def test_valued_failure_value_is_none(self, null_error) -> None:
        outcome = ValuedOutcome.fail(null_error)

        assert outcome.value is None
        assert outcome.unwrap_or_default() is None
        assert outcome.unwrap_or_default("fallback") == "fallback"

    def test_unwrap_raises_first_error(self, null_error, range_error) -> None:
        outcome = ValuedOutcome.fail(null_error, range_error)

        with pytest.raises(NullArgumentError) as exc:
            outcome.unwrap()
        assert exc.value is null_error

    def test_valued_determine_has_no_value(self, range_error) -> None:
        ok = ValuedOutcome[int].determine(None)
        assert ok.is_success()
        assert ok.value is None

        failed = ValuedOutcome[int].determine(range_error)
        assert failed.errors == (range_error,)

    def test_raise_for_failure(self, range_error) -> None:
        Outcome.succeed().raise_for_failure()

        with pytest.raises(type(range_error)):
            Outcome.fail(range_error).raise_for_failure()

    def test_raise_for_failure_keeps_falsy_error(self) -> None:
        """An error type that is falsy is still the error that gets raised."""

        class EmptyBatchError(Exception):
            def __len__(self) -> int:
                return 0

        error = EmptyBatchError("no rows")
        outcome = ValuedOutcome.fail(error)

        with pytest.raises(EmptyBatchError) as exc:
            outcome.unwrap()
        assert exc.value is error

    def test_raise_for_failure_without_errors(self) -> None:
        with override_settings(require_failure_errors=False):
            outcome = Outcome.fail()

        with pytest.raises(OutcomeError, match="without errors"):
            outcome.raise_for_failure()

    def test_repr_names_state(self, null_error) -> None:
        assert repr(ValuedOutcome.succeed("x")).startswith(
            "ValuedOutcome(success, value='x'"
        )
        assert repr(Outcome.fail(null_error)).startswith("Outcome(failure")

    def test_outcome_kinds_are_siblings(self) -> None:
        assert not isinstance(Outcome.succeed(), ValuedOutcome)
        assert not isinstance(ValuedOutcome.succeed(1), Outcome)
