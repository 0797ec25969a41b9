"""Tests for Outcome and ValueOutcome."""

from collections.abc import Iterator

import pytest

from fallible.application.common.result import Outcome, ValueOutcome
from fallible.config import get_settings
from fallible.domain.common.errors import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
)
from fallible.domain.common.exceptions import InvariantViolationError

NOT_FOUND = NotFoundError("User", 999)
CONFLICT = ConflictError("Email already taken")


def _fail_if_called(*args: object) -> None:
    pytest.fail("callback must not be invoked on a failed outcome")


class TestOutcome:
    """Test suite for the value-less Outcome."""

    def test_success_has_no_errors(self) -> None:
        outcome = Outcome.success()
        assert outcome.succeeded
        assert not outcome.failed
        assert outcome.errors == ()
        assert outcome.first_error is None

    def test_failure_with_single_error(self) -> None:
        outcome = Outcome.failure(NOT_FOUND)
        assert not outcome.succeeded
        assert outcome.errors == (NOT_FOUND,)
        assert outcome.first_error is NOT_FOUND

    def test_failure_keeps_error_order(self) -> None:
        errors = [CONFLICT, NOT_FOUND, ForbiddenError()]
        outcome = Outcome.failure(errors)
        assert outcome.errors == tuple(errors)

    def test_failure_accepts_generator(self) -> None:
        outcome = Outcome.failure(e for e in (NOT_FOUND, CONFLICT))
        assert outcome.errors == (NOT_FOUND, CONFLICT)

    @pytest.mark.parametrize("errors", [[], (), None])
    def test_failure_without_errors_fails_fast(self, errors: object) -> None:
        with pytest.raises(InvariantViolationError):
            Outcome.failure(errors)  # type: ignore[arg-type]

    def test_failure_rejects_non_error_values(self) -> None:
        with pytest.raises(TypeError):
            Outcome.failure(["not an error"])  # type: ignore[list-item]

    @pytest.mark.parametrize("error_class", [ForbiddenError, NotFoundError, ConflictError])
    def test_failure_rejects_error_classes(self, error_class: type) -> None:
        with pytest.raises(TypeError):
            Outcome.failure(error_class)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            ValueOutcome.failure([NOT_FOUND, error_class])  # type: ignore[list-item]

    def test_direct_construction_is_refused(self) -> None:
        with pytest.raises(TypeError):
            Outcome(True, ())
        with pytest.raises(TypeError):
            Outcome(False, (NOT_FOUND,))

    def test_is_frozen(self) -> None:
        outcome = Outcome.success()
        with pytest.raises(AttributeError):
            outcome.succeeded = False  # type: ignore[misc]

    def test_errors_are_read_only(self) -> None:
        outcome = Outcome.failure([NOT_FOUND])
        with pytest.raises(AttributeError):
            outcome.errors.append(CONFLICT)  # type: ignore[attr-defined]

    def test_on_success_runs_only_for_success(self) -> None:
        calls: list[str] = []
        Outcome.success().on_success(lambda: calls.append("ran"))
        Outcome.failure(NOT_FOUND).on_success(lambda: calls.append("bad"))
        assert calls == ["ran"]

    def test_on_failure_receives_errors(self) -> None:
        received: list[tuple[object, ...]] = []
        Outcome.failure([NOT_FOUND, CONFLICT]).on_failure(received.append)
        Outcome.success().on_failure(_fail_if_called)
        assert received == [(NOT_FOUND, CONFLICT)]

    def test_terminal_operations_return_none(self) -> None:
        assert Outcome.success().on_success(lambda: None) is None
        assert Outcome.failure(NOT_FOUND).on_failure(lambda errors: None) is None

    def test_success_to_value_outcome(self) -> None:
        assert Outcome.success().to_value_outcome(42) == ValueOutcome.success(42)

    def test_failure_to_value_outcome_carries_same_errors(self) -> None:
        outcome = Outcome.failure([NOT_FOUND, CONFLICT])
        converted = outcome.to_value_outcome(42)
        assert converted == ValueOutcome.failure([NOT_FOUND, CONFLICT])
        assert converted.errors is outcome.errors
        assert converted.value is None


class TestValueOutcome:
    """Test suite for the value-carrying ValueOutcome."""

    def test_success_holds_value(self) -> None:
        outcome = ValueOutcome.success({"id": 1})
        assert outcome.succeeded
        assert outcome.value == {"id": 1}
        assert outcome.errors == ()

    def test_success_may_hold_none(self) -> None:
        outcome = ValueOutcome.success(None)
        assert outcome.succeeded
        assert outcome.value is None

    def test_failure_does_not_expose_value(self) -> None:
        outcome: ValueOutcome[int] = ValueOutcome.failure(NOT_FOUND)
        assert not outcome.succeeded
        assert outcome.value is None
        assert outcome.errors == (NOT_FOUND,)

    @pytest.mark.parametrize("errors", [[], (), None])
    def test_failure_without_errors_fails_fast(self, errors: object) -> None:
        with pytest.raises(InvariantViolationError):
            ValueOutcome.failure(errors)  # type: ignore[arg-type]

    def test_direct_construction_is_refused(self) -> None:
        with pytest.raises(TypeError):
            ValueOutcome(True, 1, ())

    def test_on_success_receives_value(self) -> None:
        received: list[int] = []
        ValueOutcome.success(7).on_success(received.append)
        ValueOutcome.failure(NOT_FOUND).on_success(_fail_if_called)
        assert received == [7]

    def test_on_failure_receives_errors(self) -> None:
        received: list[tuple[object, ...]] = []
        ValueOutcome.failure(CONFLICT).on_failure(received.append)
        ValueOutcome.success(1).on_failure(_fail_if_called)
        assert received == [(CONFLICT,)]

    def test_map_transforms_success(self) -> None:
        assert ValueOutcome.success(2).map(lambda x: x * 10) == ValueOutcome.success(20)

    def test_map_skips_transform_on_failure(self) -> None:
        outcome: ValueOutcome[int] = ValueOutcome.failure([NOT_FOUND, CONFLICT])
        mapped = outcome.map(_fail_if_called)
        assert not mapped.succeeded
        assert mapped.errors is outcome.errors

    def test_map_identity_law(self) -> None:
        outcome = ValueOutcome.success("abc")
        assert outcome.map(lambda x: x) == outcome

    def test_map_composition_law(self) -> None:
        outcome = ValueOutcome.success(3)

        def f(x: int) -> int:
            return x + 1

        def g(x: int) -> str:
            return str(x * 2)

        assert outcome.map(f).map(g) == outcome.map(lambda x: g(f(x)))

    def test_bind_returns_callee_outcome(self) -> None:
        forbidden: ValueOutcome[int] = ValueOutcome.failure(ForbiddenError())
        assert ValueOutcome.success(1).bind(lambda _: forbidden) is forbidden

        doubled = ValueOutcome.success(1).bind(lambda x: ValueOutcome.success(x * 2))
        assert doubled == ValueOutcome.success(2)

    def test_bind_skips_transform_on_failure(self) -> None:
        outcome: ValueOutcome[int] = ValueOutcome.failure([CONFLICT, NOT_FOUND])
        bound = outcome.bind(_fail_if_called)  # type: ignore[arg-type]
        assert not bound.succeeded
        assert bound.errors is outcome.errors

    def test_bind_associativity(self) -> None:
        def f(x: int) -> ValueOutcome[int]:
            return ValueOutcome.success(x + 1)

        def g(x: int) -> ValueOutcome[int]:
            if x > 5:
                return ValueOutcome.failure(ConflictError("too big"))
            return ValueOutcome.success(x * 2)

        for start in (1, 5):
            outcome = ValueOutcome.success(start)
            assert outcome.bind(f).bind(g) == outcome.bind(lambda x: f(x).bind(g))

    def test_failure_short_circuits_a_chain(self) -> None:
        calls: list[int] = []

        def step(x: int) -> ValueOutcome[int]:
            calls.append(x)
            return ValueOutcome.success(x)

        outcome = (
            ValueOutcome.success(1)
            .bind(lambda _: ValueOutcome.failure(NOT_FOUND))
            .bind(step)
            .map(lambda x: x + 1)
        )
        assert calls == []
        assert outcome.errors == (NOT_FOUND,)

    def test_success_to_outcome(self) -> None:
        assert ValueOutcome.success(5).to_outcome() == Outcome.success()

    def test_failure_to_outcome(self) -> None:
        errors = [NOT_FOUND, CONFLICT]
        assert ValueOutcome.failure(errors).to_outcome() == Outcome.failure(errors)

    def test_value_or(self) -> None:
        assert ValueOutcome.success(1).value_or(0) == 1
        assert ValueOutcome.failure(NOT_FOUND).value_or(0) == 0

    def test_accepts_custom_error_kinds(self) -> None:
        class RateLimitedError:
            code = "RateLimited"
            status_code = 429

            def __init__(self, message: str) -> None:
                self.message = message

        error = RateLimitedError("Slow down")
        outcome: ValueOutcome[int] = ValueOutcome.failure(error)
        assert outcome.first_error is error


class TestFailureDiagnostics:
    """The fail-fast message depends on configuration; the behaviour doesn't."""

    @pytest.fixture(autouse=True)
    def _fresh_settings(self) -> Iterator[None]:
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_development_message_names_factory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        with pytest.raises(InvariantViolationError, match=r"ValueOutcome\.failure\(\)"):
            ValueOutcome.failure([])

    def test_production_message_is_terse(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        with pytest.raises(InvariantViolationError, match="bug in the calling code"):
            Outcome.failure([])

    def test_error_names_the_outcome_type(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "test")
        with pytest.raises(InvariantViolationError) as exc_info:
            Outcome.failure(None)  # type: ignore[arg-type]
        assert exc_info.value.subject == "Outcome"

    def test_unrecognized_environment_still_fails_fast(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "staging")
        with pytest.raises(InvariantViolationError, match="bug in the calling code"):
            Outcome.failure([])
        with pytest.raises(InvariantViolationError):
            ValueOutcome.failure(None)  # type: ignore[arg-type]
