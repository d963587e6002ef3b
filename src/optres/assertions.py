"""
Test assertions for Option and Result values.

Expressive assert helpers that produce clear failure messages, for use in
any pytest suite that works with optres containers.

Usage in tests:
    from optres import ResultAssertions

    def test_parse_port():
        result = parse_port("8080")
        assert ResultAssertions.assert_success(result) == 8080

    def test_parse_port_rejects_text():
        ResultAssertions.assert_failure_value(parse_port("http"), "not a number")
"""

from __future__ import annotations

from typing import Any, TypeVar

from optres.option import Option
from optres.result import Result

T = TypeVar("T")
E = TypeVar("E")


def _context(message: str) -> str:
    return f" — {message}" if message else ""


class OptionAssertions:
    """Expressive test assertions for Option values."""

    @staticmethod
    def assert_present(option: Option[T], message: str = "") -> T:
        """
        Assert the Option is Present and return the value.

            user = OptionAssertions.assert_present(find_user("alice"))
        """
        assert option.is_present(), f"Expected Present but got {option!r}{_context(message)}"
        return option.get()

    @staticmethod
    def assert_absent(option: Option[Any], message: str = "") -> None:
        """Assert the Option is Absent."""
        assert option.is_absent(), f"Expected Absent() but got {option!r}{_context(message)}"

    @staticmethod
    def assert_present_value(option: Option[T], expected_value: Any) -> None:
        """Assert the Option is Present with the specific value."""
        value = OptionAssertions.assert_present(option)
        assert value == expected_value, (
            f"Expected present value {expected_value!r} but got {value!r}"
        )


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T, Any], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

        Raises AssertionError with clear message on failure.

            value = ResultAssertions.assert_success(result)
        """
        assert result.is_success(), (
            f"Expected Success but got Failure("
            f"{result.unwrap_failure()!r}){_context(message)}"
        )
        return result.unwrap()

    @staticmethod
    def assert_failure(
        result: Result[Any, E],
        expected_type: type[Any] | None = None,
        message: str = "",
    ) -> E:
        """
        Assert the Result is a Failure, optionally checking the error's type.

            error = ResultAssertions.assert_failure(result, ValueError)
        """
        context = _context(message)
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.unwrap()!r}){context}"
        )
        error = result.unwrap_failure()
        if expected_type is not None:
            assert isinstance(error, expected_type), (
                f"Expected error of type {expected_type.__name__} "
                f"but got {type(error).__name__}: {error!r}{context}"
            )
        return error

    @staticmethod
    def assert_success_value(result: Result[T, Any], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_failure_value(result: Result[Any, E], expected_error: Any) -> None:
        """Assert the Result is a Failure carrying exactly the expected error."""
        error = ResultAssertions.assert_failure(result)
        assert error == expected_error, (
            f"Expected failure {expected_error!r} but got {error!r}"
        )
