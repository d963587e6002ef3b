"""
Result monad — a value that is either Success or Failure.

A Result[T, E] is either Success(value: T) or Failure(error: E). The error
type is free: it can be an exception, a string, an enum or any domain value.
Failures propagate automatically through .and_then() short-circuiting.

    ┌───────────┐   and_then    ┌───────────┐   and_then    ┌──────────┐
    │ validate  │──Success──────│  enrich   │──Success──────│ persist  │──→ Result[T, E]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result[T, E]

Asymmetry of the boolean combinators:
  - and_ / and_then keep self's error when self is a Failure
  - or_ / or_else may replace the error, and so the error type
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, final

from optres.errors import UnexpectedVariantError
from optres.option import Absent, Option, Present

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")

_VARIANTS = frozenset({"Success", "Failure"})


class Result(Generic[T, E]):
    """
    Success/failure container.

    Two possible states:
      - Success(value: T) — the happy path
      - Failure(error: E) — the error track

    Usage:
        >>> Result.success(42).map(lambda x: x * 2).unwrap()
        84

        >>> Result.failure("bad input").map(lambda x: x * 2).is_failure()
        True
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Result[T, E]:
        if cls is Result:
            raise TypeError("Result cannot be instantiated; use Success(...) or Failure(...)")
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__qualname__ not in _VARIANTS:
            raise TypeError("Result is sealed; its only variants are Success and Failure")

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    def is_success_and(self, predicate: Callable[[T], bool]) -> bool:
        """True if Success and the value satisfies the predicate."""
        match self:
            case Success(v):
                return bool(predicate(v))
        return False

    def is_failure_and(self, predicate: Callable[[E], bool]) -> bool:
        """True if Failure and the error satisfies the predicate."""
        match self:
            case Failure(err):
                return bool(predicate(err))
        return False

    # ──────────────────────── Unsafe Accessors ────────────────────────

    def unwrap(self) -> T:
        """
        Extract the success value. Raises UnexpectedVariantError on a Failure.

        Prefer .either(), unwrap_or_else() or match/case for safe access.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise UnexpectedVariantError(f"called unwrap() on a Failure: {err!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def unwrap_failure(self) -> E:
        """Extract the error. Raises UnexpectedVariantError on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise UnexpectedVariantError(f"called unwrap_failure() on a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def expect(self, message: str) -> T:
        """Extract the success value, raising UnexpectedVariantError(message) on a Failure."""
        match self:
            case Success(v):
                return v
        raise UnexpectedVariantError(message)

    def expect_failure(self, message: str) -> E:
        """Extract the error, raising UnexpectedVariantError(message) on a Success."""
        match self:
            case Failure(err):
                return err
        raise UnexpectedVariantError(message)

    # ──────────────────────── Defaulting Accessors ────────────────────────

    def unwrap_or(self, default: T) -> T:
        """Extract the success value or return a default on failure."""
        match self:
            case Success(v):
                return v
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        """Extract the success value or compute one from the error."""
        return self.either(lambda v: v, fn)

    # ──────────────────────── Core Transformations ────────────────────────

    def either(self, on_success: Callable[[T], R], on_failure: Callable[[E], R]) -> R:
        """
        Apply one of two functions depending on the state.

        This is the fundamental destructor.

            result.either(
                on_success=lambda user: f"Hello {user.name}",
                on_failure=lambda err: f"Error: {err}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """
        Transform the success value. Short-circuits on failure.

            Result.success(5).map(lambda x: x * 2)    # → Success(10)
            Result.failure("e").map(lambda x: x * 2)  # → Failure('e')
        """
        match self:
            case Success(v):
                return Success(fn(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map_failure(self, fn: Callable[[E], F]) -> Result[T, F]:
        """
        Transform the error. Passes through success unchanged.

            Result.failure("error").map_failure(len)  # → Failure(5)
        """
        match self:
            case Success(v):
                return Success(v)
            case Failure(err):
                return Failure(fn(err))
        raise TypeError("unreachable")  # pragma: no cover

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        """Apply fn to the success value, or return default on failure."""
        match self:
            case Success(v):
                return fn(v)
        return default

    def map_or_else(self, default_fn: Callable[[E], U], fn: Callable[[T], U]) -> U:
        """Apply fn to the success value, or compute a default from the error."""
        return self.either(fn, default_fn)

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Chain a Result-returning function. Short-circuits on failure.

        This is the KEY operator — it connects railway segments.

            def validate(x: int) -> Result[int, str]:
                if x > 0: return Result.success(x)
                return Result.failure("must be positive")

            Result.success(5).and_then(validate)   # → Success(5)
            Result.success(-1).and_then(validate)  # → Failure('must be positive')
        """
        match self:
            case Success(v):
                return fn(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Side Effects ────────────────────────

    def inspect(self, fn: Callable[[T], Any]) -> Result[T, E]:
        """
        Execute a side effect on the success value without altering the Result.

            result.inspect(lambda user: log.info("user.created", id=user.id))
        """
        match self:
            case Success(v):
                fn(v)
        return self

    def inspect_failure(self, fn: Callable[[E], Any]) -> Result[T, E]:
        """Execute a side effect on the error without altering the Result."""
        match self:
            case Failure(err):
                fn(err)
        return self

    # ──────────────────────── Boolean Combinators ────────────────────────

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return other if self is a Success; otherwise keep self's error."""
        match self:
            case Success():
                return other
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return self if it is a Success; otherwise other."""
        match self:
            case Success(v):
                return Success(v)
        return other

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """
        Recover from failure with a Result-returning function.

            fetch_primary().or_else(lambda err: fetch_replica())
        """
        match self:
            case Success(v):
                return Success(v)
            case Failure(err):
                return fn(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Conversions ────────────────────────

    def to_option(self) -> Option[T]:
        """Success(v) → Present(v); Failure → Absent(). The error is dropped."""
        match self:
            case Success(v):
                return Present(v)
        return Absent()

    def to_error_option(self) -> Option[E]:
        """Failure(e) → Present(e); Success → Absent()."""
        match self:
            case Failure(err):
                return Present(err)
        return Absent()

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T, E]:
        """Create a successful Result wrapping the given value."""
        return Success(value)

    @staticmethod
    def failure(error: E) -> Result[T, E]:
        """Create a failed Result wrapping the given error."""
        return Failure(error)

    @staticmethod
    def from_computation(
        computation: Callable[[], T],
        *exception_types: type[BaseException],
    ) -> Result[T, BaseException]:
        """
        Create a Result from a computation that may raise.

        Only the listed exception types (default: Exception) are captured
        into a Failure; anything else propagates.

        Before:
            try:
                return Result.success(int(raw))
            except ValueError as e:
                return Result.failure(e)

        After:
            return Result.from_computation(lambda: int(raw), ValueError)
        """
        caught = exception_types or (Exception,)
        try:
            return Success(computation())
        except caught as e:
            return Failure(e)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@final
@dataclass(frozen=True, slots=True, repr=False)
class Success(Result[T, E]):
    """The success track — wraps a value of type T."""

    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@final
@dataclass(frozen=True, slots=True, repr=False)
class Failure(Result[T, E]):
    """The failure track — wraps an error of type E."""

    error: E

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


__all__ = ["Failure", "Result", "Success"]
