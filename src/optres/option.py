"""
Option monad — a value that is either Present or Absent.

An Option[T] is either Present(value: T) or Absent(). Absence is carried by
the variant itself, never by a sentinel: Present(None) is a present value
that happens to be None.

        map / and_then              map / and_then
    ┌─────────────┐   Present   ┌─────────────┐   Present
    │  find user  │────────────▶│ load avatar │────────────▶ Option[T]
    └──────┬──────┘             └──────┬──────┘
           │ Absent                    │ Absent
           └───────────────────────────┴─────────────────────▶ Absent()

Design choices:
  - Sealed base class + two frozen, slotted dataclass variants.
  - Methods dispatch with match/case on the variant class, not on a flag.
  - Arguments named ``other`` / ``default`` are eager values; arguments
    named ``fn`` / ``default_fn`` are callables run only when needed.
  - get / unwrap / expect are the only methods that raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Iterator,
    TypeVar,
    final,
)

from optres.errors import NotFoundError

if TYPE_CHECKING:
    from optres.result import Result

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
E = TypeVar("E")

_VARIANTS = frozenset({"Present", "Absent"})


class Option(Generic[T]):
    """
    Optional value container.

    Two possible states:
      - Present(value: T) — a value is there
      - Absent()          — nothing is there

    Usage:
        >>> Option.present(5).map(lambda x: x * 2).get()
        10

        >>> Option.absent().get_or_default(10)
        10
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Option[T]:
        if cls is Option:
            raise TypeError("Option cannot be instantiated; use Present(...) or Absent()")
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__qualname__ not in _VARIANTS:
            raise TypeError("Option is sealed; its only variants are Present and Absent")

    # ──────────────────────── Introspection ────────────────────────

    def is_present(self) -> bool:
        """Check if this Option holds a value."""
        return isinstance(self, Present)

    def is_absent(self) -> bool:
        """Check if this Option is empty."""
        return isinstance(self, Absent)

    def is_present_and(self, predicate: Callable[[T], bool]) -> bool:
        """True if Present and the value satisfies the predicate. Absent never calls it."""
        match self:
            case Present(v):
                return bool(predicate(v))
        return False

    def is_absent_or(self, predicate: Callable[[T], bool]) -> bool:
        """True if Absent, or if the present value satisfies the predicate."""
        match self:
            case Present(v):
                return bool(predicate(v))
        return True

    # ──────────────────────── Unsafe Accessors ────────────────────────

    def get(self) -> T:
        """
        Extract the value. Raises NotFoundError if called on Absent.

        Unsafe: prefer get_or_default(), unwrap_or_else() or match/case.
        """
        match self:
            case Present(v):
                return v
        raise NotFoundError()

    def unwrap(self) -> T:
        """Alias of get(). Unsafe."""
        return self.get()

    def expect(self, message: str) -> T:
        """
        Extract the value, raising NotFoundError(message) if called on Absent.

        Unsafe: reach for it only where an invariant guarantees presence,
        and make the message say which invariant broke.
        """
        match self:
            case Present(v):
                return v
        raise NotFoundError(message)

    # ──────────────────────── Defaulting Accessors ────────────────────────

    def get_or_default(self, default: T) -> T:
        """Extract the value or return the default."""
        match self:
            case Present(v):
                return v
        return default

    def unwrap_or(self, default: T) -> T:
        """Extract the value or return the default."""
        return self.get_or_default(default)

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        """Extract the value or compute a default. fn runs only on Absent."""
        match self:
            case Present(v):
                return v
        return fn()

    # ──────────────────────── Transformations ────────────────────────

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        """
        Transform the present value.

            Option.present(5).map(lambda x: x * 2)   # → Present(10)
            Option.absent().map(lambda x: x * 2)     # → Absent()
        """
        match self:
            case Present(v):
                return Present(fn(v))
        return Absent()

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        """Apply fn to the present value, or return default."""
        match self:
            case Present(v):
                return fn(v)
        return default

    def map_or_else(self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        """Apply fn to the present value, or compute a default with default_fn."""
        match self:
            case Present(v):
                return fn(v)
        return default_fn()

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """
        Chain an Option-returning function. Short-circuits on Absent.

            def find_manager(user): ...   # -> Option[User]

            find_user(uid).and_then(find_manager)
        """
        match self:
            case Present(v):
                return fn(v)
        return Absent()

    # ──────────────────────── Side Effects ────────────────────────

    def inspect(self, fn: Callable[[T], Any]) -> Option[T]:
        """Run fn on the present value for its side effect and return self."""
        match self:
            case Present(v):
                fn(v)
        return self

    # ──────────────────────── Boolean Combinators ────────────────────────

    def and_(self, other: Option[U]) -> Option[U]:
        """Return other if self is Present, else Absent()."""
        match self:
            case Present():
                return other
        return Absent()

    def or_(self, other: Option[T]) -> Option[T]:
        """Return self if Present, else other."""
        match self:
            case Present():
                return self
        return other

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        """Return self if Present, else the Option computed by fn."""
        match self:
            case Present():
                return self
        return fn()

    def xor(self, other: Option[T]) -> Option[T]:
        """Return whichever side is Present when exactly one is; otherwise Absent()."""
        match (self, other):
            case (Present(), Absent()):
                return self
            case (Absent(), Present()):
                return other
        return Absent()

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair two present values: Present((a, b)), or Absent() if either is missing."""
        match (self, other):
            case (Present(a), Present(b)):
                return Present((a, b))
        return Absent()

    def zip_with(self, other: Option[U], fn: Callable[[T, U], V]) -> Option[V]:
        """Combine two present values with fn; Absent() if either is missing."""
        match (self, other):
            case (Present(a), Present(b)):
                return Present(fn(a, b))
        return Absent()

    # ──────────────────────── Conversions ────────────────────────

    def to_list(self) -> list[T]:
        """Zero- or one-element list."""
        match self:
            case Present(v):
                return [v]
        return []

    def to_result(self, error: E) -> Result[T, E]:
        """Present(v) → Success(v); Absent → Failure(error)."""
        from optres.result import Failure, Success

        match self:
            case Present(v):
                return Success(v)
        return Failure(error)

    def to_result_else(self, fn: Callable[[], E]) -> Result[T, E]:
        """Present(v) → Success(v); Absent → Failure(fn()). fn runs only on Absent."""
        from optres.result import Failure, Success

        match self:
            case Present(v):
                return Success(v)
        return Failure(fn())

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def present(value: T) -> Option[T]:
        """Create an Option holding value."""
        return Present(value)

    @staticmethod
    def absent() -> Option[T]:
        """Create an empty Option."""
        return Absent()

    @staticmethod
    def from_nullable(value: T | None) -> Option[T]:
        """
        Bridge from Python's Optional: None becomes Absent().

            Option.from_nullable(os.environ.get("HOME"))
        """
        if value is None:
            return Absent()
        return Present(value)

    # ──────────────────────── Dunder methods ────────────────────────

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __bool__(self) -> bool:
        """Allow truthiness check: `if option: ...` holds only on Present."""
        return self.is_present()


@final
@dataclass(frozen=True, slots=True, repr=False)
class Present(Option[T]):
    """The present variant — wraps a value of type T."""

    value: T

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


@final
@dataclass(frozen=True, slots=True, repr=False)
class Absent(Option[T]):
    """The absent variant — carries nothing."""

    def __repr__(self) -> str:
        return "Absent()"


__all__ = ["Absent", "Option", "Present"]
