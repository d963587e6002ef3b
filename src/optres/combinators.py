"""
Free functions over nested containers.

    flatten           Option[Option[T]]        → Option[T]
    unzip             Option[tuple[T, U]]      → tuple[Option[T], Option[U]]
    transpose         Option[Result[T, E]]     → Result[Option[T], E]
    flatten_result    Result[Result[T, E], E]  → Result[T, E]
    transpose_result  Result[Option[T], E]     → Option[Result[T, E]]

transpose and transpose_result are inverses of each other.
"""

from __future__ import annotations

from typing import TypeVar

from optres.option import Absent, Option, Present
from optres.result import Failure, Result, Success

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


def flatten(option: Option[Option[T]]) -> Option[T]:
    """
    Remove one layer of Option.

        flatten(Present(Present(5)))  # → Present(5)
        flatten(Present(Absent()))    # → Absent()
        flatten(Absent())             # → Absent()
    """
    match option:
        case Present(Option() as inner):
            return inner
        case Present(other):
            raise TypeError(f"flatten() expects Option[Option[T]], got Present({other!r})")
    return Absent()


def unzip(option: Option[tuple[T, U]]) -> tuple[Option[T], Option[U]]:
    """Split a present pair into two Options; Absent gives two Absents."""
    match option:
        case Present((first, second)):
            return Present(first), Present(second)
        case Present(other):
            raise TypeError(f"unzip() expects Option[tuple[T, U]], got Present({other!r})")
    return Absent(), Absent()


def transpose(option: Option[Result[T, E]]) -> Result[Option[T], E]:
    """
    Turn an Option of a Result into a Result of an Option.

        transpose(Absent())                # → Success(Absent())
        transpose(Present(Success(5)))     # → Success(Present(5))
        transpose(Present(Failure("e")))   # → Failure('e')
    """
    match option:
        case Absent():
            return Success(Absent())
        case Present(Success(value)):
            return Success(Present(value))
        case Present(Failure(error)):
            return Failure(error)
        case Present(other):
            raise TypeError(f"transpose() expects Option[Result[T, E]], got Present({other!r})")
    raise TypeError("unreachable")  # pragma: no cover


def flatten_result(result: Result[Result[T, E], E]) -> Result[T, E]:
    """
    Remove one layer of Result. The outer failure wins over the inner one.

        flatten_result(Success(Success(5)))        # → Success(5)
        flatten_result(Success(Failure("inner")))  # → Failure('inner')
        flatten_result(Failure("outer"))           # → Failure('outer')
    """
    match result:
        case Success(Result() as inner):
            return inner
        case Success(other):
            raise TypeError(f"flatten_result() expects Result[Result[T, E], E], got Success({other!r})")
        case Failure(error):
            return Failure(error)
    raise TypeError("unreachable")  # pragma: no cover


def transpose_result(result: Result[Option[T], E]) -> Option[Result[T, E]]:
    """
    Turn a Result of an Option into an Option of a Result.

        transpose_result(Success(Absent()))    # → Absent()
        transpose_result(Success(Present(5)))  # → Present(Success(5))
        transpose_result(Failure("e"))         # → Present(Failure('e'))
    """
    match result:
        case Success(Absent()):
            return Absent()
        case Success(Present(value)):
            return Present(Success(value))
        case Success(other):
            raise TypeError(f"transpose_result() expects Result[Option[T], E], got Success({other!r})")
        case Failure(error):
            return Present(Failure(error))
    raise TypeError("unreachable")  # pragma: no cover


__all__ = ["flatten", "flatten_result", "transpose", "transpose_result", "unzip"]
