"""
Errors raised by the unsafe accessors of Option and Result.

Only the ``get`` / ``unwrap`` / ``expect`` family raises. Every other
combinator is total, so these errors signal a broken caller assumption
("this Option is always present here"), not an ordinary outcome.

Hierarchy::

    OptresError
    ├── NotFoundError            (also a LookupError)
    └── UnexpectedVariantError   (also a ValueError)
"""

from __future__ import annotations


class OptresError(Exception):
    """Root of the optres error hierarchy."""

    default_message: str = "optres error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class NotFoundError(OptresError, LookupError):
    """An Option accessor was called on ``Absent``."""

    default_message = "value not found"


class UnexpectedVariantError(OptresError, ValueError):
    """A Result accessor was called on the wrong variant."""

    default_message = "unexpected variant"


__all__ = ["NotFoundError", "OptresError", "UnexpectedVariantError"]
