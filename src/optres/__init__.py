"""
Option and Result containers for Python.

Explicit, type-visible handling of "value may be absent" and "operation may
fail" — no None checks or exceptions for ordinary control flow.

    from optres import Option, Result

    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Result.failure("not a number")
        return Result.success(int(raw))

    port = (
        Option.from_nullable(os.environ.get("PORT"))
        .to_result("PORT is not set")
        .and_then(parse_port)
        .unwrap_or(8080)
    )
"""

from optres.assertions import OptionAssertions, ResultAssertions
from optres.combinators import flatten, flatten_result, transpose, transpose_result, unzip
from optres.config import LoggingSettings, OptresSettings, get_settings
from optres.errors import NotFoundError, OptresError, UnexpectedVariantError
from optres.observe import configure_logging, log_outcome, log_presence, traced
from optres.option import Absent, Option, Present
from optres.result import Failure, Result, Success

__all__ = [
    "Absent",
    "Failure",
    "LoggingSettings",
    "NotFoundError",
    "Option",
    "OptionAssertions",
    "OptresError",
    "OptresSettings",
    "Present",
    "Result",
    "ResultAssertions",
    "Success",
    "UnexpectedVariantError",
    "configure_logging",
    "flatten",
    "flatten_result",
    "get_settings",
    "log_outcome",
    "log_presence",
    "traced",
    "transpose",
    "transpose_result",
    "unzip",
]

__version__ = "0.1.0"
