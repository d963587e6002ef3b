"""
Logging taps for Option and Result — structlog, never inside the core.

The container modules stay pure. This module adds observability at the
edges, where application code decides what is worth logging:

    result = (
        load_config(path)
        .and_then(validate)
    )
    log_outcome(result, "config.loaded")

    @traced("user.lookup")
    def find_user(user_id: str) -> Option[User]: ...

Every tap returns its input unchanged and never catches: an exception
raised by the wrapped function is logged as ``<event>.raised`` and then
propagates.
"""

from __future__ import annotations

import functools
import time
from typing import Any, Callable, ParamSpec, TypeVar

import structlog

from optres.config import OptresSettings, get_settings
from optres.option import Option, Present
from optres.result import Result

P = ParamSpec("P")
R = TypeVar("R")


def configure_logging(settings: OptresSettings | None = None) -> None:
    """
    Configure structlog for the renderer and level in settings.

    console: colored, human-readable output (development).
    json: JSON lines to stdout (machine-readable).
    """
    settings = settings or get_settings()
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.logging.renderer == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.logging.level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _logger(logger: Any | None) -> Any:
    return logger if logger is not None else structlog.get_logger("optres")


def _payload(key: str, value: Any) -> dict[str, str]:
    if not get_settings().logging.include_payloads:
        return {}
    return {key: repr(value)}


def _event_fields(fields: dict[str, Any], outcome: str, key: str, payload: Any) -> dict[str, Any]:
    # The tap's own keys override caller fields of the same name.
    return {**fields, "outcome": outcome, **_payload(key, payload)}


def log_outcome(
    result: Result[Any, Any],
    event: str,
    *,
    logger: Any | None = None,
    **fields: Any,
) -> Result[Any, Any]:
    """
    Log a Result and return it unchanged.

    Success is logged at info, Failure at warning.

        log_outcome(parse(raw), "payload.parsed", source="s3")
    """
    log = _logger(logger)
    return result.inspect(
        lambda value: log.info(event, **_event_fields(fields, "success", "value", value))
    ).inspect_failure(
        lambda error: log.warning(event, **_event_fields(fields, "failure", "error", error))
    )


def log_presence(
    option: Option[Any],
    event: str,
    *,
    logger: Any | None = None,
    **fields: Any,
) -> Option[Any]:
    """Log an Option at debug level and return it unchanged."""
    log = _logger(logger)
    match option:
        case Present(value):
            log.debug(event, **_event_fields(fields, "present", "value", value))
        case _:
            log.debug(event, **{**fields, "outcome": "absent"})
    return option


def traced(event: str, *, logger: Any | None = None) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator that logs what a function returns, with its duration.

    Result and Option returns are logged via log_outcome / log_presence;
    any other return value is logged at debug as outcome="value".

        @traced("order.validate")
        def validate(order: Order) -> Result[Order, str]:
            ...
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            log = _logger(logger)
            start = time.monotonic()
            try:
                returned = fn(*args, **kwargs)
            except Exception as e:
                log.error(
                    f"{event}.raised",
                    duration_ms=round((time.monotonic() - start) * 1000, 3),
                    error=str(e),
                    exc_info=True,
                )
                raise
            duration_ms = round((time.monotonic() - start) * 1000, 3)
            match returned:
                case Result():
                    log_outcome(returned, event, logger=log, duration_ms=duration_ms)
                case Option():
                    log_presence(returned, event, logger=log, duration_ms=duration_ms)
                case _:
                    log.debug(event, outcome="value", duration_ms=duration_ms)
            return returned

        return wrapper

    return decorator


__all__ = ["configure_logging", "log_outcome", "log_presence", "traced"]
