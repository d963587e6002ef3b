"""
Shared test fixtures and hypothesis strategies for the optres test suite.

Strategies build arbitrary Option / Result values over small payloads so
the property tests in tests/unit/test_laws.py stay fast.
"""

from __future__ import annotations

from typing import Any

import pytest
import structlog
from hypothesis import strategies as st

from optres import Absent, Failure, Present, Success, get_settings

payloads = st.one_of(st.integers(), st.text(max_size=8), st.none())


def options(values: st.SearchStrategy[Any] = payloads) -> st.SearchStrategy[Any]:
    """Arbitrary Present(value) or Absent()."""
    return st.one_of(values.map(Present), st.just(Absent()))


def results(
    values: st.SearchStrategy[Any] = payloads,
    errors: st.SearchStrategy[Any] = st.text(max_size=8),
) -> st.SearchStrategy[Any]:
    """Arbitrary Success(value) or Failure(error)."""
    return st.one_of(values.map(Success), errors.map(Failure))


@pytest.fixture()
def fresh_settings() -> Any:
    """Drop cached settings and structlog configuration around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
