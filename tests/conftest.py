"""Shared fixtures for the pipechain test suite."""
from __future__ import annotations

import pytest

from pipechain.observability.correlation import CorrelationContext
from pipechain.testing.fixtures import correlation_fixture, recorder, trace  # noqa: F401


@pytest.fixture(autouse=True)
def _clear_correlation():
    CorrelationContext.clear()
    yield
    CorrelationContext.clear()
