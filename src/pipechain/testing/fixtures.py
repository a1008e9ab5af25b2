"""Testing fixtures – pytest fixtures for pipechain doubles.

Enable in ``conftest.py``::

    pytest_plugins = ["pipechain.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from pipechain.observability.correlation import CorrelationContext, RequestContext
from pipechain.testing.fakes import ResponseRecorder


@pytest.fixture
def recorder() -> ResponseRecorder:
    return ResponseRecorder()


@pytest.fixture
def trace() -> list[str]:
    return []


@pytest.fixture
def correlation_fixture():
    ctx = RequestContext(correlation_id="test-correlation-id")
    token = CorrelationContext.set(ctx)
    yield ctx
    CorrelationContext.reset(token)


__all__ = ["correlation_fixture", "recorder", "trace"]
