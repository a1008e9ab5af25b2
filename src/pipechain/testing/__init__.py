"""Testing support – fakes for exercising handlers without a server.

Import fixtures in your ``conftest.py``::

    pytest_plugins = ["pipechain.testing.fixtures"]
"""

from pipechain.testing.fakes import (
    ResponseRecorder,
    make_request,
    tracing_handler,
    tracing_middleware,
)

__all__ = ["ResponseRecorder", "make_request", "tracing_handler", "tracing_middleware"]
