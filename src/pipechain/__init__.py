"""
pipechain – ordered HTTP middleware composition.

Import path convention::

    from pipechain import build, start
    from pipechain.middlewares import with_request_logging, require_bearer
    from pipechain.adapters.fastapi import mount_handler

Typical usage::

    common = build(with_correlation_id(), with_request_logging())
    secured = build(require_bearer(verify_token))

    app_handler = start(index).pipe(common).pipe(secured).handler()
"""

from pipechain.http.types import Handler, Middleware
from pipechain.pipeline import PipeHandler, Pipeline, build, start

__version__ = "0.1.0"
__all__ = [
    "Handler",
    "Middleware",
    "PipeHandler",
    "Pipeline",
    "__version__",
    "build",
    "start",
]
