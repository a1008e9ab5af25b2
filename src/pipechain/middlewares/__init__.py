"""Built-in middleware factories.

Each factory returns a :data:`~pipechain.http.types.Middleware` ready to pass
to :func:`pipechain.build`.
"""
from __future__ import annotations

from pipechain.config.settings import PipechainSettings
from pipechain.middlewares.auth import require_bearer
from pipechain.middlewares.correlation import with_correlation_id
from pipechain.middlewares.headers import with_headers
from pipechain.middlewares.request_logging import with_request_logging
from pipechain.pipeline import Pipeline, build


def standard_pipeline(settings: PipechainSettings | None = None) -> Pipeline:
    """Correlation, then request logging, then default headers.

    Steps disabled by *settings* are left out.
    """
    settings = settings or PipechainSettings()
    middleware = [with_correlation_id(settings.correlation_header)]
    if settings.request_logging:
        middleware.append(with_request_logging())
    if settings.default_headers:
        middleware.append(with_headers(settings.header_map()))
    return build(*middleware)


__all__ = [
    "require_bearer",
    "standard_pipeline",
    "with_correlation_id",
    "with_headers",
    "with_request_logging",
]
