"""Middleware – Bearer token authentication."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

from pipechain.http.types import Handler, Middleware, header_value
from pipechain.kernel.errors import UnauthorizedError
from pipechain.observability.correlation import CorrelationContext, RequestContext
from pipechain.observability.logging import get_logger

logger = get_logger(__name__)


def require_bearer(
    verifier: Callable[[str], Any],
    realm: str = "api",
) -> Middleware:
    """Reject requests lacking a Bearer token accepted by *verifier*.

    Parameters
    ----------
    verifier:
        ``(token) -> principal | None``. A ``None`` result rejects the
        request. A verifier that raises is treated as a rejection.
    realm:
        Reported in the ``WWW-Authenticate`` challenge.

    Rejected requests get a 401 JSON body and never reach the inner
    handler. Accepted principals are recorded on the active
    :class:`RequestContext`, or on a fresh one when none is set.
    """

    def middleware(next_: Handler) -> Handler:
        def handler(writer: Any, request: Any) -> None:
            auth_value = (header_value(request, "Authorization") or "").strip()
            principal = None
            if auth_value.lower().startswith("bearer "):
                bearer = auth_value[7:].strip()
                if bearer:
                    try:
                        principal = verifier(bearer)
                    except Exception:  # noqa: BLE001
                        logger.warning("auth.verifier_failed", exc_info=True)
                        principal = None

            if principal is None:
                UnauthorizedError(realm=realm).render(writer)
                return

            current = CorrelationContext.get() or RequestContext.new()
            reset_token = CorrelationContext.set(
                dataclasses.replace(current, principal=str(principal))
            )
            try:
                next_(writer, request)
            finally:
                CorrelationContext.reset(reset_token)

        return handler

    middleware.__name__ = "require_bearer"
    return middleware


__all__ = ["require_bearer"]
