"""Errors that middleware answer requests with."""

from __future__ import annotations

from pipechain.kernel.errors.base import BaseError


class UnauthorizedError(BaseError):
    """Missing or rejected credentials; rendered with a Bearer challenge."""

    code = "unauthorized"
    status = 401

    def __init__(self, message: str = "Missing or invalid credentials", *, realm: str = "api") -> None:
        super().__init__(message)
        self.realm = realm

    def headers(self) -> dict[str, str]:
        return {"WWW-Authenticate": f'Bearer realm="{self.realm}"'}


__all__ = ["UnauthorizedError"]
