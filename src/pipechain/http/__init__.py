"""HTTP – handler types, request value and response writer."""
from pipechain.http.request import HttpRequest
from pipechain.http.response import BufferedResponse, write_json
from pipechain.http.types import Handler, Middleware, Request, ResponseWriter, header_value

__all__ = [
    "BufferedResponse",
    "Handler",
    "HttpRequest",
    "Middleware",
    "Request",
    "ResponseWriter",
    "header_value",
    "write_json",
]
