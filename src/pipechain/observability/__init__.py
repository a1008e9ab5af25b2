"""Observability – correlation context and structured logging."""
from pipechain.observability.correlation import CorrelationContext, RequestContext
from pipechain.observability.logging import CorrelationProcessor, JsonLoggerFactory, get_logger

__all__ = [
    "CorrelationContext",
    "CorrelationProcessor",
    "JsonLoggerFactory",
    "RequestContext",
    "get_logger",
]
