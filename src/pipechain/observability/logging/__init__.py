"""Observability – structured logging helpers."""
from pipechain.observability.logging.factory import JsonLoggerFactory
from pipechain.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "JsonLoggerFactory", "get_logger"]
