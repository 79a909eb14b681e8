"""Observability: logging configuration."""

from .logging import JsonFormatter, configure_logging

__all__ = ["configure_logging", "JsonFormatter"]
