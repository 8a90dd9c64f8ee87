"""Observability for contract-extrinsics."""

from .logging import configure_logging, configure_logging_for, get_logger

__all__ = [
    "configure_logging",
    "configure_logging_for",
    "get_logger",
]
