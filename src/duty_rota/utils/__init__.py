"""Utilities package for the duty rota generator."""
from .logging_setup import (
    TRACE,
    GenerationLogger,
    get_logger,
    init_logging,
    log_constraint,
    log_function_call,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "log_constraint",
    "GenerationLogger",
    "init_logging",
    "TRACE",
]
