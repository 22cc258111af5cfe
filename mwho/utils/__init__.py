"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    MWHOError,
    UnknownGroupError,
    InvalidAnswerError,
    UnknownClassError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "MWHOError",
    "UnknownGroupError",
    "InvalidAnswerError",
    "UnknownClassError",
]
