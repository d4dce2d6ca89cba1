"""
Shared utilities for Dead Poets

This package contains common utilities used by the poetry service.
"""

from .logger import setup_logging, get_request_logger, get_audit_logger
from .security import SecurityUtils

__all__ = [
    "setup_logging",
    "get_request_logger",
    "get_audit_logger",
    "SecurityUtils",
]

__version__ = "1.0.0"
