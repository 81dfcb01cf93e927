"""
GSM Core Logging Module

Structured logging configuration for applications using gsm_core.
"""

from .setup import setup_logging

__all__ = [
    "setup_logging",
]
