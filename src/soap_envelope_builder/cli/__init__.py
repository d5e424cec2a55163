"""Command-line interface for SOAP Envelope Builder.

This module provides the ``soap-envelope`` tool, which renders envelopes from
JSON definitions and emits fault documents for stubbed error responses.
"""

from .main import main

__all__ = ["main"]
