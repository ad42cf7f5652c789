"""Utility functions for fontblaster.

This module provides:

- Diagnostics sinks (structlog-backed and in-memory)
- Logging setup and configuration
"""

from fontblaster.utils.logging import (
    DiagnosticRecord,
    DiagnosticsSink,
    MemorySink,
    StructlogSink,
    configure_logging,
)

__all__ = [
    "DiagnosticRecord",
    "DiagnosticsSink",
    "MemorySink",
    "StructlogSink",
    "configure_logging",
]
