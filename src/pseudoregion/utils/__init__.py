"""Utility functions for pseudoregion.

This module provides utility functions including:

- Logging setup and configuration
- Build statistics for tessellation holders
"""

from pseudoregion.utils.logging import (
    TopologyLogger,
    TopologyStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "TopologyLogger",
    "TopologyStats",
    "configure_logging",
    "get_logger",
]
