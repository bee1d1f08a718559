"""Configuration management for pseudoregion.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ClassificationConfig: Corner classification and side discovery settings
- LoggingConfig: Logging settings
- PseudoRegionSettings: Main application settings
"""

from pseudoregion.config.settings import (
    ClassificationConfig,
    FineVertexPolicy,
    LoggingConfig,
    PseudoRegionSettings,
    get_default_settings,
)

__all__ = [
    "ClassificationConfig",
    "FineVertexPolicy",
    "LoggingConfig",
    "PseudoRegionSettings",
    "get_default_settings",
]
