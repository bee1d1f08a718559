"""Configuration settings for Pseudoregion."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class FineVertexPolicy(str, Enum):
    """How fine-tessellation vertices are classified when first seen."""

    FIXED = "fixed"
    RETEST = "retest"


class ClassificationConfig(BaseModel):
    """Configuration for corner classification and boundary side discovery.

    Geometric predicates always use exact comparisons. ``coordinate_decimals``
    only affects how coordinates are keyed when corners are deduplicated.
    """

    fine_vertex_policy: FineVertexPolicy = Field(
        default=FineVertexPolicy.FIXED,
        description=(
            "FIXED: unclassified fine vertices are immovable. "
            "RETEST: test them against base and pseudo-region edges first"
        ),
    )
    coordinate_decimals: int | None = Field(
        default=None,
        ge=0,
        le=15,
        description="Round coordinates to this many decimals for corner keys (None = exact)",
    )
    merge_collinear_sides: bool = Field(
        default=False,
        description="Fuse boundary sides that continue each other on one straight line",
    )

    def coordinate_key(self, x: float, y: float) -> tuple[float, float]:
        """Get the deduplication key for a coordinate.

        Args:
            x: X coordinate
            y: Y coordinate

        Returns:
            Exact (x, y) tuple, or the rounded tuple when decimals are set
        """
        if self.coordinate_decimals is None:
            return (x, y)
        return (round(x, self.coordinate_decimals), round(y, self.coordinate_decimals))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PseudoRegionSettings(BaseModel):
    """Main application settings."""

    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PseudoRegionSettings:
    """Get default application settings."""
    return PseudoRegionSettings()
