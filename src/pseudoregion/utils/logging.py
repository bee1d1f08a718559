"""Logging utilities for Pseudoregion."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class TopologyStats:
    """Statistics from building a tessellation holder."""

    fixed_count: int = 0
    free_count: int = 0
    line_constrained_count: int = 0
    candidate_side_count: int = 0
    boundary_side_count: int = 0
    merged_side_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def corner_count(self) -> int:
        """Total number of classified corners."""
        return self.fixed_count + self.free_count + self.line_constrained_count

    @property
    def duration_seconds(self) -> float:
        """Calculate build duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def get_logger() -> structlog.stdlib.BoundLogger:
    """Get the package logger (unconfigured structlog defaults until configure_logging)."""
    return structlog.get_logger("pseudoregion")


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger()
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class TopologyLogger:
    """Logger for tracking tessellation holder construction."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._stats = TopologyStats()

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get the wrapped structlog logger."""
        return self._logger

    def log_sides_discovered(self, candidate_count: int, kept_count: int) -> None:
        """Log the outcome of pseudo-region edge discovery."""
        self._logger.debug(
            "Boundary sides discovered",
            candidates=candidate_count,
            kept=kept_count,
            discarded=candidate_count - kept_count,
        )
        self._stats.candidate_side_count = candidate_count
        self._stats.boundary_side_count = kept_count

    def log_side_points(self, side: str, point_count: int) -> None:
        """Log the points accumulated on one boundary side."""
        self._logger.debug("Boundary side populated", side=side, points=point_count)

    def log_sides_merged(self, before_count: int, after_count: int) -> None:
        """Log a collinear merge pass."""
        self._logger.info(
            "Collinear boundary sides merged",
            before=before_count,
            after=after_count,
        )
        self._stats.merged_side_count = before_count - after_count
        self._stats.boundary_side_count = after_count

    def log_corner_classified(self, x: float, y: float, kind: str, source: str) -> None:
        """Log classification of a single corner."""
        self._logger.debug("Corner classified", x=x, y=y, kind=kind, source=source)
        if kind == "fixed":
            self._stats.fixed_count += 1
        elif kind == "free":
            self._stats.free_count += 1
        else:
            self._stats.line_constrained_count += 1

    def log_holder_built(self, polygon_count: int, duration_ms: float) -> None:
        """Log completion of the holder build."""
        self._logger.info(
            "Tessellation holder built",
            polygons=polygon_count,
            corners=self._stats.corner_count,
            fixed=self._stats.fixed_count,
            free=self._stats.free_count,
            line_constrained=self._stats.line_constrained_count,
            sides=self._stats.boundary_side_count,
            duration_ms=round(duration_ms, 2),
        )

    def log_side_lookup_fallback(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Log an edge that does not run along any boundary side."""
        self._logger.debug("Edge uses direct corners", start=(x1, y1), end=(x2, y2))

    @property
    def stats(self) -> TopologyStats:
        """Get current build statistics."""
        return self._stats
