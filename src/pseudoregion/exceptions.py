"""Exception hierarchy for Pseudoregion."""


class PseudoRegionError(Exception):
    """Base exception for all Pseudoregion errors."""

    pass


class TessellationError(PseudoRegionError):
    """Errors related to loading tessellation documents."""

    pass


class TessellationLoadError(TessellationError):
    """Error loading a tessellation document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load tessellation '{path}': {reason}")


class TessellationFormatError(TessellationError):
    """Tessellation document does not have the expected structure."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid tessellation format '{path}': {details}")


class TopologyError(PseudoRegionError):
    """Errors in the corner graph built from a tessellation."""

    pass


class CornerLookupError(TopologyError):
    """No corner point is registered for a coordinate."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        super().__init__(f"No corner point registered at ({x}, {y})")
