"""Reader for tessellation documents.

This module provides the TessellationReader class for loading tessellation
JSON documents and converting them into domain models.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from pseudoregion.exceptions import TessellationFormatError, TessellationLoadError
from pseudoregion.io.converter import (
    TessellationDocument,
    TessellationInput,
    document_to_domain,
)


class TessellationReader:
    """Loads tessellation documents into domain polygons.

    Example:
        with TessellationReader(Path("treemap.json")) as reader:
            holder = TessellationHolder(
                reader.data.base_polygon,
                reader.data.pseudo_regions,
                reader.data.tessellation,
            )
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the JSON tessellation document
        """
        self._path = path
        self._data: TessellationInput | None = None

    def load(self) -> TessellationInput:
        """Load and validate the document.

        Returns:
            The loaded tessellation input

        Raises:
            FileNotFoundError: If the document does not exist
            TessellationLoadError: If the file is not valid JSON
            TessellationFormatError: If the JSON does not match the schema
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Tessellation file not found: {self._path}")

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise TessellationLoadError(str(self._path), str(e)) from e

        try:
            document = TessellationDocument.model_validate(raw)
        except ValidationError as e:
            raise TessellationFormatError(str(self._path), str(e)) from e

        self._data = document_to_domain(document)
        return self._data

    @property
    def data(self) -> TessellationInput:
        """Return the loaded tessellation input.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._data is None:
            raise RuntimeError("Tessellation not loaded. Call load() first.")
        return self._data

    @property
    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        """Drop the loaded data."""
        self._data = None

    def __enter__(self) -> "TessellationReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
