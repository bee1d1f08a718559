"""Tessellation document I/O for pseudoregion.

This module reads tessellation documents (JSON) and converts them into the
domain polygons the topology core works on. Built state is never written
back.

Key classes:
- TessellationReader: Load and validate a document
- TessellationDocument: Pydantic schema of a document
- TessellationInput: The three polygon sets of a document
"""

from pseudoregion.io.converter import (
    TessellationDocument,
    TessellationInput,
    document_to_domain,
)
from pseudoregion.io.reader import TessellationReader

__all__ = [
    "TessellationDocument",
    "TessellationInput",
    "TessellationReader",
    "document_to_domain",
]
