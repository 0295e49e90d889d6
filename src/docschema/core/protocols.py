"""Protocol interfaces for the collaborators around the inference core.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from docschema.core.types import JsonDict
from docschema.models.resolved import ResolvedDocument


# ---------------------------------------------------------------------------
# Acquisition: Sample Source
# ---------------------------------------------------------------------------

@runtime_checkable
class ISampleSource(Protocol):
    """Supplier of the sample documents for one run.

    Implementations materialize the whole sample set and raise
    ``EmptySampleError`` rather than return an empty list.
    """

    def load(self) -> list[JsonDict]: ...


# ---------------------------------------------------------------------------
# Emission: Schema Renderer
# ---------------------------------------------------------------------------

@runtime_checkable
class ISchemaRenderer(Protocol):
    """Consumer of resolved document types, one block of source per type."""

    def render(self, documents: list[ResolvedDocument]) -> str: ...
