"""In-memory sample source for unit tests: list-backed fake."""

from __future__ import annotations

from typing import Any

from docschema.core.exceptions import EmptySampleError


class MemorySampleSource:
    """List-backed ISampleSource for unit tests."""

    def __init__(self, documents: list[dict[str, Any]] | None = None) -> None:
        self._documents: list[dict[str, Any]] = list(documents or [])

    def add(self, document: dict[str, Any]) -> None:
        self._documents.append(document)

    def load(self) -> list[dict[str, Any]]:
        if not self._documents:
            raise EmptySampleError("No sample documents")
        return list(self._documents)
