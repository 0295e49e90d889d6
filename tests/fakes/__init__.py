"""Shared test doubles: re-export the in-memory sample source."""

from __future__ import annotations

from docschema.sources.memory_source import MemorySampleSource

__all__ = ["MemorySampleSource"]
