"""Resolved schema models handed from the inference core to the renderers."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from docschema.core.types import OBJECT_ID, PRIMARY_KEY_FIELD, STRING


def format_type_counts(type_counts: dict[str, int]) -> str:
    """Diagnostic text for a field's observations, e.g. ``{ int: 2, float: 2 }``."""
    return "{ " + ", ".join(f"{tag}: {num}" for tag, num in type_counts.items()) + " }"


class ResolvedField(BaseModel):
    """One field of a document type after majority-type resolution."""

    name: str
    type: str  # majority tag, may be "ObjectId" or "no-values"
    is_optional: bool = False
    is_array: bool = False
    is_unanimous: bool = True
    type_counts: Optional[dict[str, int]] = None  # only when not unanimous

    @property
    def output_type(self) -> str:
        """Type as renderers see it; ObjectIds are emitted as strings."""
        if self.type == OBJECT_ID:
            return STRING
        return self.type

    @property
    def type_counts_string(self) -> str:
        return format_type_counts(self.type_counts or {})


class ResolvedDocument(BaseModel):
    """A document type with its fields in first-seen order."""

    name: str
    doc_count: int = 0
    fields: list[ResolvedField] = Field(default_factory=list)

    @property
    def has_primary_key(self) -> bool:
        return any(f.name == PRIMARY_KEY_FIELD for f in self.fields)

    def field(self, name: str) -> ResolvedField:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)
