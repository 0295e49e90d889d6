"""Shared plumbing for the schema renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from docschema.models.resolved import ResolvedDocument, ResolvedField

INDENT = "    "


class BaseRenderer(ABC):
    """Renders each document type in registry order, blank line between blocks.

    Subclasses implement ``render_document``; ``comment_prefix`` starts the
    diagnostic comment added to fields observed with more than one type.
    """

    comment_prefix = "//"

    def __init__(self) -> None:
        self._document_names: set[str] = set()

    def render(self, documents: list[ResolvedDocument]) -> str:
        self._document_names = {doc.name for doc in documents}
        return "\n".join(self.render_document(doc) for doc in documents)

    @abstractmethod
    def render_document(self, document: ResolvedDocument) -> str: ...

    def is_document_reference(self, type_name: str) -> bool:
        return type_name in self._document_names

    def with_diagnostics(self, line: str, field: ResolvedField) -> str:
        if field.is_unanimous or not field.type_counts:
            return line
        return f"{line}  {self.comment_prefix} {field.type_counts_string}"
