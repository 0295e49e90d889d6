"""YAML schema listing renderer."""

from __future__ import annotations

from docschema.core.types import PRIMARY_KEY_FIELD
from docschema.models.resolved import ResolvedDocument
from docschema.renderers.base import INDENT, BaseRenderer
from docschema.renderers.javascript import property_type


class YamlRenderer(BaseRenderer):
    """Emits one ``- <Name>:`` list item per document type.

    Property types use the Realm JS spelling (``bool``, ``int[]``, ``string?``).
    """

    comment_prefix = "#"

    def render_document(self, document: ResolvedDocument) -> str:
        lines = [
            f"- {document.name}:",
            f"{INDENT}name: {document.name}",
        ]
        if document.has_primary_key:
            lines.append(f"{INDENT}primaryKey: {PRIMARY_KEY_FIELD}")
        else:
            lines.append(f"{INDENT}# primaryKey: PRIMARY_KEY")
        lines.append(f"{INDENT}properties:")
        for field in document.fields:
            line = f"{INDENT * 2}{field.name}: {property_type(field)}"
            lines.append(self.with_diagnostics(line, field))
        return "\n".join(lines) + "\n"
