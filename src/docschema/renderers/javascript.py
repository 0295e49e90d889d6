"""Realm JavaScript schema object renderer."""

from __future__ import annotations

from docschema.core.types import BOOLEAN, PRIMARY_KEY_FIELD
from docschema.models.resolved import ResolvedDocument, ResolvedField
from docschema.renderers.base import INDENT, BaseRenderer


def property_type(field: ResolvedField) -> str:
    """Realm JS property type with its ``[]`` or ``?`` suffix."""
    js_type = field.output_type
    if js_type == BOOLEAN:
        js_type = "bool"
    if field.is_array:
        js_type += "[]"
    elif field.is_optional:
        js_type += "?"
    return js_type


class JavaScriptRenderer(BaseRenderer):
    """Emits ``const <Name>Schema = {...};`` blocks."""

    def render_document(self, document: ResolvedDocument) -> str:
        lines = [
            f"const {document.name}Schema = {{",
            f"{INDENT}name: '{document.name}',",
        ]
        if document.has_primary_key:
            lines.append(f"{INDENT}primaryKey: '{PRIMARY_KEY_FIELD}',")
        else:
            lines.append(f"{INDENT}// primaryKey: 'HERE',")
        lines.append(f"{INDENT}properties: {{")
        for field in document.fields:
            line = f"{INDENT * 2}{field.name}: '{property_type(field)}',"
            lines.append(self.with_diagnostics(line, field))
        lines.append(f"{INDENT}}}")
        lines.append("};")
        return "\n".join(lines) + "\n"
