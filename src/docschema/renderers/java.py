"""Realm Java model class renderer."""

from __future__ import annotations

from docschema.core.naming import capitalize
from docschema.core.types import BOOLEAN, DATA, DATE, FLOAT, INT, PRIMARY_KEY_FIELD, STRING
from docschema.models.resolved import ResolvedDocument, ResolvedField
from docschema.renderers.base import INDENT, BaseRenderer

_JAVA_TYPES = {
    STRING: "String",
    DATE: "Date",
    DATA: "byte[]",
}

_BOXED = {
    INT: "Integer",
    FLOAT: "Float",
    BOOLEAN: "Boolean",
}


def java_type(field: ResolvedField) -> str:
    """Java declaration type; primitives are boxed in lists and when nullable."""
    tag = field.output_type
    if field.is_array:
        element = _BOXED.get(tag) or _JAVA_TYPES.get(tag) or capitalize(tag)
        return f"RealmList<{element}>"
    if field.is_optional and tag in _BOXED:
        return _BOXED[tag]
    return _JAVA_TYPES.get(tag, tag)


class JavaRenderer(BaseRenderer):
    """Emits ``public class <Name> extends RealmObject`` classes."""

    def render_document(self, document: ResolvedDocument) -> str:
        lines = [f"public class {document.name} extends RealmObject {{"]
        if document.has_primary_key:
            lines.append(f"{INDENT}@PrimaryKey")
            lines.append(f"{INDENT}private String {PRIMARY_KEY_FIELD};")
            lines.append("")
        for field in document.fields:
            if field.name == PRIMARY_KEY_FIELD:
                continue
            line = f"{INDENT}private {java_type(field)} {field.name};"
            lines.append(self.with_diagnostics(line, field))
        lines.append("}")
        return "\n".join(lines) + "\n"
