"""Realm Swift model class renderer."""

from __future__ import annotations

from docschema.core.exceptions import RenderError
from docschema.core.naming import capitalize
from docschema.core.types import PRIMARY_KEY_FIELD
from docschema.models.resolved import ResolvedDocument, ResolvedField
from docschema.renderers.base import INDENT, BaseRenderer

# Property declarations for required values, keyed by Swift type
_REQUIRED_DEFAULTS = {
    "Bool": "@objc dynamic var {name} = false",
    "Int": "@objc dynamic var {name} = 0",
    "Float": "@objc dynamic var {name}: Float = 0.0",
    "Double": "@objc dynamic var {name}: Double = 0.0",
    "String": '@objc dynamic var {name} = ""',
    "Data": "@objc dynamic var {name} = Data()",
    "Date": "@objc dynamic var {name} = Date()",
}

_REALM_OPTIONAL = {"Bool", "Int", "Float", "Double"}


class SwiftRenderer(BaseRenderer):
    """Emits ``class <Name>: Object`` declarations."""

    def swift_type(self, field: ResolvedField) -> str:
        if self.is_document_reference(field.output_type):
            return field.output_type
        swift_type = capitalize(field.output_type)
        if swift_type == "Boolean":
            swift_type = "Bool"
        if swift_type not in _REQUIRED_DEFAULTS:
            raise RenderError(f"Unexpected Swift type: {swift_type} (field {field.name!r})")
        return swift_type

    def property_line(self, field: ResolvedField) -> str:
        swift_type = self.swift_type(field)
        if field.is_array:
            return f"let {field.name} = List<{swift_type}>()"
        if self.is_document_reference(swift_type):
            # Realm object links are always nullable
            return f"@objc dynamic var {field.name}: {swift_type}? = nil"
        if field.is_optional:
            if swift_type in _REALM_OPTIONAL:
                return f"let {field.name} = RealmOptional<{swift_type}>()"
            return f"@objc dynamic var {field.name}: {swift_type}? = nil"
        return _REQUIRED_DEFAULTS[swift_type].format(name=field.name)

    def render_document(self, document: ResolvedDocument) -> str:
        lines = [f"class {document.name}: Object {{"]
        for field in document.fields:
            lines.append(self.with_diagnostics(f"{INDENT}{self.property_line(field)}", field))
        lines.append("")
        if document.has_primary_key:
            lines.append(f"{INDENT}override static func primaryKey() -> String? {{")
            lines.append(f'{INDENT * 2}return "{PRIMARY_KEY_FIELD}"')
            lines.append(f"{INDENT}}}")
        else:
            lines.append(f"{INDENT}// override static func primaryKey() -> String? {{")
            lines.append(f'{INDENT}//{INDENT}return "PRIMARY_KEY"')
            lines.append(f"{INDENT}// }}")
        lines.append("}")
        return "\n".join(lines) + "\n"
