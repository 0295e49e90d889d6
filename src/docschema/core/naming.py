"""Document-type naming helpers."""

from __future__ import annotations

from docschema.core.types import DocName, FieldName


def capitalize(text: str) -> str:
    """Upper-case the first character only; ``str.capitalize`` would lower the rest."""
    return text[:1].upper() + text[1:]


def nested_doc_name(parent: DocName, field_name: FieldName) -> DocName:
    """Name of the document type found at ``parent.field_name``.

    ``nested_doc_name("Person", "address") == "PersonAddress"``
    """
    return parent + capitalize(field_name)
