"""Traversal engine: walks sample documents into a ``SchemaRegistry``."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from docschema.core.exceptions import UnsupportedStructureError
from docschema.core.naming import nested_doc_name
from docschema.core.types import OBJECT, DocName, FieldName
from docschema.inference.aggregation import SchemaRegistry
from docschema.inference.classifier import classify

logger = logging.getLogger(__name__)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class SchemaTraversal:
    """Feeds documents, and the objects and arrays nested in them, into a registry."""

    def __init__(self, registry: SchemaRegistry | None = None) -> None:
        self.registry = registry if registry is not None else SchemaRegistry()

    def visit_document(self, doc_name: DocName, document: Mapping[str, Any]) -> None:
        schema = self.registry.get_or_create(doc_name)
        schema.increment_doc_type_count()

        for field_name, value in document.items():
            if value is None:
                schema.set_field_optional(field_name)
                continue

            schema.mark_field_present(field_name)
            if _is_array(value):
                self.visit_array(field_name, doc_name, value)
                continue

            value_type = classify(value)
            if value_type == OBJECT:
                nested_name = nested_doc_name(doc_name, field_name)
                schema.add_field_type(field_name, nested_name)
                self.visit_document(nested_name, value)
            else:
                schema.add_field_type(field_name, value_type)

    def visit_array(self, field_name: FieldName, doc_name: DocName, array: Sequence[Any]) -> None:
        """Record every element of ``array`` against ``doc_name.field_name``.

        Raises:
            UnsupportedStructureError: an element is itself an array.
        """
        schema = self.registry.get_or_create(doc_name)
        schema.set_field_array(field_name)

        for entry in array:
            if _is_array(entry):
                raise UnsupportedStructureError(doc_name, field_name)

            if entry is None:  # null elements carry no type
                continue

            entry_type = classify(entry)
            if entry_type == OBJECT:
                nested_name = nested_doc_name(doc_name, field_name)
                schema.add_field_type(field_name, nested_name)
                self.visit_document(nested_name, entry)
            else:
                schema.add_field_type(field_name, entry_type)


def infer_schema(documents: Iterable[Mapping[str, Any]], base_doc_name: DocName) -> SchemaRegistry:
    """Walk every sample document as an instance of ``base_doc_name``."""
    traversal = SchemaTraversal()
    count = 0
    for document in documents:
        traversal.visit_document(base_doc_name, document)
        count += 1
    logger.debug(
        "Inferred %d document types from %d samples of %s",
        len(traversal.registry), count, base_doc_name,
    )
    return traversal.registry
