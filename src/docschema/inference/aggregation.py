"""Aggregation model: per-document-type schemas holding per-field type counts.

A ``SchemaRegistry`` maps document-type names to ``DocumentSchema`` entries.
Each ``DocumentSchema`` counts how many samples of its type were visited and
keeps a ``FieldTypeCount`` per field name, in first-seen order. Once traversal
is finished, ``resolve()`` turns the counts into ``ResolvedDocument`` models.
"""

from __future__ import annotations

from collections.abc import Iterator

from docschema.core.types import NO_VALUES, PRIMARY_KEY_FIELD, DocName, FieldName, TypeTag
from docschema.models.resolved import ResolvedDocument, ResolvedField, format_type_counts


class FieldTypeCount:
    """Observed type tags for one field of one document type."""

    def __init__(self, field_name: FieldName) -> None:
        self.field_name = field_name
        self.type_counts: dict[TypeTag, int] = {}
        self.is_optional = False
        self.is_array = False
        self.presence_count = 0  # samples holding a non-null value

    def __repr__(self) -> str:
        return (
            f"FieldTypeCount({self.field_name!r}, {self.type_counts!r}, "
            f"optional={self.is_optional}, array={self.is_array})"
        )

    def add_type(self, type_name: TypeTag) -> None:
        self.type_counts[type_name] = self.type_counts.get(type_name, 0) + 1

    def mark_present(self) -> None:
        self.presence_count += 1

    def set_optional(self) -> None:
        self.is_optional = True

    def set_array(self) -> None:
        self.is_array = True

    def is_unanimous(self) -> bool:
        return len(self.type_counts) == 1

    def type_counts_string(self) -> str:
        return format_type_counts(self.type_counts)

    def get_majority_type(self, total_doc_count: int) -> TypeTag:
        """Return the most observed tag and settle optionality.

        Ties go to the tag seen first. The field becomes optional when it held
        a value in fewer samples than documents of the owning type were
        visited. An array counts once per sample, whatever its length.
        """
        max_type = NO_VALUES
        max_count = 0
        for type_name, num in self.type_counts.items():
            if num > max_count:
                max_type = type_name
                max_count = num

        if self.presence_count < total_doc_count:
            self.is_optional = True

        return max_type

    def resolve(self, total_doc_count: int) -> ResolvedField:
        majority = self.get_majority_type(total_doc_count)
        unanimous = self.is_unanimous()
        return ResolvedField(
            name=self.field_name,
            type=majority,
            is_optional=self.is_optional,
            is_array=self.is_array,
            is_unanimous=unanimous,
            type_counts=dict(self.type_counts) if self.type_counts and not unanimous else None,
        )


class DocumentSchema:
    """Field statistics accumulated over every sample of one document type."""

    def __init__(self, document_name: DocName) -> None:
        self.document_name = document_name
        self.field_type_counts: dict[FieldName, FieldTypeCount] = {}
        self.doc_type_count = 0

    def __repr__(self) -> str:
        return (
            f"DocumentSchema({self.document_name!r}, docs={self.doc_type_count}, "
            f"fields={list(self.field_type_counts)})"
        )

    def _field(self, field_name: FieldName) -> FieldTypeCount:
        field_type_count = self.field_type_counts.get(field_name)
        if field_type_count is None:
            field_type_count = FieldTypeCount(field_name)
            self.field_type_counts[field_name] = field_type_count
        return field_type_count

    def add_field_type(self, field_name: FieldName, type_name: TypeTag) -> None:
        self._field(field_name).add_type(type_name)

    def mark_field_present(self, field_name: FieldName) -> None:
        self._field(field_name).mark_present()

    def set_field_optional(self, field_name: FieldName) -> None:
        self._field(field_name).set_optional()

    def set_field_array(self, field_name: FieldName) -> None:
        self._field(field_name).set_array()

    def increment_doc_type_count(self) -> None:
        self.doc_type_count += 1

    @property
    def has_primary_key(self) -> bool:
        return PRIMARY_KEY_FIELD in self.field_type_counts

    def resolve(self) -> ResolvedDocument:
        return ResolvedDocument(
            name=self.document_name,
            doc_count=self.doc_type_count,
            fields=[ftc.resolve(self.doc_type_count) for ftc in self.field_type_counts.values()],
        )


class SchemaRegistry:
    """Insertion-ordered document-type name -> ``DocumentSchema`` map for one run."""

    def __init__(self) -> None:
        self._schemas: dict[DocName, DocumentSchema] = {}

    def __len__(self) -> int:
        return len(self._schemas)

    def __iter__(self) -> Iterator[DocumentSchema]:
        return iter(self._schemas.values())

    def __contains__(self, doc_name: object) -> bool:
        return doc_name in self._schemas

    def __getitem__(self, doc_name: DocName) -> DocumentSchema:
        return self._schemas[doc_name]

    def names(self) -> list[DocName]:
        return list(self._schemas)

    def get_or_create(self, doc_name: DocName) -> DocumentSchema:
        schema = self._schemas.get(doc_name)
        if schema is None:
            schema = DocumentSchema(doc_name)
            self._schemas[doc_name] = schema
        return schema

    def resolve(self) -> list[ResolvedDocument]:
        return [schema.resolve() for schema in self._schemas.values()]
