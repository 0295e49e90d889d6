"""Resolved documents shared by the renderer tests."""

from __future__ import annotations

import pytest

from docschema.models.resolved import ResolvedDocument, ResolvedField


@pytest.fixture
def person() -> ResolvedDocument:
    return ResolvedDocument(
        name="Person",
        doc_count=2,
        fields=[
            ResolvedField(name="_id", type="ObjectId"),
            ResolvedField(name="name", type="string"),
            ResolvedField(name="age", type="int", is_optional=True),
            ResolvedField(name="tags", type="string", is_array=True),
            ResolvedField(name="active", type="boolean"),
            ResolvedField(
                name="score", type="int", is_unanimous=False,
                type_counts={"int": 2, "float": 2},
            ),
        ],
    )


@pytest.fixture
def address() -> ResolvedDocument:
    return ResolvedDocument(
        name="PersonAddress",
        doc_count=1,
        fields=[
            ResolvedField(name="city", type="string"),
            ResolvedField(name="since", type="date", is_optional=True),
        ],
    )
