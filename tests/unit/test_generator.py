"""End-to-end tests for generate_schema with in-memory sources."""

from __future__ import annotations

import pytest

from docschema.core.config import GeneratorConfig, TargetLanguage
from docschema.core.exceptions import EmptySampleError, UnsupportedStructureError
from docschema.generator import generate_schema
from docschema.renderers import JavaScriptRenderer, create_renderer
from tests.fakes import MemorySampleSource


class RecordingRenderer:
    """ISchemaRenderer capturing what it was asked to render."""

    def __init__(self) -> None:
        self.documents = None

    def render(self, documents):
        self.documents = documents
        return "rendered"


def test_person_scenario():
    source = MemorySampleSource([
        {"_id": "1", "name": "Ann", "age": 30},
        {"_id": "2", "name": "Bo"},
    ])
    renderer = RecordingRenderer()

    output = generate_schema(
        GeneratorConfig(base_doc_name="Person"), source=source, renderer=renderer,
    )

    assert output == "rendered"
    [person] = renderer.documents
    assert person.name == "Person"
    assert person.has_primary_key
    assert not person.field("_id").is_optional
    assert not person.field("name").is_optional
    assert person.field("age").is_optional
    assert person.field("age").type == "int"


def test_renders_every_document_type_in_order():
    source = MemorySampleSource([{"_id": 1, "address": {"city": "Rome"}, "tags": ["a"]}])
    config = GeneratorConfig(base_doc_name="Person", target_language=TargetLanguage.JAVASCRIPT)

    output = generate_schema(config, source=source)

    assert output.index("const PersonSchema") < output.index("const PersonAddressSchema")
    assert "address: 'PersonAddress'," in output
    assert "tags: 'string[]'," in output


@pytest.mark.parametrize("language", list(TargetLanguage))
def test_every_language_renders(language):
    source = MemorySampleSource([{"_id": "x", "n": 1.5, "ok": True}])
    output = generate_schema(
        GeneratorConfig(target_language=language), source=source,
        renderer=create_renderer(language),
    )
    assert "Base" in output


def test_array_of_arrays_produces_no_output():
    renderer = RecordingRenderer()
    source = MemorySampleSource([{"grid": [[1]]}])
    with pytest.raises(UnsupportedStructureError):
        generate_schema(GeneratorConfig(), source=source, renderer=renderer)
    assert renderer.documents is None


def test_empty_sample_set_is_fatal():
    with pytest.raises(EmptySampleError):
        generate_schema(GeneratorConfig(), source=MemorySampleSource(), renderer=JavaScriptRenderer())
