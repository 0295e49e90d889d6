"""Schema renderers behind the ISchemaRenderer protocol, one per target language."""

from __future__ import annotations

from docschema.core.config import TargetLanguage
from docschema.core.protocols import ISchemaRenderer
from docschema.renderers.java import JavaRenderer
from docschema.renderers.javascript import JavaScriptRenderer
from docschema.renderers.swift import SwiftRenderer
from docschema.renderers.yaml import YamlRenderer

_RENDERERS: dict[TargetLanguage, type] = {
    TargetLanguage.SWIFT: SwiftRenderer,
    TargetLanguage.JAVASCRIPT: JavaScriptRenderer,
    TargetLanguage.JAVA: JavaRenderer,
    TargetLanguage.YAML: YamlRenderer,
}


def create_renderer(language: TargetLanguage) -> ISchemaRenderer:
    """Return a fresh renderer for ``language``."""
    return _RENDERERS[language]()


__all__ = [
    "JavaRenderer",
    "JavaScriptRenderer",
    "SwiftRenderer",
    "YamlRenderer",
    "create_renderer",
]
