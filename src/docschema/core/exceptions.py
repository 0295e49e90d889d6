"""docschema exception hierarchy."""

from __future__ import annotations


class DocSchemaError(Exception):
    """Base exception for all docschema errors."""


class ConfigurationError(DocSchemaError):
    """Invalid or incomplete run configuration."""


class UnsupportedLanguageError(ConfigurationError):
    """Requested output language is not one we can render."""

    def __init__(self, language: str, choices: list[str]) -> None:
        self.language = language
        self.choices = choices
        super().__init__(
            f"Do not support outputting language: ({language}) - "
            f"try one of the following: {{ {', '.join(choices)} }}"
        )


class MissingConnectionParameterError(ConfigurationError):
    """A MongoDB connection parameter is required when no sample file is given."""

    def __init__(self, parameter: str, flag: str) -> None:
        self.parameter = parameter
        self.flag = flag
        super().__init__(
            f"Command line arguments missing: must specify {parameter} ({flag}) "
            "if no --json-file is set"
        )


class UnsupportedStructureError(DocSchemaError):
    """Sample documents contain a shape we refuse to model (arrays of arrays)."""

    def __init__(self, doc_name: str, field_name: str) -> None:
        self.doc_name = doc_name
        self.field_name = field_name
        super().__init__(
            f"Arrays of arrays are not supported: {doc_name}.{field_name}"
        )


class AcquisitionError(DocSchemaError):
    """Sample documents could not be loaded."""


class EmptySampleError(AcquisitionError):
    """The sample set contains no documents."""


class RenderError(DocSchemaError):
    """A resolved type has no representation in the target language."""
