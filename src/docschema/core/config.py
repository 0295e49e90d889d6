"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, PositiveInt
from pydantic_settings import BaseSettings

from docschema.core.exceptions import (
    ConfigurationError,
    MissingConnectionParameterError,
    UnsupportedLanguageError,
)
from docschema.core.naming import capitalize

DEFAULT_BASE_DOC_NAME = "Base"


class MongoConfig(BaseSettings):
    """MongoDB sample source configuration."""

    model_config = {"env_prefix": "DOCSCHEMA_MONGO_"}

    uri: str | None = None
    db: str | None = None
    coll: str | None = None
    server_selection_timeout_ms: int = 5000


class S3Config(BaseSettings):
    """S3 sample file configuration."""

    model_config = {"env_prefix": "DOCSCHEMA_S3_"}

    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "DOCSCHEMA_"}

    log_level: str = "INFO"
    language: str = "js"
    sample_size: int = 1
    base_class: str | None = None
    json_file: str | None = None

    mongo: MongoConfig = MongoConfig()
    s3: S3Config = S3Config()


class TargetLanguage(str, Enum):
    """Schema languages we can emit."""

    SWIFT = "swift"
    JAVASCRIPT = "javascript"
    JAVA = "java"
    YAML = "yaml"

    @classmethod
    def parse(cls, value: str) -> TargetLanguage:
        """Resolve a user-supplied language name or alias."""
        try:
            return _LANGUAGE_ALIASES[value]
        except KeyError:
            raise UnsupportedLanguageError(value, ["swift", "js", "java", "yaml"]) from None


_LANGUAGE_ALIASES: dict[str, TargetLanguage] = {
    "swift": TargetLanguage.SWIFT,
    "Swift": TargetLanguage.SWIFT,
    "ios": TargetLanguage.SWIFT,
    "iOS": TargetLanguage.SWIFT,
    "js": TargetLanguage.JAVASCRIPT,
    "javascript": TargetLanguage.JAVASCRIPT,
    "java": TargetLanguage.JAVA,
    "android": TargetLanguage.JAVA,
    "yaml": TargetLanguage.YAML,
    "yml": TargetLanguage.YAML,
    "YAML": TargetLanguage.YAML,
}


class GeneratorConfig(BaseModel):
    """Validated options for one schema generation run."""

    sample_size: PositiveInt = 1
    base_doc_name: str = DEFAULT_BASE_DOC_NAME
    target_language: TargetLanguage = TargetLanguage.JAVASCRIPT
    json_file: str | None = None
    mongo: MongoConfig = MongoConfig()

    @classmethod
    def from_settings(cls, settings: AppSettings) -> GeneratorConfig:
        """Check the raw settings and build the run configuration.

        Raises:
            UnsupportedLanguageError: unknown ``language``.
            MissingConnectionParameterError: no ``json_file`` and an incomplete
                MongoDB connection.
            ConfigurationError: ``sample_size`` is not positive.
        """
        language = TargetLanguage.parse(settings.language)

        if settings.sample_size <= 0:
            raise ConfigurationError(
                f"sample_size must be a positive integer, got {settings.sample_size}"
            )

        if not settings.json_file:
            mongo = settings.mongo
            if not mongo.uri:
                raise MissingConnectionParameterError("mongoUri", "--mongo-uri")
            if not mongo.db:
                raise MissingConnectionParameterError("database name", "--db")
            if not mongo.coll:
                raise MissingConnectionParameterError("collection name", "--coll")

        if settings.base_class:
            base_doc_name = capitalize(settings.base_class)
        elif settings.mongo.coll:
            base_doc_name = capitalize(settings.mongo.coll)
        else:
            base_doc_name = DEFAULT_BASE_DOC_NAME

        return cls(
            sample_size=settings.sample_size,
            base_doc_name=base_doc_name,
            target_language=language,
            json_file=settings.json_file,
            mongo=settings.mongo,
        )
