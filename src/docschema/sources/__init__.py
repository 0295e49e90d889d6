"""Pluggable sample sources behind the ISampleSource protocol."""

from __future__ import annotations

from docschema.core.config import AppSettings, GeneratorConfig
from docschema.core.protocols import ISampleSource
from docschema.sources.json_file import JsonFileSource
from docschema.sources.mongo_source import MongoSampleSource
from docschema.sources.s3_source import S3JsonSource


def create_source(config: GeneratorConfig, settings: AppSettings | None = None) -> ISampleSource:
    """Create the sample source the run configuration points at.

    A ``json_file`` wins over MongoDB; ``s3://`` URIs are read through boto3.
    """
    if settings is None:
        settings = AppSettings()

    if config.json_file:
        if config.json_file.startswith("s3://"):
            return S3JsonSource(
                config.json_file,
                region=settings.s3.region,
                endpoint_url=settings.s3.endpoint_url,
            )
        return JsonFileSource(config.json_file)

    return MongoSampleSource(
        uri=config.mongo.uri,
        db=config.mongo.db,
        coll=config.mongo.coll,
        sample_size=config.sample_size,
        server_selection_timeout_ms=config.mongo.server_selection_timeout_ms,
    )


__all__ = ["JsonFileSource", "MongoSampleSource", "S3JsonSource", "create_source"]
