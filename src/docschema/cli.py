"""Command-line entrypoint.

Usage:
    docschema --json-file samples.json --language swift --base-class Person
    docschema --mongo-uri mongodb://localhost:27017 -d shop -c orders -s 100
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError

from docschema.core.config import AppSettings, GeneratorConfig
from docschema.core.exceptions import ConfigurationError, DocSchemaError
from docschema.generator import generate_schema

logger = logging.getLogger("docschema")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docschema",
        description="Infer a Realm schema from sample MongoDB documents",
    )
    parser.add_argument("--mongo-uri", dest="mongo_uri")
    parser.add_argument("--db", "-d")
    parser.add_argument("--coll", "-c")
    parser.add_argument("--sample-size", "-s", dest="sample_size", type=int)
    parser.add_argument("--json-file", dest="json_file",
                        help="Extended JSON array of samples; local path or s3://bucket/key")
    parser.add_argument("--language", help="swift, js, java or yaml (default: js)")
    parser.add_argument("--base-class", dest="base_class",
                        help="Name of the top-level document type")
    parser.add_argument("--log-level", dest="log_level")
    return parser


def settings_from_args(args: argparse.Namespace, settings: AppSettings | None = None) -> AppSettings:
    """Overlay command-line flags on the environment-derived settings."""
    if settings is None:
        settings = AppSettings()

    overrides: dict[str, Any] = {
        key: getattr(args, key)
        for key in ("language", "sample_size", "base_class", "json_file", "log_level")
        if getattr(args, key) is not None
    }
    mongo_overrides = {
        key: value
        for key, value in (("uri", args.mongo_uri), ("db", args.db), ("coll", args.coll))
        if value is not None
    }
    if mongo_overrides:
        overrides["mongo"] = settings.mongo.model_copy(update=mongo_overrides)
    return settings.model_copy(update=overrides)


def set_log_level(log_level: str) -> None:
    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level {log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
        )
    logging.getLogger().setLevel(level)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = settings_from_args(args)
        set_log_level(settings.log_level)
        config = GeneratorConfig.from_settings(settings)
        output = generate_schema(config, settings=settings)
    except (DocSchemaError, ValidationError) as exc:
        logger.error("%s", exc)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
