"""Schema generation run: acquire samples, infer, resolve, render."""

from __future__ import annotations

import logging

from docschema.core.config import AppSettings, GeneratorConfig
from docschema.core.protocols import ISampleSource, ISchemaRenderer
from docschema.inference.traversal import infer_schema
from docschema.renderers import create_renderer
from docschema.sources import create_source

logger = logging.getLogger(__name__)


def generate_schema(
    config: GeneratorConfig,
    *,
    source: ISampleSource | None = None,
    renderer: ISchemaRenderer | None = None,
    settings: AppSettings | None = None,
) -> str:
    """Produce the schema source text for one run.

    ``source`` and ``renderer`` default to the ones ``config`` selects.
    Every ``DocSchemaError`` surfaces before anything is rendered, so a failed
    run never yields partial output.
    """
    if source is None:
        source = create_source(config, settings)
    if renderer is None:
        renderer = create_renderer(config.target_language)

    documents = source.load()
    registry = infer_schema(documents, config.base_doc_name)
    resolved = registry.resolve()
    logger.info(
        "Rendering %d document types as %s", len(resolved), config.target_language.value,
    )
    return renderer.render(resolved)
