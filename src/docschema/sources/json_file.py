"""Local file sample source reading MongoDB Extended JSON."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from bson import json_util
from bson.errors import BSONError

from docschema.core.exceptions import AcquisitionError, EmptySampleError
from docschema.core.types import JsonDict

logger = logging.getLogger(__name__)


def parse_samples(text: str | bytes, origin: str) -> list[JsonDict]:
    """Parse an Extended JSON array of documents.

    ``{"$oid": ...}`` and ``{"$date": ...}`` wrappers come back as ``ObjectId``
    and ``datetime`` values. A single top-level object is one sample.
    """
    try:
        data = json_util.loads(text)
    except (ValueError, BSONError) as exc:  # UnicodeDecodeError is a ValueError
        raise AcquisitionError(f"Could not parse sample documents from {origin}: {exc}") from exc

    if isinstance(data, Mapping):
        data = [data]
    if not isinstance(data, list):
        raise AcquisitionError(
            f"Expected an array of documents in {origin}, got {type(data).__name__}"
        )
    for i, doc in enumerate(data):
        if not isinstance(doc, Mapping):
            raise AcquisitionError(f"Sample {i} in {origin} is not a document: {doc!r}")
    if not data:
        raise EmptySampleError(f"No sample documents in {origin}")
    return data


class JsonFileSource:
    """ISampleSource reading every document of a local JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load(self) -> list[JsonDict]:
        try:
            data = self._path.read_bytes()
        except OSError as exc:
            raise AcquisitionError(f"Could not read {self._path}: {exc}") from exc

        docs = parse_samples(data, str(self._path))
        logger.info("Loaded %d sample documents from %s", len(docs), self._path)
        return docs
