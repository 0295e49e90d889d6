"""MongoDB sample source implementing ISampleSource."""

from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from docschema.core.exceptions import AcquisitionError, EmptySampleError
from docschema.core.types import JsonDict

logger = logging.getLogger(__name__)


class MongoSampleSource:
    """Reads up to ``sample_size`` documents from one collection."""

    def __init__(self, uri: str, db: str, coll: str, sample_size: int = 1,
                 server_selection_timeout_ms: int = 5000) -> None:
        self._uri = uri
        self._db = db
        self._coll = coll
        self._sample_size = sample_size
        self._timeout_ms = server_selection_timeout_ms

    def load(self) -> list[JsonDict]:
        logger.info("Connecting to MongoDB at URI: %s", self._uri)
        client = None
        try:
            client = MongoClient(self._uri, serverSelectionTimeoutMS=self._timeout_ms)
            coll = client[self._db][self._coll]
            count = coll.count_documents({})
            logger.info("Successfully connected to MongoDB")
            if count <= 0:
                raise EmptySampleError(f"Collection {self._db}.{self._coll} has no documents")
            docs = list(coll.find({}).limit(self._sample_size))
        except PyMongoError as exc:
            raise AcquisitionError(
                f"MongoDB query on {self._db}.{self._coll} failed: {exc}"
            ) from exc
        finally:
            if client is not None:
                client.close()

        if not docs:
            raise EmptySampleError(f"Collection {self._db}.{self._coll} returned no documents")
        logger.info("Sampled %d of %d documents from %s.%s",
                    len(docs), count, self._db, self._coll)
        return docs
