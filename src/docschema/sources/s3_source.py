"""S3 sample source reading an Extended JSON object."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import boto3
from botocore.exceptions import ClientError

from docschema.core.exceptions import AcquisitionError
from docschema.core.types import JsonDict
from docschema.sources.json_file import parse_samples

logger = logging.getLogger(__name__)


def parse_s3_uri(uri: str) -> tuple[str, str]:
    """Split ``s3://bucket/key`` into ``(bucket, key)``."""
    parsed = urlparse(uri)
    bucket, key = parsed.netloc, parsed.path.lstrip("/")
    if parsed.scheme != "s3" or not bucket or not key:
        raise AcquisitionError(f"Not an S3 object URI: {uri!r}")
    return bucket, key


class S3JsonSource:
    """ISampleSource reading every document of a JSON object stored in S3."""

    def __init__(self, uri: str, region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._uri = uri
        self._bucket, self._key = parse_s3_uri(uri)
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def load(self) -> list[JsonDict]:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=self._key)
            body = resp["Body"].read()
        except ClientError as exc:
            raise AcquisitionError(f"S3 read failed for {self._uri!r}: {exc}") from exc

        docs = parse_samples(body, self._uri)
        logger.info("Loaded %d sample documents from %s", len(docs), self._uri)
        return docs
