"""Unit tests for S3JsonSource using moto."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws

from docschema.core.exceptions import AcquisitionError, EmptySampleError
from docschema.sources.s3_source import S3JsonSource, parse_s3_uri

BUCKET = "test-samples"


@pytest.fixture
def s3_client():
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        yield client


class TestLoad:
    def test_reads_documents(self, s3_client):
        s3_client.put_object(Bucket=BUCKET, Key="dumps/orders.json", Body=b'[{"qty": 2}, {"qty": 3}]')
        docs = S3JsonSource(f"s3://{BUCKET}/dumps/orders.json").load()
        assert docs == [{"qty": 2}, {"qty": 3}]

    def test_missing_key_raises(self, s3_client):
        with pytest.raises(AcquisitionError):
            S3JsonSource(f"s3://{BUCKET}/does/not/exist.json").load()

    def test_empty_array_raises(self, s3_client):
        s3_client.put_object(Bucket=BUCKET, Key="empty.json", Body=b"[]")
        with pytest.raises(EmptySampleError):
            S3JsonSource(f"s3://{BUCKET}/empty.json").load()


class TestParseUri:
    def test_splits_bucket_and_key(self):
        assert parse_s3_uri("s3://bucket/a/b.json") == ("bucket", "a/b.json")

    @pytest.mark.parametrize("uri", ["s3://bucket", "s3:///key.json", "https://bucket/key.json"])
    def test_rejects_bad_uris(self, uri):
        with pytest.raises(AcquisitionError):
            parse_s3_uri(uri)
