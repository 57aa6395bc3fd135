"""Shared test fixtures."""
import pytest
from unittest.mock import MagicMock


@pytest.fixture(autouse=True)
def env_vars(monkeypatch):
    """Start every test from a clean, known environment."""
    for name in ("REPORT_FILENAME", "MAX_WORKERS", "LOG_LEVEL", "AWS_PROFILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    """Create a Config instance with default env vars."""
    from s3_bucket_report.config import Config
    return Config()


class MockClientFactory:
    """Hands out one MagicMock per (service, region), like ClientFactory."""

    def __init__(self):
        self._mocks = {}

    def get(self, service_name="s3", region=None):
        key = (service_name, region)
        if key not in self._mocks:
            self._mocks[key] = MagicMock()
        return self._mocks[key]


@pytest.fixture
def mock_clients():
    """Create a mock ClientFactory."""
    return MockClientFactory()


def client_error(code, operation="GetBucket"):
    """Build a botocore ClientError with the given error code."""
    from botocore.exceptions import ClientError
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class FakeAccount(MockClientFactory):
    """Mock factory whose S3 clients answer per bucket from a dict of responses.

    Each bucket maps operation name (e.g. "get_bucket_versioning") to either a
    response dict or an exception to raise. Every region shares one S3 mock.
    """

    def __init__(self, buckets):
        super().__init__()
        self.buckets = buckets
        self.s3 = MagicMock()
        self.s3.list_buckets.return_value = {
            "Buckets": [{"Name": name} for name in buckets]
        }
        for operation in (
            "get_bucket_location",
            "get_bucket_versioning",
            "get_bucket_encryption",
            "get_bucket_logging",
            "get_bucket_policy_status",
        ):
            getattr(self.s3, operation).side_effect = self._responder(operation)
        self.regions = []

    def _responder(self, operation):
        def respond(Bucket):
            result = self.buckets[Bucket].get(operation, {})
            if isinstance(result, Exception):
                raise result
            return result
        return respond

    def get(self, service_name="s3", region=None):
        self.regions.append(region)
        return self.s3


@pytest.fixture
def alpha_beta():
    """Two buckets covering the sentinel and populated paths."""
    return FakeAccount({
        "alpha": {
            "get_bucket_location": {"LocationConstraint": None},
            "get_bucket_versioning": {"Status": "Enabled"},
            "get_bucket_encryption": {
                "ServerSideEncryptionConfiguration": {
                    "Rules": [{"ApplyServerSideEncryptionByDefault": {"SSEAlgorithm": "aws:kms"}}]
                }
            },
            "get_bucket_logging": {},
            "get_bucket_policy_status": client_error("NoSuchBucketPolicy"),
        },
        "beta": {
            "get_bucket_location": {"LocationConstraint": "eu-west-1"},
            "get_bucket_versioning": {},
            "get_bucket_encryption": client_error("ServerSideEncryptionConfigurationNotFoundError"),
            "get_bucket_logging": {"LoggingEnabled": {"TargetBucket": "beta-logs", "TargetPrefix": ""}},
            "get_bucket_policy_status": {"PolicyStatus": {"IsPublic": True}},
        },
    })
