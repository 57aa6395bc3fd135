"""Bucket inventory record and its status values."""
from collections import namedtuple

ENABLED = "Enabled"
SUSPENDED = "Suspended"
NOT_ENABLED = "Not Enabled"

SSE = "SSE"
KMS = "KMS"
NONE = "None"

DEFAULT_REGION = "us-east-1"

HEADER = [
    "Name",
    "Region",
    "Versioning",
    "Encryption Status",
    "Encryption Type",
    "Logging",
    "Logging Bucket",
    "Public",
]

BucketRecord = namedtuple(
    "BucketRecord",
    [
        "name",
        "region",
        "versioning",
        "encryption_status",
        "encryption_type",
        "logging_status",
        "logging_bucket",
        "is_public",
    ],
)
