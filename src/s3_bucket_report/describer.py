"""Per-bucket configuration queries.

Each bucket is located first, then versioning, default encryption, access
logging and public policy status are read with a client pinned to the
bucket's region. Location and versioning failures are fatal. Encryption,
logging and policy status report "not configured" as an error, so any error
from those three is read as the feature being absent.
"""
import logging
from concurrent.futures import ThreadPoolExecutor

from botocore.exceptions import BotoCoreError, ClientError

from .config import safe_get
from .errors import DescribeError, LocateError
from .records import (
    DEFAULT_REGION,
    ENABLED,
    KMS,
    NONE,
    NOT_ENABLED,
    SSE,
    SUSPENDED,
    BucketRecord,
)

logger = logging.getLogger(__name__)

AWS_ERRORS = (ClientError, BotoCoreError)

# SSEAlgorithm -> (status, type)
ENCRYPTION_TYPES = {
    "AES256": (ENABLED, SSE),
    "aws:kms": (ENABLED, KMS),
}


def _error_code(error):
    if isinstance(error, ClientError):
        return safe_get(error.response, "Error", "Code") or "Unknown"
    return type(error).__name__


def locate(clients, bucket_name):
    """Resolve the bucket's region.

    The API leaves LocationConstraint empty for buckets in us-east-1.
    """
    try:
        response = clients.get("s3").get_bucket_location(Bucket=bucket_name)
    except AWS_ERRORS as e:
        raise LocateError(f"Couldn't locate bucket {bucket_name}: {e}") from e
    return response.get("LocationConstraint") or DEFAULT_REGION


def get_versioning(s3, bucket_name):
    """Return Enabled, Suspended or Not Enabled."""
    try:
        response = s3.get_bucket_versioning(Bucket=bucket_name)
    except AWS_ERRORS as e:
        raise DescribeError(f"failed to get bucket versioning status for {bucket_name}: {e}") from e

    status = response.get("Status")
    if status in (ENABLED, SUSPENDED):
        return status
    return NOT_ENABLED


def get_encryption(s3, bucket_name):
    """Return (status, type) of the bucket's default encryption."""
    try:
        response = s3.get_bucket_encryption(Bucket=bucket_name)
    except AWS_ERRORS as e:
        logger.debug(f"No encryption for {bucket_name} ({_error_code(e)})")
        return NOT_ENABLED, NONE

    algorithm = safe_get(
        response,
        "ServerSideEncryptionConfiguration",
        "Rules",
        0,
        "ApplyServerSideEncryptionByDefault",
        "SSEAlgorithm",
    )
    return ENCRYPTION_TYPES.get(algorithm, (NOT_ENABLED, NONE))


def get_logging(s3, bucket_name):
    """Return (status, target bucket) of the bucket's access logging."""
    try:
        response = s3.get_bucket_logging(Bucket=bucket_name)
    except AWS_ERRORS as e:
        logger.debug(f"No logging for {bucket_name} ({_error_code(e)})")
        return NOT_ENABLED, NONE

    target = safe_get(response, "LoggingEnabled", "TargetBucket")
    if target:
        return ENABLED, target
    return NOT_ENABLED, NONE


def get_public_status(s3, bucket_name):
    """Return True if the bucket policy makes the bucket public."""
    try:
        response = s3.get_bucket_policy_status(Bucket=bucket_name)
    except AWS_ERRORS as e:
        logger.debug(f"No policy status for {bucket_name} ({_error_code(e)})")
        return False
    return safe_get(response, "PolicyStatus", "IsPublic") is True


def describe_bucket(clients, bucket):
    """Build the BucketRecord for one entry of list_buckets()."""
    name = bucket["Name"]
    region = locate(clients, name)
    s3 = clients.get("s3", region)

    versioning = get_versioning(s3, name)
    encryption_status, encryption_type = get_encryption(s3, name)
    logging_status, logging_bucket = get_logging(s3, name)
    is_public = get_public_status(s3, name)

    logger.info(f"Described {name} ({region})")
    return BucketRecord(
        name=name,
        region=region,
        versioning=versioning,
        encryption_status=encryption_status,
        encryption_type=encryption_type,
        logging_status=logging_status,
        logging_bucket=logging_bucket,
        is_public=is_public,
    )


def describe_buckets(clients, buckets, max_workers=1):
    """Describe every bucket, returning records in discovery order.

    With max_workers > 1 buckets are described on a thread pool; the first
    failure in discovery order is raised and pending work is cancelled.
    """
    if max_workers <= 1 or len(buckets) <= 1:
        return [describe_bucket(clients, bucket) for bucket in buckets]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(describe_bucket, clients, bucket) for bucket in buckets]
        try:
            return [future.result() for future in futures]
        except Exception:
            for future in futures:
                future.cancel()
            raise
