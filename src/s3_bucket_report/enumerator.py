"""Bucket enumeration."""
import logging

from botocore.exceptions import BotoCoreError, ClientError

from .errors import EnumerationError

logger = logging.getLogger(__name__)


def list_buckets(clients):
    """List every bucket owned by the account, in API order.

    Returns list of {"Name": str, "CreationDate": datetime}.
    """
    s3 = clients.get("s3")
    try:
        response = s3.list_buckets()
    except (ClientError, BotoCoreError) as e:
        raise EnumerationError(f"Couldn't list buckets: {e}") from e

    buckets = response.get("Buckets", [])
    logger.info(f"Found {len(buckets)} buckets")
    logger.debug(f"Buckets: {[b['Name'] for b in buckets]}")
    return buckets
