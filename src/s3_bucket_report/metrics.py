"""Run summary counters."""
import logging

from .records import NOT_ENABLED, ENABLED

logger = logging.getLogger(__name__)


def new_metrics():
    """Create a fresh metrics dict."""
    return {
        "buckets": 0,
        "versioning_disabled": 0,
        "unencrypted": 0,
        "logging_disabled": 0,
        "public": 0,
    }


def collect_metrics(records):
    """Count records that fall short on each checked setting."""
    metrics = new_metrics()
    for record in records:
        metrics["buckets"] += 1
        if record.versioning != ENABLED:
            metrics["versioning_disabled"] += 1
        if record.encryption_status == NOT_ENABLED:
            metrics["unencrypted"] += 1
        if record.logging_status == NOT_ENABLED:
            metrics["logging_disabled"] += 1
        if record.is_public:
            metrics["public"] += 1
    return metrics


def log_metrics(metrics):
    logger.info(f"Summary: {metrics}")
