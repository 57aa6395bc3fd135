"""Conversion between BucketRecord and CSV rows."""
from .records import HEADER, BucketRecord


def format_bool(value):
    return "true" if value else "false"


def parse_bool(value):
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"expected 'true' or 'false', got {value!r}")


def format_row(record):
    """Render a record as a list of CSV cells in header order."""
    return [
        record.name,
        record.region,
        record.versioning,
        record.encryption_status,
        record.encryption_type,
        record.logging_status,
        record.logging_bucket,
        format_bool(record.is_public),
    ]


def parse_row(row):
    """Rebuild a record from a list of CSV cells."""
    if len(row) != len(HEADER):
        raise ValueError(f"expected {len(HEADER)} columns, got {len(row)}")
    *fields, is_public = row
    return BucketRecord(*fields, parse_bool(is_public))
