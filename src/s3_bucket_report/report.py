"""CSV report output."""
import csv
import logging

from .errors import OutputError
from .formatter import format_row, parse_row
from .records import HEADER

logger = logging.getLogger(__name__)


def write_report(records, path):
    """Write the header and one row per record, truncating any existing file.

    Returns the number of data rows written.
    """
    try:
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(HEADER)
            for record in records:
                writer.writerow(format_row(record))
    except OSError as e:
        raise OutputError(f"failed to write {path}: {e}") from e

    logger.info(f"Wrote {len(records)} buckets to {path}")
    return len(records)


def read_report(path):
    """Parse a report written by write_report back into records."""
    try:
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
    except OSError as e:
        raise OutputError(f"failed to read {path}: {e}") from e

    if not rows or rows[0] != HEADER:
        raise OutputError(f"{path} is not a bucket report: unexpected header")
    try:
        return [parse_row(row) for row in rows[1:]]
    except ValueError as e:
        raise OutputError(f"{path} is not a bucket report: {e}") from e
