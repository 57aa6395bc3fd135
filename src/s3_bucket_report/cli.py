"""Command line entry point: list buckets, describe them, write the CSV."""
import argparse
import logging
import sys

from .config import Config
from .clients import ClientFactory
from .enumerator import list_buckets
from .describer import describe_buckets
from .report import write_report
from .metrics import collect_metrics, log_metrics
from .errors import ConfigError, ReportError

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="s3report",
        description="Generate a CSV report of every S3 bucket in the account.",
    )
    parser.add_argument(
        "-f",
        "--filename",
        help="Specify filename, '.csv' is appended. Default is 'bucket-data'",
    )
    return parser.parse_args(argv)


def run(config, clients):
    """Collect all bucket records and write the report. Returns the record list."""
    buckets = list_buckets(clients)
    records = describe_buckets(clients, buckets, max_workers=config.max_workers)
    write_report(records, config.output_path)
    log_metrics(collect_metrics(records))
    return records


def main(argv=None):
    """Console script entry point. Returns the process exit code."""
    args = parse_args(argv)
    try:
        config = Config()
        if args.filename is not None:
            if not args.filename.strip():
                raise ConfigError("--filename must not be empty")
            config.filename = args.filename.strip()
        logging.getLogger().setLevel(config.log_level)

        clients = ClientFactory(profile_name=config.profile_name)
        run(config, clients)
    except ReportError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    logger.info("Complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
