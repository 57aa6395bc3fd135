"""Configuration from environment variables."""
import os

from .errors import ConfigError

DEFAULT_FILENAME = "bucket-data"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Configuration from environment variables."""

    def __init__(self):
        self.filename = os.getenv("REPORT_FILENAME", DEFAULT_FILENAME).strip()
        if not self.filename:
            raise ConfigError("REPORT_FILENAME must not be empty")

        self.profile_name = os.getenv("AWS_PROFILE") or None

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}")

        raw_workers = os.getenv("MAX_WORKERS", "1")
        try:
            self.max_workers = int(raw_workers)
        except ValueError:
            raise ConfigError(f"MAX_WORKERS must be an integer, got {raw_workers!r}") from None
        if self.max_workers < 1:
            raise ConfigError(f"MAX_WORKERS must be at least 1, got {self.max_workers}")

    @property
    def output_path(self):
        """Report file name, with the .csv extension appended."""
        return f"{self.filename}.csv"


def safe_get(dictionary, *keys):
    """Safely get nested value from an API response.

    Integer keys index into lists.
    """
    for key in keys:
        if dictionary is None:
            return None
        if isinstance(key, int):
            if not isinstance(dictionary, list) or len(dictionary) <= key:
                return None
        elif key not in dictionary:
            return None
        dictionary = dictionary[key]
    return dictionary
