"""Report errors. Every one of these ends the run."""


class ReportError(Exception):
    """Base class for fatal report errors."""


class ConfigError(ReportError):
    """Bad configuration or unusable AWS session."""


class EnumerationError(ReportError):
    """Bucket listing failed."""


class LocateError(ReportError):
    """Bucket region could not be resolved."""


class DescribeError(ReportError):
    """A bucket descriptor query failed."""


class OutputError(ReportError):
    """Report file could not be written."""
