"""S3 bucket inventory report generator."""
__version__ = "1.0.0"
