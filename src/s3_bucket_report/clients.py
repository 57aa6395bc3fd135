"""Region-scoped boto3 client factory - creates S3 clients on first use."""
import logging
import threading

import boto3
from botocore.exceptions import BotoCoreError

from .errors import ConfigError

logger = logging.getLogger(__name__)


class ClientFactory:
    """Creates boto3 clients from one session and caches them per region."""

    def __init__(self, session=None, profile_name=None):
        if session is None:
            try:
                session = boto3.Session(profile_name=profile_name)
            except BotoCoreError as e:
                raise ConfigError(f"failed to load AWS configuration: {e}") from e
        try:
            credentials = session.get_credentials()
        except BotoCoreError as e:
            raise ConfigError(f"failed to load AWS credentials: {e}") from e
        if credentials is None:
            raise ConfigError("failed to load AWS configuration: no credentials found")
        self.session = session
        self._clients = {}
        self._lock = threading.Lock()

    def get(self, service_name="s3", region=None):
        """Get or create a client for the service, optionally pinned to a region."""
        key = (service_name, region)
        with self._lock:
            if key not in self._clients:
                logger.debug(f"Creating {service_name} client for region {region or 'default'}")
                self._clients[key] = self.session.client(service_name, region_name=region)
            return self._clients[key]
