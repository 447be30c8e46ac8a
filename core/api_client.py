"""Base API client with common HTTP functionality."""

import requests
from typing import Any
from config.settings import Config
from core.errors import TransportError
from utils.logger import setup_logger

class BaseAPIClient:
    """Base class for Helix API interactions."""

    def __init__(self, client_id: str, bearer_token: str,
                 base_url: str = Config.HELIX_BASE, logger=None):
        self.client_id = client_id
        self.bearer_token = bearer_token
        self.base_url = base_url
        self.logger = logger or setup_logger()
        self.session = requests.Session()
        self.session.headers.update({
            "client-id": client_id,
            "Authorization": f"Bearer {bearer_token}",
        })

    def execute(self, url: str, verb: str = "GET") -> Any:
        """Send the request and return the parsed JSON body."""
        self.logger.debug("%s %s", verb, url)

        try:
            r = self.session.request(verb, url, timeout=Config.TIMEOUT)
        except requests.RequestException as e:
            self.logger.error("Request failed: %s", e)
            raise TransportError(f"{verb} {url} failed: {e}", url, verb) from e

        if not r.ok:
            # Helix reports errors in a JSON body; hand it back as-is
            self.logger.warning("HTTP %s – %s", r.status_code, r.text[:200])

        try:
            return r.json()
        except ValueError as e:
            self.logger.error("Invalid JSON from %s: %s", url, r.text[:200])
            raise TransportError(f"{verb} {url} returned invalid JSON: {e}",
                                 url, verb) from e

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
