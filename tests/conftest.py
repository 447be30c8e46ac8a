"""
Pytest configuration
Provides a Helix client whose HTTP session is mocked (no network)
"""
import logging
import pytest
from unittest.mock import Mock

from core.helix_client import HelixClient


def make_response(body=None, status=200, text=None):
    """Build a fake ``requests.Response``."""
    response = Mock()
    response.status_code = status
    response.ok = status < 400
    response.text = text if text is not None else str(body)
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def logger():
    return logging.getLogger("helix.test")


@pytest.fixture
def client(logger):
    """HelixClient with ``session.request`` replaced by a Mock"""
    helix = HelixClient("test_client_id", "test_token", logger)
    helix.session.request = Mock(return_value=make_response({"data": []}))
    return helix


def requested_url(client):
    """URL passed to the most recent request."""
    return client.session.request.call_args[0][1]
