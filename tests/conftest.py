"""
Shared fixtures for osmkit tests
"""

from unittest.mock import MagicMock

import pytest


def make_response(text: str = "", status_code: int = 200) -> MagicMock:
    """Build a stand-in for requests.Response"""
    response = MagicMock()
    response.text = text
    response.content = text.encode("utf-8")
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    return response


@pytest.fixture
def response_factory():
    return make_response
