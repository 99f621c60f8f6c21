"""
pytest configuration and fixtures.
"""

from datetime import timedelta
import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpmessage import Request, Response, SetCookie, HTTPStatus


TARGET = "http://example.com/user"


@pytest.fixture
def target() -> str:
    """A valid absolute request target."""
    return TARGET


@pytest.fixture
def request_obj() -> Request:
    """Bare CONNECT request, as used across the request tests."""
    return Request.connect(TARGET)


@pytest.fixture
def response_ok() -> Response:
    """Empty 200 OK response."""
    return Response.with_status(HTTPStatus.OK)


@pytest.fixture
def person() -> dict:
    """Sample JSON document."""
    return {"name": "John", "surname": "Smith"}


@pytest.fixture
def session_cookie() -> SetCookie:
    """Session cookie with a one hour lifetime."""
    return SetCookie("session", "1234", max_age=timedelta(seconds=3600))
