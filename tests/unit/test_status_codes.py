"""
Unit tests for HTTP status code constants.
"""

import pytest

from httpmessage.status_codes import HTTPStatus


class TestHTTPStatus:
    """Tests for the HTTPStatus enum."""

    def test_int_compatible(self):
        """Members compare equal to their integer codes."""
        assert HTTPStatus.OK == 200
        assert HTTPStatus.NOT_FOUND + 1 == 405

    @pytest.mark.parametrize("status, phrase", [
        (HTTPStatus.CONTINUE, "Continue"),
        (HTTPStatus.RESET_CONTENT, "Reset Content"),
        (HTTPStatus.TEMPORARY_REDIRECT, "Temporary Redirect"),
        (HTTPStatus.UPGRADE_REQUIRED, "Upgrade Required"),
        (HTTPStatus.HTTP_VERSION_NOT_SUPPORTED, "HTTP Version Not Supported"),
    ])
    def test_phrase(self, status: HTTPStatus, phrase: str):
        """Every member has a reason phrase."""
        assert status.phrase == phrase

    def test_every_member_has_phrase(self):
        """No member falls back to "Unknown"."""
        assert all(status.phrase != "Unknown" for status in HTTPStatus)

    def test_ranges(self):
        """Known codes span 1xx through 5xx."""
        codes = {int(status) for status in HTTPStatus}

        assert {100, 101} <= codes
        assert set(range(200, 206)) <= codes
        assert {300, 301, 302, 303, 307} <= codes
        assert {400, 401, 404, 426} <= codes
        assert set(range(500, 506)) <= codes

    def test_categories(self):
        """Category predicates follow the first digit."""
        assert HTTPStatus.SWITCHING_PROTOCOLS.is_informational
        assert HTTPStatus.NO_CONTENT.is_success
        assert HTTPStatus.SEE_OTHER.is_redirect
        assert HTTPStatus.GONE.is_client_error
        assert HTTPStatus.BAD_GATEWAY.is_server_error
        assert HTTPStatus.GONE.is_error
        assert not HTTPStatus.OK.is_error

    def test_lookup(self):
        """lookup() returns None for unlisted codes."""
        assert HTTPStatus.lookup(404) is HTTPStatus.NOT_FOUND
        assert HTTPStatus.lookup(299) is None
