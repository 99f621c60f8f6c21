"""
Unit tests for the HTTP request model.
"""

import logging

import pytest

from httpmessage.config import MessageConfig
from httpmessage.message import BodyDecodeError, HttpMessage
from httpmessage.request import HttpMethod, Request


class TestRequestConstruction:
    """Tests for Request constructors and the request line."""

    @pytest.mark.parametrize("factory, method", [
        (Request.connect, HttpMethod.CONNECT),
        (Request.delete, HttpMethod.DELETE),
        (Request.get, HttpMethod.GET),
        (Request.head, HttpMethod.HEAD),
        (Request.options, HttpMethod.OPTIONS),
        (Request.patch, HttpMethod.PATCH),
        (Request.post, HttpMethod.POST),
        (Request.put, HttpMethod.PUT),
        (Request.trace, HttpMethod.TRACE),
    ])
    def test_method_constructors(self, factory, method, target: str):
        """Each method-named constructor sets the matching method."""
        request = factory(target)

        assert request.method is method
        assert request.target == target
        assert request.url is not None

    def test_for_method(self, target: str):
        """for_method() takes an HttpMethod or a method name."""
        assert Request.for_method(HttpMethod.PATCH, target).method is HttpMethod.PATCH
        assert Request.for_method("post", target).method is HttpMethod.POST

    def test_unknown_method_name(self, target: str):
        """Unknown method names are rejected."""
        with pytest.raises(ValueError):
            Request.for_method("BREW", target)

    def test_valid_target_is_parsed(self, target: str):
        """A valid URL target is available in structured form."""
        request = Request.get("http://example.com:8080/user?id=1")

        assert request.url.scheme == "http"
        assert request.url.hostname == "example.com"
        assert request.url.port == 8080
        assert request.url.path == "/user"
        assert request.url.query == "id=1"

    def test_malformed_target_is_tolerated(self):
        """A malformed target still builds a request, without a URL."""
        request = Request.get("http//example.com/user")

        assert request.method is HttpMethod.GET
        assert request.target == "http//example.com/user"
        assert request.url is None

    def test_space_in_path_keeps_url(self):
        """A space in the path does not drop the parsed URL."""
        request = Request.get("http://example.com/my file")

        assert request.target == "http://example.com/my file"
        assert request.url is not None
        assert request.url.path == "/my%20file"

    def test_template_target_is_kept(self):
        """Targets with unsubstituted variables are kept verbatim."""
        request = Request.get("{base}/users/{id}")

        assert request.target == "{base}/users/{id}"
        assert request.url is None

    def test_malformed_target_logged_at_debug(self, caplog):
        """The tolerated parse failure is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="httpmessage.request"):
            Request.get("http//example.com/user")

        assert "http//example.com/user" in caplog.text

    def test_request_line_is_read_only(self, request_obj: Request):
        """method, target and url cannot be reassigned."""
        with pytest.raises(AttributeError):
            request_obj.target = "http://other.example/"
        with pytest.raises(AttributeError):
            request_obj.method = HttpMethod.GET
        with pytest.raises(AttributeError):
            request_obj.url = None


class TestRequestHeaders:
    """Tests for header access through the request."""

    def test_case_insensitive(self, request_obj: Request):
        """Headers are case-insensitive on get and on insert."""
        request_obj.insert_header("Content-Type", "application/json")
        assert request_obj.headers.get("content-type") == "application/json"

        request_obj.insert_header("content-Type", "text/plain")
        assert request_obj.headers.get("Content-type") == "text/plain"
        assert len(request_obj.headers) == 1

    def test_iteration(self, request_obj: Request):
        """All headers are visited with their names as inserted."""
        request_obj.insert_header("Content-Type", "application/json") \
                   .insert_header("Accept", "application/json")

        contained = dict(request_obj.headers.iter())

        assert contained == {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def test_get_header(self, request_obj: Request):
        """get_header() forwards to the embedded message."""
        request_obj.insert_header("Accept", "text/html")

        assert request_obj.get_header("ACCEPT") == "text/html"
        assert request_obj.get_header("X-Missing") is None
        assert request_obj.message.get_header("accept") == "text/html"


class TestRequestParams:
    """Tests for query parameters."""

    def test_case_sensitive(self, request_obj: Request):
        """Parameter names are case-sensitive."""
        request_obj.insert_param("id", "1234")

        assert request_obj.params.get("ID") is None
        assert request_obj.params.contains_key("id")
        assert not request_obj.params.contains_key("ID")
        assert request_obj.get_param("id") == "1234"

        request_obj.insert_param("ID", "3456")
        assert request_obj.get_param("id") == "1234"

        request_obj.insert_param("id", "3456")
        assert request_obj.get_param("id") == "3456"

    def test_iteration(self, request_obj: Request):
        """Chained inserts are all visible when iterating."""
        request_obj.insert_param("id", "1234") \
                   .insert_param("departament", "marketing")

        assert dict(request_obj.params.iter()) == {
            "id": "1234",
            "departament": "marketing",
        }

    def test_params_not_parsed_from_target(self):
        """The query string of the target does not populate params."""
        request = Request.get("http://example.com/user?id=1")
        assert len(request.params) == 0


class TestRequestCookies:
    """Tests for request cookies."""

    def test_case_sensitive(self, request_obj: Request):
        """Cookie names are case-sensitive."""
        request_obj.insert_cookie("id", "1234")
        assert request_obj.cookies.contains_key("id")
        assert not request_obj.cookies.contains_key("ID")

        request_obj.insert_cookie("ID", "3456") \
                   .insert_cookie("departament", "marketing")

        assert dict(request_obj.cookies.iter()) == {
            "id": "1234",
            "ID": "3456",
            "departament": "marketing",
        }
        assert request_obj.get_cookie("ID") == "3456"

    def test_cookie_header(self, request_obj: Request):
        """Cookies render as a Cookie header value in insertion order."""
        assert request_obj.cookie_header() is None

        request_obj.insert_cookie("a", "1").insert_cookie("b", "2")
        assert request_obj.cookie_header() == "a=1; b=2"

    def test_params_and_cookies_are_independent(self, request_obj: Request):
        """Params and cookies are separate maps."""
        request_obj.insert_param("id", "1")

        assert request_obj.get_cookie("id") is None


class TestRequestBody:
    """Tests for request bodies and JSON."""

    def test_json_round_trip(self, person: dict):
        """A JSON body set on a request decodes back to the same value."""
        request = (Request.put("http://example.com/user")
            .insert_param("client_id", "1234")
            .insert_header("Content-Type", "application/json")
            .insert_header("Accept", "application/json")
            .set_json(person))

        assert isinstance(request, Request)
        assert request.headers.get("Content-Type") == "application/json"
        assert request.json() == person

    def test_no_body(self, request_obj: Request):
        """A new request has no body and json() fails cleanly."""
        assert request_obj.body is None
        assert not request_obj.has_single_body()
        assert not request_obj.has_multipart_body()

        with pytest.raises(BodyDecodeError, match="empty body"):
            request_obj.json()

    def test_raw_body(self, request_obj: Request):
        """set_body() stores a single buffer and chains."""
        result = request_obj.set_body(b"\x00\x01")

        assert result is request_obj
        assert request_obj.body == b"\x00\x01"
        assert request_obj.has_single_body()

    def test_config_is_passed_to_message(self):
        """A custom config reaches the embedded message."""
        config = MessageConfig(json_indent=0)
        request = Request.post("http://example.com/", config).set_json([1])

        assert isinstance(request.message, HttpMessage)
        assert request.message.config is config
        assert request.body == b"[\n1\n]"


class TestRequestMisc:
    """Tests for rendering and copying."""

    def test_str(self):
        """str() renders the request line and one key=value line per header."""
        request = Request.get("http://example.com/user")
        request.insert_header("Accept", "application/json")
        request.insert_header("X-Id", "7")

        assert str(request) == (
            "GET http://example.com/user\n"
            "Accept=application/json\n"
            "X-Id=7\n"
        )

    def test_str_without_headers(self):
        """Without headers only the request line is rendered."""
        assert str(Request.delete("http//bad")) == "DELETE http//bad\n"

    def test_repr(self, request_obj: Request):
        """repr() names method and target."""
        assert repr(request_obj) == "<Request CONNECT 'http://example.com/user'>"

    def test_copy_is_independent(self, request_obj: Request):
        """Changes to a copy do not affect the original."""
        request_obj.insert_header("Accept", "text/html").insert_param("id", "1")
        clone = request_obj.copy()

        clone.insert_header("accept", "application/json").insert_param("id", "2")
        clone.set_body(b"x")

        assert request_obj.get_header("Accept") == "text/html"
        assert request_obj.get_param("id") == "1"
        assert request_obj.body is None
        assert clone.target == request_obj.target
        assert clone.url == request_obj.url
