"""Tests for the parsed value types."""

import pytest
from requests.structures import CaseInsensitiveDict

from httphead.models import (
    CustomHeader,
    ExtensionMethod,
    Header,
    KnownHeader,
    KnownMethod,
    Request,
)
from httphead.parser import parse_request


def _describe(method):
    match method:
        case KnownMethod.GET:
            return "read"
        case KnownMethod():
            return f"known {method.token}"
        case ExtensionMethod(token=token):
            return f"extension {token}"


class TestMethod:
    """Tests for the Method variants."""

    def test_known_token_and_str(self):
        assert KnownMethod.DELETE.token == "DELETE"
        assert str(KnownMethod.OPTIONS) == "OPTIONS"

    def test_extension_token_and_str(self):
        assert str(ExtensionMethod("Patch")) == "Patch"

    def test_pattern_matching(self):
        assert _describe(KnownMethod.GET) == "read"
        assert _describe(KnownMethod.PUT) == "known PUT"
        assert _describe(ExtensionMethod("PURGE")) == "extension PURGE"

    def test_extension_is_hashable_value(self):
        assert len({ExtensionMethod("X"), ExtensionMethod("X")}) == 1


class TestHeader:
    """Tests for Header and HeaderName."""

    def test_known_text(self):
        assert KnownHeader.USER_AGENT.text == "User-Agent"
        assert str(KnownHeader.ACCEPT_CHARSET) == "Accept-Charset"

    def test_custom_text(self):
        assert CustomHeader("x-lower").text == "x-lower"

    def test_to_line(self):
        assert Header(KnownHeader.HOST, "example.com").to_line() == "Host: example.com"
        assert Header(CustomHeader("X-Id"), "7").to_line() == "X-Id: 7"

    def test_frozen(self):
        header = Header(KnownHeader.HOST, "a")
        with pytest.raises(AttributeError):
            header.value = "b"


class TestRequestLookup:
    """Tests for Request.header and Request.header_map."""

    @pytest.fixture
    def request_(self):
        return parse_request(
            "GET / HTTP/1.1\r\n"
            "Host: example.com\r\n"
            "X-Tag: first\r\n"
            "Accept: text/html\r\n"
            "x-tag: second\r\n"
        )

    def test_header_by_text_any_case(self, request_):
        assert request_.header("HOST") == "example.com"
        assert request_.header("accept") == "text/html"

    def test_header_by_variant(self, request_):
        assert request_.header(KnownHeader.ACCEPT) == "text/html"
        assert request_.header(CustomHeader("X-TAG")) == "first"

    def test_header_first_value_wins(self, request_):
        assert request_.header("x-tag") == "first"

    def test_header_default(self, request_):
        assert request_.header("Referer") is None
        assert request_.header(KnownHeader.REFERER, "none") == "none"

    def test_header_map(self, request_):
        mapping = request_.header_map()
        assert isinstance(mapping, CaseInsensitiveDict)
        assert mapping["host"] == "example.com"
        assert mapping["X-TAG"] == "second"
        assert len(mapping) == 3

    def test_header_map_is_a_copy(self, request_):
        mapping = request_.header_map()
        mapping["Host"] = "changed"
        assert request_.header("Host") == "example.com"

    def test_empty_request_defaults(self):
        request = Request(KnownMethod.GET, "/")
        assert request.headers == ()
        assert request.diagnostics == ()
        assert request.header("Host") is None
