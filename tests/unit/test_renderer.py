"""
Unit tests for URL rendering.

Tests cover:
  - Base URL assembly (prefix, host, port, path prefix)
  - Placeholder substitution and its boundaries
  - Query string formatting and optional encoding
  - Host-less descriptors
"""

from urlbuildr.domain.models import UrlDescriptor
from urlbuildr.domain.renderer import (
    build_query,
    format_value,
    render,
    substitute_params,
)


class TestBaseUrl:
    """Tests for the host/port/path-prefix part of render()."""

    def test_prefix_host_port_and_path_prefix(self):
        descriptor = UrlDescriptor(
            prefix="https://", host="example.com", port=8443, path_prefix="api"
        )
        assert render(descriptor) == "https://example.com:8443/api"

    def test_falsy_port_is_omitted(self):
        """Port 0, None and '' should not render a colon."""
        for port in (None, 0, ""):
            descriptor = UrlDescriptor(prefix="http://", host="example.com", port=port)
            assert render(descriptor) == "http://example.com"

    def test_string_port(self):
        descriptor = UrlDescriptor(host="example.com", port="8080")
        assert render(descriptor) == "example.com:8080"

    def test_missing_host_skips_base(self):
        """Without a host, prefix and port are not rendered at all."""
        descriptor = UrlDescriptor(prefix="https://", port=80, segments=["users"])
        assert render(descriptor) == "/users"

    def test_missing_host_keeps_path_prefix(self):
        descriptor = UrlDescriptor(path_prefix="accounts", segments=["users"])
        assert render(descriptor) == "/accounts/users"

    def test_query_only(self):
        """A descriptor with only queries renders a bare query string."""
        descriptor = UrlDescriptor(queries={"q": "x"})
        assert render(descriptor) == "?q=x"

    def test_empty_descriptor(self):
        assert render(UrlDescriptor()) == ""


class TestSubstituteParams:
    """Tests for substitute_params()."""

    def test_replaces_placeholder_segment(self):
        path = substitute_params("/users/:userId/cart", {"userId": 54298})
        assert path == "/users/54298/cart"

    def test_replaces_placeholder_at_end(self):
        assert substitute_params("/users/:userId", {"userId": 7}) == "/users/7"

    def test_does_not_match_longer_name(self):
        """':userId' must not be replaced inside ':userIdentity'."""
        path = substitute_params("/:userIdentity/:userId", {"userId": 1})
        assert path == "/:userIdentity/1"

    def test_shorter_name_does_not_match_prefix_of_longer(self):
        path = substitute_params("/:userId", {"user": "bob"})
        assert path == "/:userId"

    def test_replaces_every_occurrence(self):
        """All qualifying occurrences are replaced, not only the first."""
        path = substitute_params("/:id/compare/:id", {"id": 3})
        assert path == "/3/compare/3"

    def test_unmatched_placeholder_left_verbatim(self):
        assert substitute_params("/users/:userId", {}) == "/users/:userId"

    def test_regex_characters_in_name_are_literal(self):
        assert substitute_params("/:a.b", {"a.b": 1}) == "/1"
        assert substitute_params("/:axb", {"a.b": 1}) == "/:axb"

    def test_value_with_backslash_is_literal(self):
        assert substitute_params("/:p", {"p": r"a\1"}) == r"/a\1"

    def test_boolean_value_formatting(self):
        assert substitute_params("/:flag", {"flag": False}) == "/false"

    def test_placeholders_in_host_are_untouched(self):
        """Substitution only applies to the path part."""
        descriptor = UrlDescriptor(
            host="localhost", port=8080, segments=[":8080"], parameters={"8080": "x"}
        )
        assert render(descriptor) == "localhost:8080/x"

    def test_placeholders_in_query_are_untouched(self):
        descriptor = UrlDescriptor(
            host="h", segments=[":id"], parameters={"id": 1}, queries={"ref": ":id"}
        )
        assert render(descriptor) == "h/1?ref=:id"


class TestBuildQuery:
    """Tests for build_query() and format_value()."""

    def test_single_pair(self):
        assert build_query({"showAllPurchases": True}) == "?showAllPurchases=true"

    def test_insertion_order_preserved(self):
        assert build_query({"a": 1, "b": 2}) == "?a=1&b=2"

    def test_empty(self):
        assert build_query({}) == ""

    def test_not_encoded_by_default(self):
        assert build_query({"q": "a b&c"}) == "?q=a b&c"

    def test_encoded_on_request(self):
        assert build_query({"q": "a b&c"}, encode=True) == "?q=a%20b%26c"

    def test_format_value(self):
        assert format_value(True) == "true"
        assert format_value(False) == "false"
        assert format_value(None) == ""
        assert format_value(1.5) == "1.5"
        assert format_value("x") == "x"


class TestRenderDeterminism:
    def test_same_descriptor_renders_identically(self):
        descriptor = UrlDescriptor(
            prefix="https://",
            host="example.com",
            segments=["a", ":b"],
            parameters={"b": 2},
            queries={"x": 1, "y": 2},
        )
        assert render(descriptor) == render(descriptor)
