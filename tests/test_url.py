"""Tests for public URL normalization."""

import pytest

from stagefs.url import parse_public_url


class TestParsePublicUrl:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("foo", "/foo/"),
            ("/foo", "/foo/"),
            ("foo/", "/foo/"),
            ("/foo/", "/foo/"),
            ("", "/"),
            ("/", "/"),
        ],
    )
    def test_examples(self, raw, expected):
        assert parse_public_url(raw) == expected

    @pytest.mark.parametrize("raw", ["", "/", "a", "/a/b", "a//b/", "//", "https://example.com"])
    def test_idempotent(self, raw):
        once = parse_public_url(raw)
        assert parse_public_url(once) == once

    @pytest.mark.parametrize("raw", ["app", "a/b", "a//b", "with space", "%2F"])
    def test_wraps_in_slashes(self, raw):
        assert parse_public_url(raw) == f"/{raw}/"

    def test_interior_slashes_untouched(self):
        assert parse_public_url("a//b") == "/a//b/"
