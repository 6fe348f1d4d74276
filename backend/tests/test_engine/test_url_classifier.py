"""Tests for URL detection and normalization."""

from __future__ import annotations

import pytest

from brandqr.engine.url_classifier import is_absolute_url, is_url, normalize_url


@pytest.mark.parametrize(
    "text",
    [
        "https://a.b",
        "http://example.com",
        "https://example.com/path?q=1#frag",
        "mailto:someone@example.com",
        "tel:+15551234567",
        "example.com",
        "example.com/path",
        "www.example.co.uk",
        "sub-domain.example.io/a/b",
        "https://example.com/my file.pdf",
        "https://example.com/search?q=two words#some part",
    ],
)
def test_urls(text):
    assert is_url(text)


@pytest.mark.parametrize(
    "text",
    [
        "not a url at all",
        "",
        "hello",
        "example",
        "example.c",
        "https://",
        "http:// spaced.com",
        "example.com with words",
        "1.2",
        "http://example.com:99999",
        "https://exa mple.com/x",
        "mailto:some one@example.com",
        "note:buy some milk",
    ],
)
def test_not_urls(text):
    assert not is_url(text)


def test_documented_examples():
    assert is_url("example.com/path")
    assert not is_url("not a url at all")
    assert normalize_url("example.com") == "https://example.com"
    assert normalize_url("https://a.b") == "https://a.b"


def test_bare_domain_with_path_normalized():
    assert normalize_url("example.com/path") == "https://example.com/path"


def test_non_url_unchanged():
    assert normalize_url("not a url at all") == "not a url at all"


def test_absolute_non_http_unchanged():
    assert normalize_url("mailto:someone@example.com") == "mailto:someone@example.com"


def test_short_abbreviation_is_accepted():
    # Two-letter labels look like domains; the heuristic keeps that ambiguity.
    assert is_url("i.e.eu")


def test_bare_domain_is_not_absolute():
    assert not is_absolute_url("example.com")
    assert is_absolute_url("https://example.com")


@pytest.mark.parametrize("value", [None, 42, b"https://example.com"])
def test_total_on_non_strings(value):
    assert is_url(value) is False
    assert normalize_url(value) is value


def test_spaces_in_path_with_or_without_scheme():
    assert is_url("https://example.com/my file.pdf")
    assert is_url("example.com/my file.pdf")
    assert normalize_url("https://example.com/my file.pdf") == "https://example.com/my file.pdf"
