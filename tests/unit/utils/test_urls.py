from __future__ import annotations

import pytest

from src.utils.urls import is_local_url, safe_redirect_target


@pytest.mark.parametrize("url", ["/", "/Animal", "/Breeds/Details/3?x=1", "/Animal#top"])
def test_local_paths_are_accepted(url):
    assert is_local_url(url)


@pytest.mark.parametrize(
    "url",
    [
        None,
        "",
        "Animal",
        "//evil.example/path",
        "/\\evil.example",
        "https://evil.example/",
        "javascript:alert(1)",
        "/Animal\r\nLocation: https://evil.example",
    ],
)
def test_foreign_or_malformed_urls_are_rejected(url):
    assert not is_local_url(url)


def test_safe_redirect_target_falls_back():
    assert safe_redirect_target("/Breeds", "/Animal") == "/Breeds"
    assert safe_redirect_target("https://evil.example", "/Animal") == "/Animal"
