import pytest

from urlkey.services.url_normalization import IndexKeyUrlNormalizer, UrlNormalizer, normalize_url


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("HTTPS://WWW.Example.com/index.html", "https://example.com"),
        ("http://example.com:80/a/./b/", "http://example.com/a/b"),
        ("  Example.COM  ", "http://example.com"),
        ("example.com/", "http://example.com"),
        ("www.example.com/default.htm", "http://example.com"),
        ("http://www.example.com/docs/index.htm", "http://example.com/docs"),
        ("https://example.com/default.html", "https://example.com"),
        ("http://example.com:80", "http://example.com"),        # default port at end of string
        ("http://example.com:8080/", "http://example.com:8080"),
        ("http://example.com/a:80/b", "http://example.com/a:80/b"),  # :80 not right after the host
        ("http://example.com/a/../b", "http://example.com/a/b"),    # no parent resolution
        ("ftp://example.com/file", "http://ftp://example.com/file"),
    ],
)
def test_normalize_index_key(raw, expected):
    assert normalize_url(raw) == expected


def test_none_propagates():
    assert normalize_url(None) is None
    assert IndexKeyUrlNormalizer().normalize(None) is None


def test_only_one_suffix_is_stripped():
    # removing "/" reveals "/index.html", which stays
    assert normalize_url("example.com/index.html/") == "http://example.com/index.html"


def test_www_only_dropped_at_start_of_host():
    assert normalize_url("http://sub.www.example.com") == "http://sub.www.example.com"


@pytest.mark.parametrize(
    "raw",
    [
        "HTTPS://WWW.Example.com/index.html",
        "example.com/Path/",
        "http://example.com:80/a/./b/",
        "https://news.example.org:8443/story?id=7",
        "www.example.net/default.html",
    ],
)
def test_idempotent_for_common_inputs(raw):
    once = normalize_url(raw)
    assert normalize_url(once) == once


def test_consecutive_dot_segments_need_more_than_one_pass():
    once = normalize_url("http://example.com/a/./././b")
    assert once == "http://example.com/a/./b"
    assert normalize_url(once) == "http://example.com/a/b"
    assert normalize_url(once) != once


def test_strategy_interface():
    assert isinstance(IndexKeyUrlNormalizer(), UrlNormalizer)
    with pytest.raises(NotImplementedError):
        UrlNormalizer().normalize("example.com")
