from __future__ import annotations

import pytest

from urlkey.domain.models import IndexedUrl
from urlkey.services.exceptions import InvalidArgument
from urlkey.services.indexing_service import UrlIndexService
from urlkey.services.url_extraction import UrlExtractor
from urlkey.services.url_normalization import IndexKeyUrlNormalizer, UrlNormalizer


# -----------------------------
# Test doubles
# -----------------------------
class HostOnlyNormalizer(UrlNormalizer):
    def normalize(self, s):
        return s.split("//", 1)[-1].split("/", 1)[0].lower() if s is not None else None


# -----------------------------
# Helpers
# -----------------------------
def make_service(**kwargs) -> UrlIndexService:
    kwargs.setdefault("extractor", UrlExtractor())
    kwargs.setdefault("url_normalizer", IndexKeyUrlNormalizer())
    return UrlIndexService(**kwargs)


def test_index_pairs_urls_with_keys():
    service = make_service()
    result = service.index("Visit https://WWW.Example.com/index.html and example.org/docs/")

    assert result.urls == [
        IndexedUrl(url="https://WWW.Example.com/index.html", key="https://example.com"),
        IndexedUrl(url="http://example.org/docs", key="http://example.org/docs"),
    ]
    assert result.collapsed == 0
    assert result.limit is None


def test_index_collapses_urls_with_the_same_key():
    service = make_service()
    result = service.index("www.example.com, example.com/index.html and EXAMPLE.com")

    assert [u.key for u in result.urls] == ["http://example.com"]
    assert result.urls[0].url == "http://www.example.com"
    assert result.collapsed == 2


def test_index_uses_injected_normalizer():
    service = make_service(url_normalizer=HostOnlyNormalizer())
    result = service.index("example.com/a example.com/b example.org")
    assert [u.key for u in result.urls] == ["example.com", "example.org"]
    assert result.collapsed == 1


def test_default_limit_applies_when_none_given():
    service = make_service(default_limit=2)
    result = service.index("a.com b.com c.com")
    assert [u.url for u in result.urls] == ["http://a.com", "http://b.com"]
    assert result.limit == 2


def test_explicit_limit_overrides_default():
    service = make_service(default_limit=2)
    assert len(service.extract("a.com b.com c.com", limit=3)) == 3


def test_limit_is_clamped_to_max():
    service = make_service(max_limit=2)
    assert service.effective_limit(50) == 2
    assert len(service.extract("a.com b.com c.com", limit=50)) == 2


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_raises(limit):
    service = make_service()
    with pytest.raises(InvalidArgument):
        service.index("a.com", limit=limit)


def test_normalize_and_is_url_delegate():
    service = make_service()
    assert service.normalize("WWW.Example.com/") == "http://example.com"
    assert service.normalize(None) is None
    assert service.is_url("example.com") is True
    assert service.is_url("123.456.789.000") is False
