from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

INDEX_PAGE_SUFFIXES = ("/", "/index.html", "/index.htm", "/default.html", "/default.htm")

_DOT_SEGMENT_RE = re.compile(r"/\.{1,2}/")
_DEFAULT_PORT_RE = re.compile(r"(^[^/]+//[^/:]+):80(?=/|$)")


class UrlNormalizer:
    """Strategy interface."""
    def normalize(self, s: Optional[str]) -> Optional[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class IndexKeyUrlNormalizer(UrlNormalizer):
    """
    Rewrites a URL into the canonical form used as an index key:
    lower-cased, http:// assumed, one index-page suffix and "www." dropped,
    "/./" and "/../" collapsed in a single pass, default port removed.

    The dot-segment pass is a plain substitution, not path resolution, so
    runs of consecutive dot segments can need a second normalize() to settle.
    """

    def normalize(self, s: Optional[str]) -> Optional[str]:
        if s is None:
            return None

        url = s.strip().lower()

        if not url.startswith(("http://", "https://")):
            url = "http://" + url

        # Only the first matching suffix is removed
        for suffix in INDEX_PAGE_SUFFIXES:
            if url.endswith(suffix):
                url = url[: -len(suffix)]
                break

        if url.startswith("https://www."):
            url = "https://" + url[len("https://www."):]
        if url.startswith("http://www."):
            url = "http://" + url[len("http://www."):]

        url = _DOT_SEGMENT_RE.sub("/", url)
        url = _DEFAULT_PORT_RE.sub(r"\1", url, count=1)

        return url


_default_normalizer = IndexKeyUrlNormalizer()


def normalize_url(url: Optional[str]) -> Optional[str]:
    return _default_normalizer.normalize(url)
