from .exceptions import InvalidArgument, MalformedCandidate, UrlKeyError
from .indexing_service import UrlIndexService
from .url_extraction import (
    UrlCollectingHandler,
    UrlExtractor,
    UrlMatchHandler,
    UrlMatchRecorder,
    extract_url_strings,
    extract_urls,
    find_urls,
    is_url,
)
from .url_normalization import IndexKeyUrlNormalizer, UrlNormalizer, normalize_url

__all__ = [
    "InvalidArgument",
    "MalformedCandidate",
    "UrlKeyError",
    "UrlIndexService",
    "UrlCollectingHandler",
    "UrlExtractor",
    "UrlMatchHandler",
    "UrlMatchRecorder",
    "extract_url_strings",
    "extract_urls",
    "find_urls",
    "is_url",
    "IndexKeyUrlNormalizer",
    "UrlNormalizer",
    "normalize_url",
]
