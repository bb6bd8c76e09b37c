from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Set

from urlkey.domain.models import IndexedUrl, IndexResult, ParsedUrl
from urlkey.services.url_extraction import UrlExtractor, is_url
from urlkey.services.url_normalization import UrlNormalizer

logger = logging.getLogger(__name__)


@dataclass
class UrlIndexService:
    """
    Service layer: runs extraction, then turns each kept URL into an index key.
    Keeps controllers/routes thin.
    """
    extractor: UrlExtractor
    url_normalizer: UrlNormalizer
    max_limit: int = 1000
    default_limit: Optional[int] = None

    def effective_limit(self, limit: Optional[int]) -> Optional[int]:
        """
        Falls back to the configured default and clamps to max_limit.
        Non-positive values are passed through so the collector rejects them.
        """
        if limit is None:
            limit = self.default_limit
        if limit is not None and limit > self.max_limit:
            logger.info("Requested limit %d clamped to %d", limit, self.max_limit)
            limit = self.max_limit
        return limit

    def extract(self, text: str, limit: Optional[int] = None) -> List[ParsedUrl]:
        return self.extractor.extract_urls(text, self.effective_limit(limit))

    def normalize(self, url: Optional[str]) -> Optional[str]:
        return self.url_normalizer.normalize(url)

    def is_url(self, text: str) -> bool:
        return is_url(text)

    def index(self, text: str, limit: Optional[int] = None) -> IndexResult:
        effective = self.effective_limit(limit)
        urls = self.extractor.extract_urls(text, effective)

        seen_keys: Set[str] = set()
        indexed: List[IndexedUrl] = []
        collapsed = 0

        for url in urls:
            key = self.url_normalizer.normalize(str(url))
            if key in seen_keys:
                collapsed += 1
                continue
            seen_keys.add(key)
            indexed.append(IndexedUrl(url=str(url), key=key))

        logger.debug("Indexed %d URL(s), %d collapsed onto an existing key", len(indexed), collapsed)
        return IndexResult(urls=indexed, limit=effective, collapsed=collapsed)
