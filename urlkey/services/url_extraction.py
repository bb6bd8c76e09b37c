from __future__ import annotations

import logging
from typing import List, Optional, Set

from urlkey.domain.models import ParsedUrl, UrlMatch
from urlkey.services.exceptions import InvalidArgument, MalformedCandidate
from urlkey.services.url_grammar import (
    URL_PATTERN,
    contains_only_digits_and_dots,
    is_supported_protocol,
    matched_protocol,
)
from urlkey.services.url_parsing import parse_url

logger = logging.getLogger(__name__)

ACCEPTED_SCHEMES = {"http", "https"}


class UrlMatchHandler:
    """Sink interface."""
    def match_url(self, url_string: str, start: int, end: int) -> bool:
        """
        Called for every URL string found in the text.

        url_string: the matched URL (protocol part added or lower-cased)
        start, end: offsets of the matched span in the scanned text
        Returns True when more matches are wanted.
        """
        raise NotImplementedError


class UrlCollectingHandler(UrlMatchHandler):
    """
    Default sink: deduplicates, parses, and keeps http(s) URLs until the limit is reached.
    ftp URLs are counted against the limit but never kept.
    """

    def __init__(self, limit: Optional[int] = None):
        if limit is not None and limit <= 0:
            raise InvalidArgument(f"Limit passed in must be greater than 0: {limit}", code="INVALID_LIMIT")
        self.limit = limit
        self.count = 0
        self._urls: List[ParsedUrl] = []
        self._url_strings: Set[str] = set()

    def match_url(self, url_string: str, start: int, end: int) -> bool:
        if url_string in self._url_strings:
            return self._take_next()

        self._url_strings.add(url_string)

        try:
            url = parse_url(url_string)
        except MalformedCandidate:
            logger.warning("Unable to construct URL from extracted url: %s", url_string)
            return self._take_next()

        if self._is_accepted(url):
            self._urls.append(url)

        self.count += 1
        return self._take_next()

    @staticmethod
    def _is_accepted(url: ParsedUrl) -> bool:
        return url.scheme in ACCEPTED_SCHEMES

    def _take_next(self) -> bool:
        return self.limit is None or self.count < self.limit

    def get_urls(self) -> List[ParsedUrl]:
        return list(self._urls)


class UrlMatchRecorder(UrlMatchHandler):
    """Keeps every match in order and never asks to stop."""

    def __init__(self):
        self.matches: List[UrlMatch] = []

    def match_url(self, url_string: str, start: int, end: int) -> bool:
        self.matches.append(UrlMatch(url=url_string, start=start, end=end))
        return True


class UrlExtractor:
    """
    Scans free text with the URL grammar and reports accepted matches to a handler.
    Holds no state; one instance can be shared across threads.
    """

    def find_urls(self, content: str, handler: UrlMatchHandler) -> None:
        for m in URL_PATTERN.finditer(content or ""):
            url_string = m.group()
            if contains_only_digits_and_dots(url_string):
                continue

            protocol = matched_protocol(m)
            if protocol is None:
                candidate = "http://" + url_string
            else:
                if not is_supported_protocol(protocol):
                    continue
                candidate = protocol.lower() + url_string[len(protocol):]

            # A trailing "/" resolves to the same resource; dropping it means fewer dupes.
            if candidate.endswith("/"):
                candidate = candidate[:-1]

            if not handler.match_url(candidate, m.start(), m.end()):
                break

    def list_matches(self, content: str) -> List[UrlMatch]:
        """Every accepted match with its offsets, duplicates included."""
        recorder = UrlMatchRecorder()
        self.find_urls(content, recorder)
        return recorder.matches

    def extract_urls(self, content: str, limit: Optional[int] = None) -> List[ParsedUrl]:
        handler = UrlCollectingHandler(limit)
        self.find_urls(content, handler)
        return handler.get_urls()


_default_extractor = UrlExtractor()


def find_urls(content: str, handler: UrlMatchHandler) -> None:
    _default_extractor.find_urls(content, handler)


def extract_urls(content: str, limit: Optional[int] = None) -> List[ParsedUrl]:
    return _default_extractor.extract_urls(content, limit)


def extract_url_strings(content: str, limit: Optional[int] = None) -> List[str]:
    return [str(u) for u in extract_urls(content, limit)]


def is_url(url_string: str) -> bool:
    """
    True when extraction with a limit of 1 finds at least one accepted URL in the string.
    Uses the full extraction pipeline so both entry points accept exactly the same things.
    """
    return bool(extract_urls(url_string, limit=1))
