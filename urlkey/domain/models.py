######## models.py
########

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class UrlMatch:
    url: str        # emitted URL string (protocol inferred / lower-cased, trailing "/" stripped)
    start: int      # offsets of the span matched in the scanned text
    end: int


@dataclass(frozen=True)
class ParsedUrl:
    url: str
    scheme: str
    host: str
    port: Optional[int]
    path: str
    query: str
    fragment: str

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True)
class IndexedUrl:
    url: str
    key: str        # canonical form used as an index key


@dataclass(frozen=True)
class IndexResult:
    urls: List[IndexedUrl] = field(default_factory=list)
    limit: Optional[int] = None
    collapsed: int = 0      # extracted URLs dropped because their key was already indexed
