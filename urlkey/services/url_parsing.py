from __future__ import annotations

from urllib.parse import urlsplit

from urlkey.domain.models import ParsedUrl
from urlkey.services.exceptions import MalformedCandidate


def parse_url(url_string: str) -> ParsedUrl:
    """
    Build a structured URL value from an extracted URL string.
    Raises MalformedCandidate when the string has no scheme or host, or an unusable port.
    """
    try:
        parts = urlsplit(url_string)
        port = parts.port
    except ValueError as e:
        raise MalformedCandidate(url_string, str(e)) from e

    if not parts.scheme:
        raise MalformedCandidate(url_string, "no scheme")
    if not parts.hostname:
        raise MalformedCandidate(url_string, "no host")

    return ParsedUrl(
        url=url_string,
        scheme=parts.scheme.lower(),
        host=parts.hostname,
        port=port,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
    )
