from __future__ import annotations

import re
from typing import Optional

# This grammar intentionally matches some things that are not URLs we want to keep but which, if we didn't match
# them, would be matched in a way we don't want. For example, ftp://foo.bar is matched and rejected later so that
# the foo.bar part is never reported on its own.
# Hostname labels may contain _ (officially illegal, but common among Windows hosts).
# Hostname labels may not begin or end with - or _.

GTLDS = "com|edu|gov|int|mil|net|org|arpa|biz|info|name|pro|aero|coop|museum"

# Named capture groups for the protocol of each hostname shape, in match precedence order.
PROTOCOL_GROUPS = ("two_part_protocol", "multi_part_protocol", "qualified_protocol")

_ALPHA = "[a-zA-Z]"
_ALNUM = "[a-zA-Z0-9]"
_LABEL = _ALNUM + r"(?:[\w\-]*" + _ALNUM + ")?"

# Must not be preceded by a hostname character or . (partial match) or an @ (email address).
_HOST_START = r"(?<![\w\-.@])"

_IP_SEGMENT = "[0-9]{1,3}"


def _protocol(group: str, optional: bool = True) -> str:
    rule = f"(?P<{group}>{_ALPHA}+://)"
    return rule + "?" if optional else rule


def _ip_tail_guard() -> str:
    """
    A trailing 1-3 digit label only counts when the three labels before it are
    digit octets too. re needs fixed-width lookbehind, so every width of the
    two middle octets is spelled out.
    """
    options = [
        rf"(?<=[0-9]\.[0-9]{{{a}}}\.[0-9]{{{b}}}\.)"
        for a in (1, 2, 3)
        for b in (1, 2, 3)
    ]
    return "(?:" + "|".join(options) + ")"


# Hostname plus a top-level domain from a known set, since it's too easy for "foo.bar" to show up in text.
TWO_PART_NAME = (
    _protocol("two_part_protocol")
    + _HOST_START
    + _LABEL
    + r"\.(?:" + GTLDS + ")"
)

# Hostname, one or more intermediate labels, then a final label of exactly two letters (which leaves out some
# legal names but also e.g. "C.I.A"), a GTLD, or the last octet of an IP address.
THREE_OR_MORE_PART_NAME = (
    _protocol("multi_part_protocol")
    + _HOST_START
    + _LABEL
    + r"(?:\." + _LABEL + ")+"
    + r"\.(?:" + _ip_tail_guard() + _IP_SEGMENT + "|" + _ALPHA + "{2}|" + GTLDS + ")"
)

# Anything with an explicit protocol.
QUALIFIED_HOST = (
    _protocol("qualified_protocol", optional=False)
    + _LABEL
    + r"(?:\." + _LABEL + ")*"
    + r"\." + _ALNUM + "{2,}"
)

# See RFC 3986 for legal characters in each URL part; the names follow its character classes.
_UNRESERVED = r"a-zA-Z0-9\-_~"
_SUB_DELIMS = r"!$&'()*+,;="
_PUNCTUATION = r"!.,+;()'"

_PATH_CHAR = "[/" + _UNRESERVED + "$&*=%:@]"
_QUERY_CHAR = "[" + _UNRESERVED + "$&*=%:@/?]"

PORT = r"(?::\d+)?"

# Punctuation is allowed inside a path or query only when more URL characters follow it,
# so a sentence's closing "." or ")" stays out of the match.
PATH = r"(?:/(?:" + _PATH_CHAR + "|(?:[" + _PUNCTUATION + "]+" + _PATH_CHAR + "))*)?"
QUERY = r"(?:\?(?:" + _QUERY_CHAR + "|(?:[" + _PUNCTUATION + "]+" + _QUERY_CHAR + "))+)?"
FRAGMENT = r"(?:#(?:[\w\-]|[" + _SUB_DELIMS + r"%.~:@/?][\w\-])*)?"

# Next character is end-of-input or non-word, so matches don't run into following prose.
BOUNDARY = r"(?=$|[^\w])"

URL_PATTERN = re.compile(
    "(?:(?:" + TWO_PART_NAME + ")|(?:" + THREE_OR_MORE_PART_NAME + ")|(?:" + QUALIFIED_HOST + "))"
    + PORT
    + PATH
    + QUERY
    + FRAGMENT
    + BOUNDARY,
    re.IGNORECASE | re.ASCII,
)

PROTOCOL_PATTERN = re.compile(r"(?:ftp|https?)://", re.IGNORECASE)

_NOT_DIGIT_OR_DOT = re.compile(r"[^\d.]", re.ASCII)


def matched_protocol(match: re.Match) -> Optional[str]:
    """Protocol captured by whichever hostname shape fired, or None."""
    for group in PROTOCOL_GROUPS:
        protocol = match.group(group)
        if protocol is not None:
            return protocol
    return None


def is_supported_protocol(protocol: str) -> bool:
    return PROTOCOL_PATTERN.fullmatch(protocol) is not None


def contains_only_digits_and_dots(candidate: str) -> bool:
    """
    Filters out phone numbers and IP addresses given without a protocol
    (123.123.12.123 vs. http://123.123.12.123).
    """
    return _NOT_DIGIT_OR_DOT.search(candidate) is None
