"""
Exceptions for the urlkey services.

Extraction entry points never let MalformedCandidate escape; it is raised by
the structured parser and absorbed by the collecting handler.
"""


class UrlKeyError(Exception):
    """Base exception for all urlkey errors"""
    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        self.code = code or 'URLKEY_ERROR'


class InvalidArgument(UrlKeyError, ValueError):
    """Raised before any scanning when a caller supplies a bad argument"""
    def __init__(self, message: str, code: str = 'INVALID_ARGUMENT'):
        super().__init__(message, code)


class MalformedCandidate(UrlKeyError, ValueError):
    """Raised when a grammar match cannot be parsed as a structured URL"""
    def __init__(self, url: str, reason: str = None):
        message = f"Malformed URL candidate: {url}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, 'MALFORMED_CANDIDATE')
        self.url = url
        self.reason = reason
