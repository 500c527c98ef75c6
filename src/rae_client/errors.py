"""Error taxonomy for RAE lookups."""

from __future__ import annotations


class RaeError(Exception):
    """Base class for every error raised by the client."""


class InvalidInputError(RaeError):
    """Raised when a search term is not a single word."""

    def __init__(self, term: object) -> None:
        self.term = term
        super().__init__(f'"{term}" word param provided must be a valid string')


class NotFoundError(RaeError):
    """Raised when either HTTP phase of a lookup does not return 200.

    RAE gives no richer signal, so a missing word and a failing service
    look the same. ``status_code`` is None for transport errors.
    """

    def __init__(self, query: str, status_code: int | None = None) -> None:
        self.query = query
        self.status_code = status_code
        super().__init__(f'"{query}" not found in RAE')


class LookupTimeoutError(NotFoundError):
    """Raised when a lookup phase times out."""


class ChallengeExtractionError(RaeError):
    """Raised when the challenge script cannot be located in the page."""

    def __init__(self, message: str = "No challenge SCRIPT found, RAE may have changed its page format") -> None:
        super().__init__(message)


class ParserError(RaeError):
    """Raised for any other fault while parsing a page or solving the challenge."""

    def __init__(self, message: str) -> None:
        super().__init__(f'"{message}" parser error found')
        self.reason = message
