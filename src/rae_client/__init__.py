"""Async client for the Real Academia Española online dictionary."""

from .config import Settings
from .errors import (
    ChallengeExtractionError,
    InvalidInputError,
    LookupTimeoutError,
    NotFoundError,
    ParserError,
    RaeError,
)
from .schemas import Candidate, DisambiguationResult, MatchEntry, RequestOptions, RetrievalResult, SingleResult
from .scraper.rae import DictionaryClient, RaeClient


def create_client(settings: Settings | None = None) -> DictionaryClient:
    """Build the HTTP-backed dictionary client."""
    return RaeClient(settings)


__all__ = [
    "Candidate",
    "ChallengeExtractionError",
    "DictionaryClient",
    "DisambiguationResult",
    "InvalidInputError",
    "LookupTimeoutError",
    "MatchEntry",
    "NotFoundError",
    "ParserError",
    "RaeClient",
    "RaeError",
    "RequestOptions",
    "RetrievalResult",
    "SingleResult",
    "Settings",
    "create_client",
]
