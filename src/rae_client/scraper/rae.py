"""RAE dictionary client facade."""

from __future__ import annotations

import abc
import logging

from ..config import Settings, settings as default_settings
from ..errors import InvalidInputError
from ..schemas import RequestOptions, RetrievalResult
from ..validators import is_a_word
from .client import RaeHttpClient
from .parser import ResultParser

logger = logging.getLogger(__name__)


class DictionaryClient(abc.ABC):
    """Operations offered to callers, independent of the transport."""

    @abc.abstractmethod
    async def search(self, term: str) -> RetrievalResult:
        ...

    @abc.abstractmethod
    async def fetch_by_id(self, entry_id: str) -> RetrievalResult:
        ...

    async def close(self) -> None:
        pass

    async def __aenter__(self) -> DictionaryClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


class RaeClient(DictionaryClient):
    """Look up words on dle.rae.es over HTTP."""

    def __init__(self, settings: Settings | None = None, http: RaeHttpClient | None = None) -> None:
        cfg = settings or default_settings
        self._search_options = RequestOptions(endpoint=cfg.rae_endpoint, action=cfg.rae_search_action)
        self._fetch_options = RequestOptions(endpoint=cfg.rae_endpoint, action=cfg.rae_fetch_action)
        self.http = http or RaeHttpClient(
            result_parser=ResultParser(fetch_action=cfg.rae_fetch_action),
            timeout=cfg.scraper_request_timeout,
            user_agent=cfg.scraper_user_agent,
        )

    async def search(self, term: str) -> RetrievalResult:
        if not is_a_word(term):
            raise InvalidInputError(term)
        logger.debug("Searching RAE for %r", term)
        return await self.http.retrieve(term, self._search_options)

    async def fetch_by_id(self, entry_id: str) -> RetrievalResult:
        """Fetch an entry by the id of a disambiguation candidate."""
        logger.debug("Fetching RAE entry %s", entry_id)
        return await self.http.retrieve(entry_id, self._fetch_options)

    async def close(self) -> None:
        await self.http.close()
