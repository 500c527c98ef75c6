"""HTTP client implementing the two-phase RAE lookup."""

from __future__ import annotations

import asyncio
import logging

import httpx

from ..config import settings
from ..errors import LookupTimeoutError, NotFoundError
from ..schemas import RequestOptions, RetrievalResult
from .parser import ChallengeParser, ResultParser

logger = logging.getLogger(__name__)

_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "es-ES,es;q=0.9,en;q=0.5",
}
_FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


def to_form_data(form: dict[str, str]) -> str:
    """Serialize form fields as ``key=value`` pairs joined by ``&``, in order."""
    return "&".join(f"{key}={value}" for key, value in form.items())


class RaeHttpClient:
    """Async HTTP client: GET the challenge, POST the answer, parse the result."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        challenge_parser: ChallengeParser | None = None,
        result_parser: ResultParser | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        """Create the lookup client.

        *timeout* bounds each HTTP request and the challenge evaluation.
        The default headers and *user_agent* only apply to the httpx client
        created here; an injected *client* is used as given. If that client
        is closed, a default one replaces it on the next lookup.
        """
        self._client = client
        self._headers = {**_HEADERS, "User-Agent": user_agent or settings.scraper_user_agent}
        self._timeout = timeout if timeout is not None else settings.scraper_request_timeout
        self._challenge_parser = challenge_parser or ChallengeParser()
        self._result_parser = result_parser or ResultParser()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self._headers,
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    async def retrieve(self, query: str, options: RequestOptions) -> RetrievalResult:
        url = options.url_for(query)

        html = await self._send(query, "GET", url)
        form = await self._solve_challenge(query, html)
        logger.info("Challenge accepted for %r, posting %d fields", query, len(form))

        html = await self._send(query, "POST", url, content=to_form_data(form), headers=_FORM_HEADERS)
        return self._result_parser.parse(html)

    async def _solve_challenge(self, query: str, html: str) -> dict[str, str]:
        """Parse the challenge page in a worker thread, bounded by the timeout."""
        loop = asyncio.get_event_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(None, self._challenge_parser.parse, html),
                self._timeout,
            )
        except asyncio.TimeoutError as e:
            logger.warning("Challenge for %r not solved within %ss", query, self._timeout)
            raise LookupTimeoutError(query) from e

    async def _send(self, query: str, method: str, url: str, **kwargs) -> str:
        """Issue one request. Any non-200 outcome raises NotFoundError."""
        client = await self._get_client()
        try:
            resp = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning("%s %s timed out: %s", method, url, e)
            raise LookupTimeoutError(query) from e
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise NotFoundError(query) from e

        if resp.status_code != 200:
            logger.warning("HTTP %s for %s %s", resp.status_code, method, url)
            raise NotFoundError(query, resp.status_code)
        return resp.text

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
