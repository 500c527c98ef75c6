"""Parsers for RAE HTML pages.

ChallengeParser – initial page (hidden form + challenge script)
ResultParser    – page returned after posting the solved form
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from ..config import settings
from ..errors import ChallengeExtractionError, ParserError, RaeError
from ..schemas import Candidate, DisambiguationResult, MatchEntry, RetrievalResult, SingleResult
from .challenge import ChallengeEvaluator, DukpyEvaluator, to_form_value

logger = logging.getLogger(__name__)

CHALLENGE_MARKER = "function challenge()"


class ChallengeParser:
    """Turn the initial RAE page into the form data expected by the POST."""

    # The challenge writes its result into the hidden field; we return it instead.
    _ASSIGNMENT_RE = re.compile(r"document\.forms\[0\]\.elements\[1\]\.value\s*=(?!=)\s*")

    def __init__(self, evaluator: ChallengeEvaluator | None = None) -> None:
        self.evaluator = evaluator or DukpyEvaluator()

    def parse(self, html: str) -> dict[str, str]:
        try:
            soup = BeautifulSoup(html, "lxml")
            code = self._solve(self._challenge_source(soup))

            form: dict[str, str] = {}
            for el in soup.select("body input"):
                name = el.get("name")
                if not name:
                    continue
                form[name] = el.get("value") or code
            return form
        except RaeError:
            raise
        except Exception as e:
            raise ParserError(str(e)) from e

    @staticmethod
    def _challenge_source(soup: BeautifulSoup) -> str:
        scripts = soup.find_all("script")
        if len(scripts) < 2:
            raise ChallengeExtractionError()
        script = scripts[1].string or ""
        pos = script.find(CHALLENGE_MARKER)
        if pos < 0:
            raise ChallengeExtractionError()
        return script[pos:]

    def _solve(self, source: str) -> str:
        snippet = "return " + self._ASSIGNMENT_RE.sub("return ", source, count=1)
        value = self.evaluator.evaluate(snippet)
        if value is None:
            raise ParserError("challenge returned no value")
        code = to_form_value(value)
        logger.debug("Challenge solved: %s", code)
        return code


class ResultParser:
    """Parse the definition page returned after the challenge is accepted.

    A list of anchors means the term matched several headwords; otherwise
    each paragraph is one sense of a single entry.
    """

    def __init__(self, fetch_action: str | None = None) -> None:
        self.fetch_action = fetch_action if fetch_action is not None else settings.rae_fetch_action

    def parse(self, html: str) -> RetrievalResult:
        try:
            soup = BeautifulSoup(html, "lxml")
            anchors = soup.select("body ul li a")
            if anchors:
                return DisambiguationResult(items=[
                    Candidate(text=a.get_text().strip(), id=self._entry_id(a.get("href")))
                    for a in anchors
                ])
            return SingleResult(items=[
                MatchEntry(text=p.get_text().strip()) for p in soup.select("body p")
            ])
        except RaeError:
            raise
        except Exception as e:
            raise ParserError(str(e)) from e

    def _entry_id(self, href: str | None) -> str:
        if not href:
            raise ParserError("disambiguation link without href")
        return href.replace(self.fetch_action, "", 1)
