from __future__ import annotations

import re

_WORD_RE = re.compile(r"[a-zA-ZñÑáÁéÉíÍóÓúÚüÜ]+")


def is_a_word(term: object) -> bool:
    """True if *term* is a non-empty string of Spanish letters only."""
    return isinstance(term, str) and _WORD_RE.fullmatch(term) is not None
