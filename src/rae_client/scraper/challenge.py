"""Sandboxed evaluation of the RAE anti-automation challenge.

The initial RAE page embeds a ``challenge()`` function that computes a
token and writes it into the hidden form. The parser rewrites that write
into a ``return`` and hands the snippet to an evaluator.
"""

from __future__ import annotations

from typing import Protocol

import dukpy


class ChallengeEvaluator(Protocol):
    def evaluate(self, snippet: str) -> object:
        """Run *snippet* as a function body and return the challenge code."""
        ...


class DukpyEvaluator:
    """Evaluate challenges in a throwaway Duktape heap.

    Every call gets a fresh interpreter with no host bindings, so the
    snippet sees neither the page nor any previous challenge.
    """

    def evaluate(self, snippet: str) -> object:
        # snippet returns the challenge function; call it for the code
        return dukpy.evaljs(f"(function () {{\n{snippet}\n}})()()")


def to_form_value(value: object) -> str:
    """Render an evaluated value the way the browser would stringify it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    # JS switches to exponent notation from 1e21, as does str(float)
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
