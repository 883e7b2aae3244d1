"""Term dictionaries: built-in lists merged with user overrides.

A dictionary compiles to a single case-insensitive alternation.  Multi-word
terms tolerate any run of whitespace between words, and apostrophes match
either the plain or the typographic form.
"""

from __future__ import annotations
import logging
import re
from typing import Iterable

from .errors import PatternError

logger = logging.getLogger(__name__)

_APOSTROPHE_RE = re.compile("['’]")
_APOSTROPHE_CLASS = "[’']"


def build_dictionary(defaults: Iterable[str], overrides: Iterable[str] = ()) -> list[str]:
    """Merge defaults and overrides into a sorted, deduplicated term list.

    Entries are trimmed; empty and whitespace-only entries are dropped.
    """
    terms = {t.strip() for t in defaults}
    terms.update(t.strip() for t in overrides)
    terms.discard("")
    return sorted(terms)


def term_pattern(term: str) -> str:
    """Regex source for one dictionary term."""
    pieces = [_APOSTROPHE_RE.sub(_APOSTROPHE_CLASS, re.escape(p)) for p in term.split()]
    return r"\s+".join(pieces)


def build_dictionary_regex(terms: list[str]) -> re.Pattern[str] | None:
    """Compile *terms* into one whole-word, case-insensitive pattern.

    Returns None for an empty list so callers can skip the pass.
    """
    if not terms:
        return None
    source = r"(?<!\w)(?:" + "|".join(term_pattern(t) for t in terms) + r")(?!\w)"
    try:
        pattern = re.compile(source, re.IGNORECASE)
    except re.error as e:
        raise PatternError(f"failed to compile dictionary of {len(terms)} terms: {e}") from e
    logger.debug("compiled dictionary pattern with %d terms", len(terms))
    return pattern
