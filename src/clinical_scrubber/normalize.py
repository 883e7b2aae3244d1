"""Text clean-up that runs before and after the detector passes.

``normalize_input`` folds typographic variants so the detectors only have
to deal with plain ASCII punctuation.  ``tidy_punctuation`` repairs the
spacing that placeholder substitution leaves behind.
"""

from __future__ import annotations
import re
import unicodedata

_FOLD = str.maketrans({
    "‘": "'", "’": "'", "‛": "'", "′": "'",
    "“": '"', "”": '"', "″": '"',
    "–": "-", "—": "-", "−": "-",
    # bullets and interpuncts
    "•": " ", "·": " ", "‧": " ", "⁃": " ", "・": " ",
})

_MULTISPACE_RE = re.compile(r"[^\S\r\n]+")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,;:!?])")
_DUP_PUNCT_RE = re.compile(r"([.,;:!?])\1+")


def normalize_input(text: str) -> str:
    """NFKC-normalize, fold quotes/dashes/bullets, collapse horizontal space.

    Newlines are kept so line structure survives.
    """
    text = unicodedata.normalize("NFKC", text)
    text = text.translate(_FOLD)
    return _MULTISPACE_RE.sub(" ", text)


def tidy_punctuation(text: str) -> str:
    """Drop space before punctuation, squash repeated marks, strip ends."""
    text = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    text = _DUP_PUNCT_RE.sub(r"\1", text)
    return text.strip()
