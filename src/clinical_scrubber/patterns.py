"""Regex builders for every detector.

Each builder returns a freshly compiled pattern; the Scrubber calls them once
at construction and keeps the results.  Keyword alternations (titles,
street types, month names...) are case-insensitive, while the "capitalized
word" slots stay case-sensitive so lowercase prose is left alone.
"""

from __future__ import annotations
import re

from .errors import PatternError
from .names import COMMON_FIRST_NAMES, TITLES

# Frequent facility phrases matched through the facility dictionary
DEFAULT_FACILITY_TERMS: tuple[str, ...] = (
    "General Hospital",
    "Medical Center",
    "Children's Hospital",
    "Urgent Care",
    "Cardiology Clinic",
    "Dialysis Center",
    "Health System",
    "Cancer Institute",
    "Family Practice",
    "Primary Care",
    "Internal Medicine",
)

# A capitalized word made of letters and apostrophes/hyphens
_NAME_WORD = r"[A-Z](?:[^\W\d_]|[’'-])+"
_CAPITAL_WORD = r"[A-Z](?:[^\W\d_]|[’'])+"
# Person names never span a line break
_GAP = r"[^\S\r\n]+"


def _compile(name: str, source: str, flags: int = 0) -> re.Pattern[str]:
    try:
        return re.compile(source, flags)
    except re.error as e:
        raise PatternError(f"failed to compile {name} pattern: {e}") from e


def email_pattern() -> re.Pattern[str]:
    return _compile("email", r"\b[\w.+%-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")


def phone_pattern() -> re.Pattern[str]:
    return _compile("phone", r"""
        (?<!\w)(?:\+?1[-.\s•·]?)?
        (?:\(?\d{3}\)?|\d{3})[-.\s•·]?
        \d{3}[-.\s•·]?\d{4}
        (?:\s*(?:x|ext\.?|extension)\s*\d{1,6})?
        \b
    """, re.VERBOSE | re.IGNORECASE)


def ssn_pattern() -> re.Pattern[str]:
    return _compile("ssn", r"\b(?:\d{3}-\d{2}-\d{4}|xxx-xx-\d{4})\b", re.IGNORECASE)


MRN_LABEL_STOPWORDS = (
    "review", "reviewed", "note", "notes", "number", "holder", "balance",
    "information", "summary", "history", "audit", "status", "access",
)


def mrn_label_pattern() -> re.Pattern[str]:
    """Labeled identifiers such as "MRN: 00123456" or "Acct # A-99812".

    Ordinary words after a label ("Chart review") are not identifiers.
    """
    stopwords = "|".join(MRN_LABEL_STOPWORDS)
    return _compile("mrn label", rf"""
        \b(?i:MRN|Acct|Account|Patient\s*ID|Chart)(?![a-z])
        \s*[:#]?\s*-?\s*
        (?!(?i:{stopwords})\b)[A-Za-z0-9-]{{4,}}\b
    """, re.VERBOSE)


def mrn_pattern(min_length: int, max_length: int) -> re.Pattern[str]:
    return _compile("mrn", rf"\b\d{{{min_length},{max_length}}}\b")


def zip_pattern() -> re.Pattern[str]:
    return _compile("zip", r"\b\d{5}(?:-\d{4})?\b")


def facility_pattern() -> re.Pattern[str]:
    return _compile("facility", r"""
        \b(?i:St\.(?!\s+(?:Apt|Unit|\#)\b)|Saint|Mt\.|Mount|Univ\.|University|Memorial|Children'?s|General|County)\s+
        [A-Z][\w’'.-]+(?:\s+[A-Z][\w’'.-]+){0,4}
        (?:\s+(?i:Hospital|Med(?:ical)?\s*Center|Clinic|Health(?:care)?|Infirmary))?
        \b
    """, re.VERBOSE)


def address_pattern() -> re.Pattern[str]:
    return _compile("address", r"""
        \b\d{1,6}\s+(?:[A-Z][\w.-]*\s+){1,5}
        (?i:St|Street|Ave(?:nue)?|Rd|Road|Dr|Drive|Blvd|Boulevard|Ln|Lane|Ct|Court|Pl|Place|Ter(?:race)?|Way)\b
        (?:\.?\s*(?i:Apt|Unit|\#)\s*\w+)?
    """, re.VERBOSE)


def coordinate_pattern() -> re.Pattern[str]:
    return _compile("coordinate", r"""
        (?<![\w.])-?\d{1,3}\.\d+\s*[°ºo]?\s*[NS]\b
        [,\s]*
        -?\d{1,3}\.\d+\s*[°ºo]?\s*[EW]\b
    """, re.VERBOSE | re.IGNORECASE)


def titled_name_pattern() -> re.Pattern[str]:
    titles = "|".join(re.escape(t) for t in TITLES)
    return _compile(
        "titled name",
        rf"\b(?i:{titles})\.?{_GAP}{_NAME_WORD}(?:{_GAP}{_NAME_WORD})?",
    )


def first_last_pattern() -> re.Pattern[str]:
    firsts = "|".join(re.escape(n) for n in COMMON_FIRST_NAMES)
    return _compile(
        "first/last name",
        rf"\b(?:{firsts}){_GAP}{_NAME_WORD}(?:{_GAP}{_NAME_WORD})?",
    )


def capital_sequence_pattern() -> re.Pattern[str]:
    return _compile(
        "capitalized sequence",
        rf"\b{_CAPITAL_WORD}{_GAP}{_CAPITAL_WORD}(?:{_GAP}{_CAPITAL_WORD})?\b",
    )


def date_pattern() -> re.Pattern[str]:
    return _compile("date", r"""
        \b(?:
            \d{1,2}/\d{1,2}(?:/\d{2,4})?
          | \d{1,2}-\d{1,2}-\d{2,4}
          | \d{4}-\d{2}-\d{2}
          | (?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Sept|Oct|Nov|Dec)[a-z]*\s+\d{1,2},?\s+\d{2,4}
        )\b
    """, re.VERBOSE | re.IGNORECASE)


def relative_date_pattern() -> re.Pattern[str]:
    return _compile("relative date", r"""
        \b(?:
            yesterday|today|tomorrow
          | last\s+(?:night|week|month|year|Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)
          | this\s+(?:morning|afternoon|evening|week|month)
          | \d+\s+(?:days?|weeks?|months?|years?)\s+ago
        )\b
    """, re.VERBOSE | re.IGNORECASE)
