"""Scrubber — the main API.  An ordered cascade of regex detectors.

Usage:
    from clinical_scrubber import Scrubber, ScrubberConfig, Category

    scrubber = Scrubber(ScrubberConfig(names=["Zelda Fitzgerald"]))

    text, stats = scrubber.scrub("Seen by Dr. Harmon on 03/14/2024.")
    print(text)            # "Seen by [PERSON] on [DATE]."
    print(stats.total)     # 2

    # Leave phone numbers in place
    text, stats = scrubber.scrub(note, skip={Category.PHONE})

    # Where each category would match, without replacing anything
    spans = scrubber.find(note, {Category.EMAIL, Category.PERSON})

Detectors run in a fixed order and each one sees the output of the
previous pass, so narrow, high-confidence categories (email, phone, SSN)
go first and the broad capitalized-word heuristics go last.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable

from . import patterns
from .config import ScrubberConfig
from .dictionary import build_dictionary, build_dictionary_regex
from .names import DEFAULT_NAMES, accept_name
from .normalize import normalize_input, tidy_punctuation
from .types import TOKENS, Category, ScrubStats

logger = logging.getLogger(__name__)


def replace_all(pattern: re.Pattern[str], text: str, token: str) -> tuple[str, int]:
    """Replace every match of *pattern* with *token*; return (text, count)."""
    return pattern.subn(lambda _m: token, text)


def replace_filtered(
    pattern: re.Pattern[str],
    text: str,
    token: str,
    accept: Callable[[str], bool],
) -> tuple[str, int]:
    """Like replace_all, but matches rejected by *accept* are kept verbatim."""
    count = 0

    def _sub(m: re.Match[str]) -> str:
        nonlocal count
        if accept(m.group()):
            count += 1
            return token
        return m.group()

    return pattern.sub(_sub, text), count


@dataclass(frozen=True, slots=True)
class Detector:
    """Compiled patterns for one category, applied in sequence."""
    category: Category
    token: str
    patterns: tuple[re.Pattern[str], ...]
    accept: Callable[[str], bool] | None = None

    def apply(self, text: str) -> tuple[str, int]:
        total = 0
        for pattern in self.patterns:
            if self.accept is None:
                text, n = replace_all(pattern, text, self.token)
            else:
                text, n = replace_filtered(pattern, text, self.token, self.accept)
            total += n
        return text, total

    def spans(self, text: str) -> list[tuple[int, int]]:
        """Accepted match spans of each pattern against *text* (no replacement)."""
        found: list[tuple[int, int]] = []
        for pattern in self.patterns:
            for m in pattern.finditer(text):
                if self.accept is None or self.accept(m.group()):
                    found.append(m.span())
        return sorted(found)


class Scrubber:
    """PHI scrubber for free-text clinical notes.

    All patterns are compiled in the constructor, so a bad configuration
    fails here rather than on first use.  Instances hold no per-call state
    and can be shared between threads.
    """

    def __init__(self, config: ScrubberConfig | None = None) -> None:
        self.config = config or ScrubberConfig()
        mrn_min, mrn_max = self.config.mrn_range()

        self.facility_terms = build_dictionary(patterns.DEFAULT_FACILITY_TERMS, self.config.keywords)
        self.name_terms = build_dictionary(DEFAULT_NAMES, self.config.names)

        def _detector(category, *compiled, accept=None) -> Detector:
            return Detector(
                category=category,
                token=TOKENS[category],
                patterns=tuple(p for p in compiled if p is not None),
                accept=accept,
            )

        self.detectors: tuple[Detector, ...] = (
            _detector(Category.EMAIL, patterns.email_pattern()),
            _detector(Category.PHONE, patterns.phone_pattern()),
            _detector(Category.SSN, patterns.ssn_pattern()),
            # Labeled form first so its digits aren't split up by the bare form
            _detector(
                Category.MRN,
                patterns.mrn_label_pattern(),
                patterns.mrn_pattern(mrn_min, mrn_max),
            ),
            _detector(Category.ZIP, patterns.zip_pattern()),
            _detector(
                Category.FACILITY,
                patterns.facility_pattern(),
                build_dictionary_regex(self.facility_terms),
            ),
            _detector(Category.ADDRESS, patterns.address_pattern()),
            _detector(Category.COORDINATE, patterns.coordinate_pattern()),
            _detector(
                Category.PERSON,
                build_dictionary_regex(self.name_terms),
                patterns.titled_name_pattern(),
                patterns.first_last_pattern(),
                patterns.capital_sequence_pattern(),
                accept=accept_name,
            ),
            _detector(Category.DATE, patterns.date_pattern()),
            _detector(Category.RELATIVE_DATE, patterns.relative_date_pattern()),
        )
        logger.debug(
            "scrubber ready: %d name terms, %d facility terms, MRN length %d-%d",
            len(self.name_terms), len(self.facility_terms), mrn_min, mrn_max,
        )

    def detector(self, category: Category) -> Detector | None:
        for d in self.detectors:
            if d.category is category:
                return d
        return None

    def find(
        self,
        text: str,
        categories: Iterable[Category] | None = None,
    ) -> dict[Category, list[tuple[int, int]]]:
        """Accepted spans per category in the normalized *text*.

        Each detector runs independently on the same input, so spans of
        different categories may overlap.  Categories without a detector
        map to an empty list.
        """
        normalized = normalize_input(text)
        wanted = [d.category for d in self.detectors] if categories is None else list(categories)
        found: dict[Category, list[tuple[int, int]]] = {}
        for category in wanted:
            detector = self.detector(category)
            found[category] = detector.spans(normalized) if detector else []
        return found

    def scrub(self, text: str, skip: Iterable[Category] = ()) -> tuple[str, ScrubStats]:
        """Redact PHI from *text*.

        Returns the scrubbed text and a fresh ScrubStats.  Categories in
        *skip* are neither detected nor counted.
        """
        skipped = frozenset(skip)
        stats = ScrubStats()
        output = normalize_input(text)

        for detector in self.detectors:
            if detector.category in skipped:
                continue
            output, count = detector.apply(output)
            stats.add(detector.category, count)

        output = tidy_punctuation(output)
        logger.debug("scrubbed %d chars, %d redactions", len(text), stats.total)
        return output, stats

