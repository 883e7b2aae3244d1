"""Tests for the building blocks — normalizer, dictionaries, detectors, stopwords."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from clinical_scrubber import Category, Scrubber, ScrubberConfig, patterns
from clinical_scrubber.dictionary import build_dictionary, build_dictionary_regex
from clinical_scrubber.names import is_name_stopword
from clinical_scrubber.normalize import normalize_input, tidy_punctuation


# ── Normalizer ───────────────────────────────────────────────────────

def test_normalize_folds_typography():
    raw = "“Hello”  –  world’s\tbest • note"
    assert normalize_input(raw) == "\"Hello\" - world's best note"


def test_normalize_keeps_newlines():
    assert normalize_input("line one  \n\nline   two") == "line one \n\nline two"


def test_normalize_compatibility_forms():
    assert normalize_input("ﬁle ５５５") == "file 555"


def test_normalize_empty():
    assert normalize_input("") == ""


# ── Tidier ───────────────────────────────────────────────────────────

def test_tidy_removes_space_before_punctuation():
    assert tidy_punctuation("  Seen by [PERSON] , on [DATE] ..  ") == "Seen by [PERSON], on [DATE]."


def test_tidy_only_collapses_identical_marks():
    assert tidy_punctuation("Really?!") == "Really?!"
    assert tidy_punctuation("Wait;; what??") == "Wait; what?"


# ── Dictionary builder ───────────────────────────────────────────────

def test_build_dictionary_trims_dedupes_sorts():
    terms = build_dictionary(["Smith", " Lee "], ["Lee", "  ", "", "Zelda Fitzgerald"])
    assert terms == ["Lee", "Smith", "Zelda Fitzgerald"]


def test_empty_dictionary_has_no_pattern():
    assert build_dictionary_regex([]) is None


def test_dictionary_regex_is_flexible():
    regex = build_dictionary_regex(["Zelda Fitzgerald", "O'Brien"])
    assert regex.search("spoke with zelda   fitzgerald")
    assert regex.search("spoke with ZELDA\nFITZGERALD")
    assert regex.search("Mrs. O’Brien called")
    assert regex.search("Mrs. O'Brien called")


def test_dictionary_regex_whole_words_only():
    regex = build_dictionary_regex(["Lee"])
    assert regex.search("Dr. Lee") is not None
    assert regex.search("Leeward ward") is None
    assert regex.search("fleet") is None


def test_dictionary_regex_escapes_metacharacters():
    regex = build_dictionary_regex(["A+ Clinic (East)"])
    assert regex.search("referred to A+ Clinic (East) today")
    assert regex.search("AAA Clinic East") is None


# ── Detectors ────────────────────────────────────────────────────────

def test_email_pattern():
    found = patterns.email_pattern().findall("a.b+c@mail.example.org, x@y.io")
    assert found == ["a.b+c@mail.example.org", "x@y.io"]


@pytest.mark.parametrize("number", [
    "555-867-5309",
    "555.867.5309",
    "555 867 5309",
    "+1 555 867 5309",
    "1-555-867-5309",
    "555-867-5309 ext. 12",
    "555-867-5309 x204",
])
def test_phone_pattern_formats(number):
    m = patterns.phone_pattern().search(f"call {number} now")
    assert m is not None
    assert m.group() == number


def test_ssn_pattern_masked_and_plain():
    regex = patterns.ssn_pattern()
    assert regex.findall("SSN 123-45-6789 / xxx-xx-4321") == ["123-45-6789", "xxx-xx-4321"]
    assert regex.search("123-456-7890") is None


def test_mrn_label_pattern():
    regex = patterns.mrn_label_pattern()
    assert regex.search("MRN: 00123456 admitted").group() == "MRN: 00123456"
    assert regex.search("Acct # A-99812").group() == "Acct # A-99812"
    assert regex.search("patient id 77AB31").group() == "patient id 77AB31"


def test_mrn_label_accepts_letter_only_identifier():
    regex = patterns.mrn_label_pattern()
    assert regex.search("MRN: ABCDEF reviewed").group() == "MRN: ABCDEF"
    assert regex.search("Acct KXQZ-PLM").group() == "Acct KXQZ-PLM"


@pytest.mark.parametrize("text", [
    "Chart review completed",
    "Chart Reviewed by attending",
    "Account number on file",
    "Patient identified by wristband",
])
def test_mrn_label_skips_ordinary_words(text):
    assert patterns.mrn_label_pattern().search(text) is None


def test_mrn_bare_pattern_respects_bounds():
    regex = patterns.mrn_pattern(6, 8)
    assert regex.findall("12345 123456 12345678 123456789") == ["123456", "12345678"]


def test_zip_pattern():
    assert patterns.zip_pattern().findall("IL 60614 or 60614-1234") == ["60614", "60614-1234"]


def test_facility_pattern():
    regex = patterns.facility_pattern()
    assert regex.search("at Saint Mary Hospital today").group() == "Saint Mary Hospital"
    assert regex.search("from St. John's Medical Center.").group() == "St. John's Medical Center"
    assert regex.search("General appearance is well") is None


def test_address_pattern_with_unit():
    regex = patterns.address_pattern()
    assert regex.search("lives at 128 Elmwood Drive Apt 4B").group() == "128 Elmwood Drive Apt 4B"
    assert regex.search("42 Main St. Apt 3, Springfield").group() == "42 Main St. Apt 3"


def test_address_pattern_keeps_sentence_period():
    assert patterns.address_pattern().search("Moved to 9 Oak Ln.").group() == "9 Oak Ln"


def test_coordinate_pattern():
    regex = patterns.coordinate_pattern()
    assert regex.search("at 41.8781° N, 87.6298° W today")
    assert regex.search("at -33.86 S 151.21 E")
    assert regex.search("temp 38.5 C") is None


def test_coordinate_pattern_keeps_leading_minus():
    regex = patterns.coordinate_pattern()
    assert regex.search("site -41.8781 N, -87.6298 W").group() == "-41.8781 N, -87.6298 W"
    assert regex.search("grid 3-41.87 N 87.62 W").group() == "41.87 N 87.62 W"


@pytest.mark.parametrize("text", ["03/14/2024", "3/14", "03-14-24", "2024-03-14", "March 14, 2024", "Sept 3 2023"])
def test_date_pattern(text):
    assert patterns.date_pattern().search(f"on {text} seen").group() == text


def test_date_pattern_ignores_dose_ranges():
    assert patterns.date_pattern().search("take 1-2 tablets") is None


def test_relative_date_pattern():
    found = patterns.relative_date_pattern().findall(
        "Yesterday, last Monday, this morning and 2 weeks ago, not lastly."
    )
    assert found == ["Yesterday", "last Monday", "this morning", "2 weeks ago"]


def test_titled_name_pattern():
    regex = patterns.titled_name_pattern()
    assert regex.fullmatch("Rev. O'Connor")
    assert regex.search("seen by dr. Harmon").group() == "dr. Harmon"
    assert regex.search("Dr. harmon") is None


def test_first_last_pattern():
    regex = patterns.first_last_pattern()
    assert regex.search("David Harmon discussed").group() == "David Harmon"
    assert regex.search("mark the chart") is None


def test_capital_sequence_pattern():
    regex = patterns.capital_sequence_pattern()
    assert regex.fullmatch("Harriet Beecher Stowe")
    assert regex.search("Harriet\nStowe") is None


# ── Stopword filter ──────────────────────────────────────────────────

@pytest.mark.parametrize("candidate", ["ICU", "MRSA", "e. coli", " Sepsis ", "St. Jude", "st Mary"])
def test_stopwords_rejected(candidate):
    assert is_name_stopword(candidate)


@pytest.mark.parametrize("candidate", ["Harriet Stowe", "Stanley Kubrick", "ICU Team"])
def test_real_names_accepted(candidate):
    assert not is_name_stopword(candidate)


@pytest.mark.parametrize("template", ["{}", "Transferred to {} today.", "moved to the {}, then home."])
def test_stopword_rejected_in_any_context(template):
    person = Scrubber(ScrubberConfig(names=["ICU"])).detector(Category.PERSON)
    text = template.format("ICU")
    assert person.apply(text) == (text, 0)


@pytest.mark.parametrize("template", ["{}", "Seen by {} today.", "called {}, later."])
def test_real_name_redacted_in_any_context(template):
    person = Scrubber().detector(Category.PERSON)
    assert person.apply(template.format("Patel")) == (template.format("[PERSON]"), 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
