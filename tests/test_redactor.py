"""Tests for the redaction engine — patterns, scrubber, classifier, lexical filter."""

import dataclasses
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from form16_redactor import Redactor, FilterResult, build_pattern_set
from form16_redactor.classifier import classify_lines
from form16_redactor.lexical import redact_unknown_words, tokenize, filter_words
from form16_redactor.scrubber import scrub_tokens

PATTERNS = build_pattern_set()


def _pii(text):
    return Redactor(PATTERNS).filter_pii(text)


# ── Pattern registry ─────────────────────────────────────────────────

def test_token_rule_order():
    assert [r.category for r in PATTERNS.token_rules] == [
        "Phone Numbers", "Email Addresses", "Aadhaar Numbers",
        "PAN Numbers", "GST Numbers", "TAN Numbers",
    ]


def test_line_rule_priority():
    assert [r.category for r in PATTERNS.line_rules] == ["Organizations", "Addresses"]


def test_pattern_set_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        PATTERNS.token_rules = ()


def test_build_is_deterministic():
    other = build_pattern_set()
    assert [r.pattern.pattern for r in other.token_rules] == \
        [r.pattern.pattern for r in PATTERNS.token_rules]


def test_lookup_by_category():
    assert PATTERNS.token_rule("PAN Numbers").placeholder == "[PAN_REDACTED]"
    assert PATTERNS.line_rule("Addresses").placeholder == "[ADDRESS_REDACTED]"
    with pytest.raises(KeyError):
        PATTERNS.token_rule("Addresses")


def test_org_rule_matches_suffixes():
    org = PATTERNS.line_rule("Organizations")
    for line in ["Acme Pvt. Ltd.", "Infosys Limited", "Foo LLP",
                 "Bar Inc", "Baz corporation", "Tata Consultancy Services Ltd"]:
        assert org.matches(line), line
    assert not org.matches("Gross salary as per provisions")


def test_address_rule_matches_cities_and_keywords():
    addr = PATTERNS.line_rule("Addresses")
    assert addr.matches("Vile Parle East")
    assert addr.matches("tamil nadu 600001")
    assert addr.matches("Opp. City Mall")
    assert addr.matches("Plot 12")
    assert not addr.matches("Total income chargeable")


# ── Token-level scrubber ─────────────────────────────────────────────

def test_phone_and_email():
    result = _pii("Contact: 9876543210, user@example.com")
    assert result.cleaned_text == "Contact: [PHONE_REDACTED], [EMAIL_REDACTED]"
    assert result.removed_categories == ["Phone Numbers", "Email Addresses"]


@pytest.mark.parametrize("text", [
    "Mobile 9876543210",
    "Mobile +91 9876543210",
    "Mobile +91-9876543210",
    "Mobile 919876543210",
])
def test_phone_formats(text):
    result = scrub_tokens(text, PATTERNS)
    assert result.cleaned_text == "Mobile [PHONE_REDACTED]"
    assert "Phone Numbers" in result.removed_categories


def test_phone_does_not_start_with_low_digit():
    result = scrub_tokens("Ref 5876543210", PATTERNS)
    assert result.cleaned_text == "Ref 5876543210"
    assert result.removed_categories == []


def test_phone_never_consumes_line_break():
    result = scrub_tokens("Mobile:\n9876543210", PATTERNS)
    assert result.cleaned_text == "Mobile:\n[PHONE_REDACTED]"


def test_every_match_replaced():
    result = scrub_tokens("a@x.com, b@y.org and c@z.in", PATTERNS)
    assert result.cleaned_text.count("[EMAIL_REDACTED]") == 3
    assert result.removed_categories == ["Email Addresses"]


def test_aadhaar_grouped_and_plain():
    result = scrub_tokens("Aadhaar: 2345 6789 0123 / 234567890123", PATTERNS)
    assert result.cleaned_text == "Aadhaar: [AADHAAR_REDACTED] / [AADHAAR_REDACTED]"
    assert result.removed_categories == ["Aadhaar Numbers"]


def test_pan():
    result = _pii("ABCPQ1234L")
    assert result.cleaned_text == "[PAN_REDACTED]"
    assert "PAN Numbers" in result.removed_categories


def test_pan_is_case_sensitive():
    result = scrub_tokens("abcpq1234l", PATTERNS)
    assert result.cleaned_text == "abcpq1234l"


def test_gstin_wins_over_embedded_pan():
    # The PAN core of a GSTIN is glued to digits on both sides, so the PAN
    # pass skips it and the GST pass takes the whole identifier.
    result = scrub_tokens("GSTIN: 27ABCPQ1234L1Z5", PATTERNS)
    assert result.cleaned_text == "GSTIN: [GST_REDACTED]"
    assert result.removed_categories == ["GST Numbers"]


def test_tan_case_insensitive():
    result = scrub_tokens("TAN: MUMX12345B and mumx12345b", PATTERNS)
    assert result.cleaned_text == "TAN: [TAN_REDACTED] and [TAN_REDACTED]"
    assert result.removed_categories == ["TAN Numbers"]


def test_categories_follow_rule_order():
    result = scrub_tokens("MUMX12345B ABCPQ1234L x@y.com 9876543210", PATTERNS)
    assert result.removed_categories == [
        "Phone Numbers", "Email Addresses", "PAN Numbers", "TAN Numbers",
    ]


def test_no_pii_leaves_text_alone():
    result = scrub_tokens("Gross salary 1,20,000.00", PATTERNS)
    assert result.cleaned_text == "Gross salary 1,20,000.00"
    assert result.removed_categories == []
    assert result.retained_fields == {}


# ── Line-level classifier ────────────────────────────────────────────

def test_address_line():
    result = _pii("123, MG Road, Bangalore")
    assert result.cleaned_text == "[ADDRESS_REDACTED]"
    assert result.removed_categories == ["Addresses"]


def test_org_beats_address():
    result = _pii("Bangalore Road Services Pvt Ltd")
    assert result.cleaned_text == "[ORG_REDACTED]"
    assert result.removed_categories == ["Organizations"]


def test_whole_original_line_replaced():
    result = classify_lines(FilterResult("head\n    Sector 5, Noida   \ntail"), PATTERNS)
    assert result.cleaned_text == "head\n[ADDRESS_REDACTED]\ntail"


def test_line_categories_reported_addresses_first():
    result = classify_lines(FilterResult("Acme Ltd\nMumbai 400001"), PATTERNS)
    assert result.cleaned_text == "[ORG_REDACTED]\n[ADDRESS_REDACTED]"
    assert result.removed_categories == ["Addresses", "Organizations"]


def test_line_categories_not_duplicated():
    result = FilterResult("Near temple", removed_categories=["Addresses"])
    result = classify_lines(result, PATTERNS)
    assert result.removed_categories == ["Addresses"]


def test_blank_lines_pass_through():
    result = classify_lines(FilterResult("\n\n  \n"), PATTERNS)
    assert result.cleaned_text == "\n\n  \n"
    assert result.removed_categories == []


# ── Lexical filter ───────────────────────────────────────────────────

def test_unknown_word_redacted():
    text, words = redact_unknown_words("The cat satt", {"the", "cat", "sat"})
    assert text == "The cat [WORD_REDACTED]"
    assert words == ["satt"]


def test_short_word_boundary():
    text, words = redact_unknown_words("xqz xqzw", set())
    assert text == "xqz [WORD_REDACTED]"
    assert words == ["xqzw"]


def test_dictionary_lookup_is_case_insensitive():
    text, words = redact_unknown_words("SALARY Salary salary", {"salary"})
    assert text == "SALARY Salary salary"
    assert words == []


def test_redacted_words_are_unique_lowercase():
    text, words = redact_unknown_words("Ramesh RAMESH ramesh Kumarr", set())
    assert text.count("[WORD_REDACTED]") == 4
    assert words == ["kumarr", "ramesh"]


def test_alphanumerics_are_not_tokens():
    text, words = redact_unknown_words("Form16 ABC123XYZ FY2025", set())
    assert text == "Form16 ABC123XYZ FY2025"
    assert words == []


def test_placeholders_survive():
    text = "[PHONE_REDACTED] [WORD_REDACTED] [ORG_REDACTED]"
    assert redact_unknown_words(text, set()) == (text, [])


def test_tokenize():
    assert list(tokenize("Form16 is nice, O'Brien [PAN_REDACTED]")) == \
        ["is", "nice", "O", "Brien"]


def test_filter_words_records_category_only_on_redaction():
    result = filter_words(FilterResult("Gross salary"), {"gross", "salary"})
    assert result.removed_categories == []
    result = filter_words(FilterResult("Gross salaryy"), {"gross", "salary"})
    assert result.cleaned_text == "Gross [WORD_REDACTED]"
    assert result.removed_categories == ["Non-Dictionary Words"]


# ── Full pipeline ────────────────────────────────────────────────────

FORM16 = (
    "Employee: Ramesh Kumarr\n"
    "PAN: ABCPQ1234L\n"
    "Phone 9876543210\n"
    "Acme Pvt Ltd\n"
    "Flat 4, MG Road\n"
    "Gross salary 500000\n"
)
WORDS = {"employee", "phone", "gross", "salary"}


def test_full_pipeline():
    result = Redactor().redact(FORM16, WORDS)
    assert result.cleaned_text == (
        "Employee: [WORD_REDACTED] [WORD_REDACTED]\n"
        "PAN: [PAN_REDACTED]\n"
        "Phone [PHONE_REDACTED]\n"
        "[ORG_REDACTED]\n"
        "[ADDRESS_REDACTED]\n"
        "Gross salary 500000\n"
    )
    assert result.removed_categories == [
        "Phone Numbers", "PAN Numbers", "Addresses", "Organizations",
        "Non-Dictionary Words",
    ]
    assert result.retained_fields == {}


def test_pipeline_is_idempotent():
    redactor = Redactor()
    once = redactor.redact(FORM16, WORDS)
    twice = redactor.redact(once.cleaned_text, WORDS)
    assert twice.cleaned_text == once.cleaned_text
    assert twice.removed_categories == []


def test_line_count_preserved_by_every_stage():
    text = FORM16 + "\n  Mobile:\n9876543210\nMumbai\n\nABCD12345E\n"
    expected = text.count("\n")
    scrubbed = scrub_tokens(text, PATTERNS)
    assert scrubbed.cleaned_text.count("\n") == expected
    classified = classify_lines(scrubbed, PATTERNS)
    assert classified.cleaned_text.count("\n") == expected
    filtered = filter_words(classified, WORDS)
    assert filtered.cleaned_text.count("\n") == expected


def test_stages_return_new_results():
    scrubbed = scrub_tokens("Acme Ltd\nRamesh", PATTERNS)
    classified = classify_lines(scrubbed, PATTERNS)
    filtered = filter_words(classified, set())

    assert scrubbed.cleaned_text == "Acme Ltd\nRamesh"
    assert scrubbed.removed_categories == []
    assert classified is not scrubbed
    assert classified.cleaned_text == "[ORG_REDACTED]\nRamesh"
    assert classified.removed_categories == ["Organizations"]
    assert filtered is not classified
    assert filtered.cleaned_text == "[ORG_REDACTED]\n[WORD_REDACTED]"
    assert filtered.removed_categories == ["Organizations", "Non-Dictionary Words"]


def test_redactor_shares_pattern_set():
    r1, r2 = Redactor(PATTERNS), Redactor(PATTERNS)
    a = r1.redact("Ramesh", {"ramesh"})
    b = r2.redact("Ramesh", set())
    assert a.cleaned_text == "Ramesh"
    assert b.cleaned_text == "[WORD_REDACTED]"


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
