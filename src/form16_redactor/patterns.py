"""Pattern registry — the fixed rule tables for Form-16 text.

Two ordered tables:

  * token rules  — isolated identifiers (phone, email, Aadhaar, PAN, GST,
    TAN), applied in list order over the whole text;
  * line rules   — organisation and address detection, checked per line
    in list order, first hit wins.

All patterns are ASCII-mode literals compiled once.  Nothing here is
configurable at runtime; ``build_pattern_set()`` always returns an
equivalent value.
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from .types import LineRule, TokenRule

# Category labels as reported in FilterResult.removed_categories
PHONE = "Phone Numbers"
EMAIL = "Email Addresses"
AADHAAR = "Aadhaar Numbers"
PAN = "PAN Numbers"
GST = "GST Numbers"
TAN = "TAN Numbers"
ADDRESSES = "Addresses"
ORGANIZATIONS = "Organizations"
NON_DICTIONARY = "Non-Dictionary Words"

_A = re.ASCII
_AI = re.ASCII | re.IGNORECASE

_CITIES_AND_STATES = [
    # Cities
    "Ahmedabad", "Bangalore", "Bengaluru", "Mumbai", "Bombay", "Chennai",
    "Kolkata", "Calcutta", "Hyderabad", "Delhi", "New Delhi", "Pune", "Jaipur",
    "Surat", "Lucknow", "Kanpur", "Nagpur", "Indore", "Thane", "Bhopal",
    "Visakhapatnam", "Vizag", "Vadodara", "Baroda", "Firozabad", "Ludhiana",
    "Patna", "Agra", "Nashik", "Faridabad", "Meerut", "Rajkot", "Kalyan",
    "Vasai", "Varanasi", "Srinagar", "Aurangabad", "Dhanbad", "Amritsar",
    "Ranchi", "Gwalior", "Jabalpur", "Coimbatore", "Guwahati", "Chandigarh",
    "Hubli", "Dharwad", "Mysore", "Mysuru", "Noida", "Ghaziabad", "Kozhikode",
    "Calicut", "Trivandrum", "Thiruvananthapuram", "Kochi", "Ernakulam",
    "Madurai", "Tiruchirappalli", "Trichy", "Salem", "Guntur", "Vijayawada",
    "Nellore", "Warangal", "Karimnagar", "Raipur", "Bhubaneswar", "Cuttack",
    "Shimla", "Dehradun", "Gangtok", "Shillong", "Imphal", "Aizawl", "Kohima",
    "Itanagar", "Agartala", "Gandhinagar", "Allahabad", "Prayagraj",
    "Gorakhpur", "Bareilly", "Jodhpur", "Udaipur", "Kolhapur", "Solapur",
    "Ahmednagar", "Mangaluru", "Mangalore", "Béngaluru", "Bilaspur",
    "Durgapur", "Siliguri", "Asansol", "Dibrugarh", "Panipat", "Rohtak",
    "Hisar", "Jamshhedpur", "Bokaro", "Rourkela", "Belgaum", "Belagavi",
    "Saharanpur", "Aligarh", "Moradabad", "Muzaffarpur", "Gaya", "Darbhanga",
    "Bhagalpur", "Kota", "Ajmer", "Mathura", "Haldwani", "Nainital",
    "Pithoragarh", "Kullu", "Manali", "Shimoga", "Tumkur", "Davangere", "Goa",
    "Panaji", "Vile Parle",
    # States and union territories
    "Maharashtra", "Gujarat", "Karnataka", "Tamil Nadu", "Uttar Pradesh",
    "Madhya Pradesh", "Rajasthan", "Punjab", "Haryana", "Bihar", "West Bengal",
    "Odisha", "Kerala", "Telangana", "Andhra Pradesh", "Chhattisgarh",
    "Uttarakhand", "Himachal Pradesh", "Assam", "Jharkhand", "Tripura",
    "Manipur", "Mizoram", "Nagaland", "Arunachal Pradesh", "Sikkim",
    "Meghalaya", "Puducherry", "Ladakh", "Jammu and Kashmir",
    "Andaman and Nicobar Islands", "Lakshadweep", "Daman and Diu",
    "Dadra and Nagar Haveli",
]

# Street-address words that rarely show up in ordinary narrative text.
_ADDRESS_KEYWORDS = [
    "House", "Block", "Tower", "Flat", "Floor", "Flr", r"Road", r"Rd\.?",
    "Street", r"St\.?", "Lane", r"Ln\.?", "Sector", "Plot", r"Opp\.?", "Near",
    "Behind",
]

_COMPANY_SUFFIXES = [
    r"Pvt\.?\s*Ltd\.?", r"Private\s+Limited", r"Ltd\.?", "Limited", "LLP",
    r"L\.L\.P\.?", "LLC", r"L\.L\.C\.?", r"Inc\.?", "Incorporated", r"Corp\.?",
    "Corporation", "Company", r"Co\.?\s*Ltd\.?", "PLC", r"Pte\.?\s*Ltd\.?",
]


def _word_alternation(words: list[str], *, escape: bool) -> str:
    alts = (re.escape(w) if escape else w for w in words)
    return r"\b(?:" + "|".join(alts) + r")\b"


def _token_rules() -> tuple[TokenRule, ...]:
    # Order is part of the contract: a later rule only sees text already
    # rewritten by the earlier ones.
    return (
        # Indian mobile: 10 digits starting 6-9, optional +91/91 prefix.
        # Separators are horizontal only so no line break is ever consumed.
        TokenRule(PHONE, re.compile(
            r"(?<!\d)(?:(?:\+91|91)[-. \t]?)?[6-9]\d{9}(?!\d)", _A
        ), "[PHONE_REDACTED]"),

        TokenRule(EMAIL, re.compile(
            r"\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b", _A
        ), "[EMAIL_REDACTED]"),

        # Aadhaar: 12 digits, optionally 4-4-4 with single spaces
        TokenRule(AADHAAR, re.compile(
            r"\b\d{4} ?\d{4} ?\d{4}\b", _A
        ), "[AADHAAR_REDACTED]"),

        TokenRule(PAN, re.compile(
            r"\b[A-Z]{5}[0-9]{4}[A-Z]\b", _A
        ), "[PAN_REDACTED]"),

        # GSTIN: state code + PAN core + entity digit + Z + checksum
        TokenRule(GST, re.compile(
            r"\b\d{2}[A-Z]{5}\d{4}[A-Z][A-Z\d]Z[A-Z\d]\b", _A
        ), "[GST_REDACTED]"),

        TokenRule(TAN, re.compile(
            r"\b[A-Z]{4}[0-9]{5}[A-Z]\b", _AI
        ), "[TAN_REDACTED]"),
    )


def _line_rules() -> tuple[LineRule, ...]:
    # Organisation first: a company name containing "Road" or a city is
    # still reported as an organisation.
    return (
        LineRule(ORGANIZATIONS, (
            re.compile(_word_alternation(_COMPANY_SUFFIXES, escape=False), _AI),
        ), "[ORG_REDACTED]"),
        LineRule(ADDRESSES, (
            re.compile(_word_alternation(_CITIES_AND_STATES, escape=True), _AI),
            re.compile(_word_alternation(_ADDRESS_KEYWORDS, escape=False), _AI),
        ), "[ADDRESS_REDACTED]"),
    )


@dataclass(frozen=True, slots=True)
class PatternSet:
    """Immutable bundle of every rule the pipeline applies."""
    token_rules: tuple[TokenRule, ...]
    line_rules: tuple[LineRule, ...]
    # Order in which line-level categories are reported in the summary
    line_report_order: tuple[str, ...] = (ADDRESSES, ORGANIZATIONS)

    def token_rule(self, category: str) -> TokenRule:
        for rule in self.token_rules:
            if rule.category == category:
                return rule
        raise KeyError(category)

    def line_rule(self, category: str) -> LineRule:
        for rule in self.line_rules:
            if rule.category == category:
                return rule
        raise KeyError(category)


def build_pattern_set() -> PatternSet:
    """Compile the Form-16 rule tables."""
    return PatternSet(token_rules=_token_rules(), line_rules=_line_rules())
