"""Shared text helpers for owner-name handling."""

from __future__ import annotations

import re

# \s is Unicode-aware, so it also covers non-breaking and other exotic spaces
_WHITESPACE_RE = re.compile(r"\s+")
_NON_LETTER_RE = re.compile(r"[^A-Za-z]")
# Letters (any script), then letters/space/hyphen/apostrophe/period
_PLAUSIBLE_NAME_RE = re.compile(r"^[^\W\d_](?:[^\W\d_]|[ \-'.])*$")
_EDGE_PUNCT = "-',. "


def normalize_whitespace(text: str | None) -> str:
    """Collapse every whitespace run (incl. non-breaking space) to one space."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def comparison_key(text: str | None) -> str:
    """Lower-cased, whitespace-collapsed form used for equality checks."""
    return normalize_whitespace(text).lower()


def affix_key(token: str | None) -> str:
    """Normalize a token for honorific/suffix lookup ("Jr." -> "JR")."""
    if not token:
        return ""
    return _NON_LETTER_RE.sub("", token).upper()


def has_alnum(text: str | None) -> bool:
    return bool(text) and any(ch.isalnum() for ch in text)


def has_digit(text: str | None) -> bool:
    return bool(text) and any(ch.isdigit() for ch in text)


def is_all_caps(text: str | None) -> bool:
    """True when the text has cased letters and none of them is lower-case."""
    if not text:
        return False
    cased = [ch for ch in text if ch.isalpha() and ch.upper() != ch.lower()]
    return bool(cased) and all(ch.isupper() for ch in cased)


def strip_name_edges(value: str | None) -> str:
    """Drop leading/trailing hyphens, apostrophes, commas, periods and spaces."""
    if not value:
        return ""
    return normalize_whitespace(value).strip(_EDGE_PUNCT)


def is_plausible_name(value: str | None) -> bool:
    """Letters, spaces, hyphen, apostrophe and period only; starts with a letter."""
    if not value:
        return False
    return bool(_PLAUSIBLE_NAME_RE.match(value))


def title_case_name(value: str) -> str:
    """
    Title-case a name component.

    Each space- or hyphen-separated part gets an upper-case first letter and
    lower-case remainder, so "O'BRIEN" -> "O'brien" and
    "SMITH-JONES" -> "Smith-Jones".
    """
    words = []
    for word in normalize_whitespace(value).split(" "):
        parts = [part[:1].upper() + part[1:].lower() for part in word.split("-")]
        words.append("-".join(parts))
    return " ".join(words)
