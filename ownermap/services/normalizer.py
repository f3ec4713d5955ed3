"""
Owner Text Normalizer.

First stage of owner resolution. Takes one raw owner string as scraped from
an appraiser page and returns a cleaned string:
- whitespace runs collapsed (non-breaking space included)
- relationship / legal noise removed (ET AL, TRUSTEE, U/A, F/B/O, ...)
- alias tails (AKA ...) and care-of tails (C/O ...) removed
- percentage-interest fragments and parenthetical notes removed
- stray leading markers, dangling connectors and edge punctuation trimmed

An empty return value means "no owner here", not an error.
"""

import re

from ownermap.config.owner_rules import (
    ALIAS_MARKERS,
    CARE_OF_MARKERS,
    INTEREST_PATTERNS,
    LEADING_MARKERS,
    NOISE_PATTERNS,
    TRAILING_NUMBER_COMPANY_SUFFIXES,
)
from ownermap.utils.text import has_alnum, normalize_whitespace


def _alternation(markers):
    # Longest first so "A/K/A" wins over "AKA"-style prefixes
    ordered = sorted(markers, key=len, reverse=True)
    return "|".join(re.escape(m).replace(r"\ ", " ").replace(" ", r"\s+") for m in ordered)


_NOISE_RE = re.compile("|".join(NOISE_PATTERNS), re.IGNORECASE)
_INTEREST_RE = re.compile("|".join(INTEREST_PATTERNS), re.IGNORECASE)
_ALIAS_RE = re.compile(
    rf"\b(?:{_alternation(ALIAS_MARKERS)})\b.*?(?=\s*&|\s+AND\b|;|$)",
    re.IGNORECASE,
)
_CARE_OF_RE = re.compile(rf"\b(?:{_alternation(CARE_OF_MARKERS)})\b.*$", re.IGNORECASE)
_PAREN_RE = re.compile(r"\([^()]*\)")
_COMMA_RE = re.compile(r"\s*,(?:\s*,)*\s*")
_LEADING_CONNECTOR_RE = re.compile(r"^(?:&|AND\b)\s*", re.IGNORECASE)
_TRAILING_CONNECTOR_RE = re.compile(r"\s*(?:&|\bAND)$", re.IGNORECASE)
_TRAILING_NUMBER_RE = re.compile(
    rf"^(.*\b(?:{_alternation(TRAILING_NUMBER_COMPANY_SUFFIXES)})\.?)\s+\d{{1,3}}(?:\.\d+)?$",
    re.IGNORECASE,
)

_MAX_PASSES = 10


def _strip_parentheticals(text: str) -> str:
    previous = None
    while previous != text:
        previous = text
        text = _PAREN_RE.sub(" ", text)
    return text


def _trim_edges(text: str) -> str:
    previous = None
    while previous != text:
        previous = text
        text = text.lstrip(LEADING_MARKERS + " ,;:/-.")
        text = text.rstrip(" ,;:/-")
        text = _LEADING_CONNECTOR_RE.sub("", text)
        text = _TRAILING_CONNECTOR_RE.sub("", text)
    return text


def _clean_once(text: str) -> str:
    text = normalize_whitespace(text)
    text = _CARE_OF_RE.sub(" ", text)
    text = _ALIAS_RE.sub(" ", text)
    text = _INTEREST_RE.sub(" ", text)
    text = _NOISE_RE.sub(" ", text)
    text = _strip_parentheticals(text)
    text = normalize_whitespace(text)
    text = _COMMA_RE.sub(", ", text)
    text = _trim_edges(text)
    text = _TRAILING_NUMBER_RE.sub(r"\1", text)
    return normalize_whitespace(text)


def normalize_owner_text(raw) -> str:
    """
    Clean one raw owner string.

    Cleaning repeats until the text stops changing, so the result is stable:
    normalize_owner_text(normalize_owner_text(x)) == normalize_owner_text(x).
    """
    if not raw or not isinstance(raw, str):
        return ""

    text = raw
    for _ in range(_MAX_PASSES):
        cleaned = _clean_once(text)
        if cleaned == text:
            break
        text = cleaned

    if not has_alnum(text):
        return ""
    return text
