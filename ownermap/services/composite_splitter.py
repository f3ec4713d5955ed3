"""
Composite Splitter.

Splits one normalized owner string into single-party fragments.

Split points are "&", the word AND, ";" and (per profile) "/". Commas are
context-sensitive: "SMITH, JOHN" is one party in LAST, FIRST form and is
kept whole, while "SMITH JOHN, DOE JANE" names two parties and is split.
"""

import re
from typing import List, Optional

from ownermap.config.owner_rules import (
    MULTI_TOKEN_SUFFIXES,
    PERSON_NOISE_TOKENS,
    PREFIXES,
    SUFFIXES,
    SURNAME_PARTICLES,
)
from ownermap.config.profile import DEFAULT_PROFILE, JurisdictionProfile
from ownermap.services.entity_classifier import EntityClassifier
from ownermap.utils.text import affix_key, has_alnum, normalize_whitespace

# "&" touching word characters on both sides (AT&T, H&R) is not a split point
_SEPARATOR_RE = re.compile(r"\s+&\s*|\s*&\s+|\s+AND\s+|\s*;\s*", re.IGNORECASE)
_SLASH_RE = re.compile(r"\s*(?<!\d)/(?!\d)\s*")
_FRAGMENT_EDGES = " ;/&"


def _split_separators(text: str, profile: JurisdictionProfile) -> List[str]:
    parts = _SEPARATOR_RE.split(text)
    if profile.split_on_slash:
        parts = [piece for part in parts for piece in _SLASH_RE.split(part)]
    return parts


def is_surname_like(piece: str) -> bool:
    """
    True when a comma's left side reads as a bare surname.

    Trailing suffixes are ignored ("SMITH JR") and leading particles are
    allowed ("DE LA CRUZ").
    """
    tokens = piece.split()
    while len(tokens) > 1 and affix_key(tokens[-1]) in SUFFIXES:
        tokens.pop()
    if not tokens:
        return False
    return all(affix_key(t) in SURNAME_PARTICLES for t in tokens[:-1])


def _split_commas(part: str) -> List[str]:
    if "," not in part:
        return [part]

    pieces = [p.strip() for p in part.split(",")]
    if len(pieces) == 2 and (not pieces[0] or not pieces[1]):
        # "SMITH," or ", JOHN": one malformed party, left for the parser to report
        return [part]

    fragments = []
    i = 0
    while i < len(pieces):
        piece = pieces[i]
        if is_surname_like(piece) and i + 1 < len(pieces) and pieces[i + 1]:
            fragments.append(f"{piece}, {pieces[i + 1]}")
            i += 2
        else:
            fragments.append(piece)
            i += 1
    return fragments


def _is_noise_only(fragment: str) -> bool:
    tokens = [affix_key(t) for t in fragment.split()]
    return bool(tokens) and all(t in PERSON_NOISE_TOKENS for t in tokens)


def _is_suffix_only(fragment: str) -> bool:
    tokens = tuple(affix_key(t) for t in fragment.split())
    if tokens in MULTI_TOKEN_SUFFIXES:
        return True
    return bool(tokens) and all(t in SUFFIXES for t in tokens)


def _is_prefix_only(fragment: str) -> bool:
    tokens = [affix_key(t) for t in fragment.split()]
    return bool(tokens) and all(t in PREFIXES for t in tokens)


def split_composite(
    text: str,
    profile: Optional[JurisdictionProfile] = None,
    classifier: Optional[EntityClassifier] = None,
) -> List[str]:
    """Split a normalized owner string into single-party fragments."""
    profile = profile or DEFAULT_PROFILE
    text = normalize_whitespace(text)
    if not text:
        return []

    classifier = classifier or EntityClassifier(profile)
    if classifier.is_company(text):
        return [text]

    fragments: List[str] = []
    for part in _split_separators(text, profile):
        for fragment in _split_commas(part):
            fragment = fragment.strip(_FRAGMENT_EDGES)
            if not has_alnum(fragment):
                continue
            if _is_noise_only(fragment) or _is_suffix_only(fragment):
                # "& DECEASED" and "SMITH, JOHN, JR" describe the previous party
                if fragments:
                    fragments[-1] = f"{fragments[-1]} {fragment}"
                continue
            fragments.append(fragment)

    # "MR & MRS JOHN SMITH": a bare honorific names nobody on its own
    fragments = [f for i, f in enumerate(fragments) if i == len(fragments) - 1 or not _is_prefix_only(f)]
    if not fragments:
        return [text]
    return fragments
