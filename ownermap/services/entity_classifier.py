"""
Entity Classifier.

Decides whether a single-party fragment names a Company or a Person.
Company keywords and phrases are matched as whole words, case-insensitive,
with periods ignored so "L.L.C." and "INC." match their bare forms. Any
company match wins over person heuristics ("SMITH FAMILY TRUST" is a
Company).
"""

import re
from enum import Enum
from functools import lru_cache
from typing import FrozenSet, NamedTuple, Optional

from ownermap.config.owner_rules import COMPANY_PHRASES
from ownermap.config.profile import DEFAULT_PROFILE, DigitPolicy, JurisdictionProfile
from ownermap.models.owner import ReasonCode
from ownermap.utils.text import has_digit


class EntityKind(str, Enum):
    COMPANY = "company"
    PERSON = "person"
    REJECTED = "rejected"


class Classification(NamedTuple):
    kind: EntityKind
    # Set for rejections and for company records that should also be audited
    reason: Optional[ReasonCode] = None


@lru_cache(maxsize=32)
def _keyword_pattern(keywords: FrozenSet[str]) -> Optional[re.Pattern]:
    if not keywords:
        return None
    ordered = sorted(keywords, key=len, reverse=True)
    alternation = "|".join(re.escape(k).replace(r"\ ", " ").replace(" ", r"\s+") for k in ordered)
    return re.compile(rf"(?<![A-Z0-9])(?:{alternation})(?![A-Z0-9])")


def _match_form(text: str) -> str:
    return text.upper().replace(".", "")


class EntityClassifier:
    """Company vs Person decision for one fragment."""

    def __init__(self, profile: Optional[JurisdictionProfile] = None):
        self.profile = profile or DEFAULT_PROFILE
        keywords = self.profile.keyword_set() | {_match_form(p) for p in COMPANY_PHRASES}
        self._pattern = _keyword_pattern(frozenset(keywords))

    def company_keyword(self, text: str) -> Optional[str]:
        """Return the first company keyword found in the text, if any."""
        if not text or self._pattern is None:
            return None
        match = self._pattern.search(_match_form(text))
        return match.group(0) if match else None

    def is_company(self, text: str) -> bool:
        return self.company_keyword(text) is not None

    def classify(self, fragment: str) -> Classification:
        if self.is_company(fragment):
            return Classification(EntityKind.COMPANY)

        # Person names never contain digits
        if has_digit(fragment):
            if self.profile.digit_policy == DigitPolicy.COMPANY:
                return Classification(EntityKind.COMPANY, ReasonCode.COMPANY_FALLBACK)
            return Classification(EntityKind.REJECTED, ReasonCode.NAME_CONTAINS_DIGITS)

        return Classification(EntityKind.PERSON)
