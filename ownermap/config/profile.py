"""
Jurisdiction profiles.

Counties disagree on name order, company vocabulary and which suffix wins
when several trail a name. A profile carries those choices as data so the
pipeline code stays the same for every jurisdiction.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Optional, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict

from ownermap.config.owner_rules import (
    COMPANY_KEYWORDS_FILE,
    DEFAULT_SUFFIX_PRIORITY,
    SuffixClass,
)


class NameOrder(str, Enum):
    """Token order assumed for comma-free person fragments."""

    AUTO = "auto"  # ALL-CAPS -> LAST FIRST, otherwise FIRST LAST
    LAST_FIRST = "last_first"
    FIRST_LAST = "first_last"


class DigitPolicy(str, Enum):
    """What to do with a non-company fragment that contains digits."""

    REJECT = "reject"
    COMPANY = "company"


@lru_cache(maxsize=None)
def load_word_list(path: Path) -> FrozenSet[str]:
    """Load an upper-cased word list, one entry per line, '#' for comments."""
    if not path.exists():
        logger.warning(f"Word list not found: {path}")
        return frozenset()

    words = set()
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                words.add(line.upper())

    logger.debug(f"Loaded {len(words)} entries from {path.name}")
    return frozenset(words)


class JurisdictionProfile(BaseModel):
    """Per-jurisdiction tuning of the resolution heuristics."""

    model_config = ConfigDict(frozen=True)

    name: str = "default"
    name_order: NameOrder = NameOrder.AUTO
    # None means the bundled company_keywords.txt
    company_keywords: Optional[FrozenSet[str]] = None
    extra_company_keywords: FrozenSet[str] = frozenset()
    person_exempt_keywords: FrozenSet[str] = frozenset()
    suffix_priority: Tuple[SuffixClass, ...] = tuple(DEFAULT_SUFFIX_PRIORITY)
    split_on_slash: bool = True
    digit_policy: DigitPolicy = DigitPolicy.REJECT
    company_fallback: bool = False
    merge_latest_sale_into_current: bool = False

    def keyword_set(self) -> FrozenSet[str]:
        """Effective company keywords, upper-cased and without periods."""
        base = self.company_keywords
        if base is None:
            base = load_word_list(COMPANY_KEYWORDS_FILE)
        keywords = {k.upper().replace(".", "").strip() for k in base | self.extra_company_keywords}
        exempt = {k.upper().replace(".", "").strip() for k in self.person_exempt_keywords}
        return frozenset(k for k in keywords - exempt if k)

    def suffix_rank(self, suffix_class: SuffixClass) -> int:
        """Lower rank wins; classes missing from the priority list rank last."""
        try:
            return self.suffix_priority.index(suffix_class)
        except ValueError:
            return len(self.suffix_priority)


DEFAULT_PROFILE = JurisdictionProfile()

BUILTIN_PROFILES = {
    "default": DEFAULT_PROFILE,
    # Exports that print names as FIRST MIDDLE LAST even in upper case
    "first_last": JurisdictionProfile(name="first_last", name_order=NameOrder.FIRST_LAST),
    # Scripts that keep every fragment, falling back to a company record
    "permissive": JurisdictionProfile(
        name="permissive",
        digit_policy=DigitPolicy.COMPANY,
        company_fallback=True,
    ),
}


def get_profile(name: str) -> JurisdictionProfile:
    """Return a built-in profile by name."""
    try:
        return BUILTIN_PROFILES[name]
    except KeyError:
        raise KeyError(
            f"Unknown profile '{name}'. Available: {', '.join(sorted(BUILTIN_PROFILES))}"
        ) from None


def load_profile(path: str | Path) -> JurisdictionProfile:
    """Load a profile from a JSON file."""
    path = Path(path)
    profile = JurisdictionProfile.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info(f"Loaded jurisdiction profile '{profile.name}' from {path}")
    return profile
