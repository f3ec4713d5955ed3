"""
Affix Extractor.

Pulls an honorific prefix off the first token and a generational,
professional or status suffix off the end of a person's token run.
Only one of each is kept; when several suffixes trail a name the profile's
suffix priority picks the primary one (generational first by default).
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ownermap.config.owner_rules import MULTI_TOKEN_SUFFIXES, PREFIXES, SUFFIXES, SuffixClass
from ownermap.config.profile import DEFAULT_PROFILE, JurisdictionProfile
from ownermap.utils.text import affix_key


@dataclass(frozen=True)
class AffixResult:
    prefix: Optional[str]
    suffix: Optional[str]
    tokens: Tuple[str, ...]
    # An affix was found but left in place to keep enough name tokens
    starved: bool = False


def is_affix_token(token: str) -> bool:
    key = affix_key(token)
    return key in PREFIXES or key in SUFFIXES


class AffixExtractor:
    def __init__(self, profile: Optional[JurisdictionProfile] = None):
        self.profile = profile or DEFAULT_PROFILE

    def _trailing_suffixes(self, tokens: Sequence[str]) -> List[Tuple[int, str]]:
        """(start index, suffix key) for each suffix in the trailing run, outermost first."""
        found = []
        end = len(tokens)
        while end > 0:
            if end >= 2:
                pair = (affix_key(tokens[end - 2]), affix_key(tokens[end - 1]))
                if pair in MULTI_TOKEN_SUFFIXES:
                    found.append((end - 2, MULTI_TOKEN_SUFFIXES[pair]))
                    end -= 2
                    continue
            key = affix_key(tokens[end - 1])
            if key not in SUFFIXES:
                break
            found.append((end - 1, key))
            end -= 1
        return found

    def _primary_suffix(self, keys: Sequence[str]) -> str:
        # Ties keep the suffix closest to the name
        ranked = sorted(
            enumerate(keys),
            key=lambda item: (self.profile.suffix_rank(SUFFIXES[item[1]][1]), -item[0]),
        )
        return SUFFIXES[ranked[0][1]][0]

    def extract(self, tokens: Sequence[str], min_remaining: int = 2) -> AffixResult:
        """
        Split tokens into (prefix, suffix, core tokens).

        An affix is only consumed when at least ``min_remaining`` core tokens
        are left; otherwise it stays in the core run and ``starved`` is set.
        """
        core = list(tokens)
        prefix = None
        suffix = None
        starved = False

        if core and affix_key(core[0]) in PREFIXES:
            if len(core) - 1 >= min_remaining:
                prefix = PREFIXES[affix_key(core[0])]
                core = core[1:]
            else:
                starved = True

        found = self._trailing_suffixes(core)
        if found:
            start = found[-1][0]
            if start >= min_remaining:
                suffix = self._primary_suffix([key for _, key in found])
                core = core[:start]
            else:
                starved = True

        return AffixResult(prefix=prefix, suffix=suffix, tokens=tuple(core), starved=starved)

    def extract_inner_suffix(self, tokens: Sequence[str]) -> Tuple[Optional[str], Tuple[str, ...]]:
        """
        Pull a generational suffix sitting right after the surname.

        Tax rolls print "SMITH JR JOHN" for John Smith Jr.; only the second
        token of a run of three or more is considered.
        """
        if len(tokens) >= 3:
            key = affix_key(tokens[1])
            if key in SUFFIXES and SUFFIXES[key][1] == SuffixClass.GENERATIONAL:
                return SUFFIXES[key][0], (tokens[0],) + tuple(tokens[2:])
        return None, tuple(tokens)
