"""
Person Name Parser.

Assigns first / middle / last name from a person fragment. Heuristics, in
precedence order:

1. Comma form        "SMITH, JOHN ROBERT"      -> last, first, middle
2. Carried surname   "SMITH JOHN & MARY"       -> MARY takes SMITH from the
                                                  previous party of the same
                                                  raw string
3. ALL-CAPS          "DOE JANE MARIE"          -> LAST FIRST MIDDLE
4. Mixed case        "Jane Marie Doe"          -> FIRST MIDDLE LAST

ALL-CAPS falls back to FIRST MIDDLE LAST when the fragment carries an
honorific, an interior initial ("DR JAMES T O'BRIEN") or an interior particle
surname ("JUAN DE LA CRUZ", not "NGUYEN VAN MINH"). A profile may force
either order. Particle runs (DE LA, VAN DER) stay with the surname in both
orders.

Carried context lives in an immutable ResolutionContext passed in by the
caller, never in module state.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from ownermap.config.owner_rules import (
    FIRST_NAMES_FILE,
    PERSON_NOISE_TOKENS,
    SUFFIXES,
    SURNAME_PARTICLES,
)
from ownermap.config.profile import (
    DEFAULT_PROFILE,
    JurisdictionProfile,
    NameOrder,
    load_word_list,
)
from ownermap.models.owner import Person, ReasonCode
from ownermap.services.affix_extractor import AffixExtractor, is_affix_token
from ownermap.utils.text import (
    affix_key,
    has_alnum,
    is_all_caps,
    is_plausible_name,
    normalize_whitespace,
    strip_name_edges,
    title_case_name,
)

_SUFFIX_CLASS_BY_VALUE = {value: cls for value, cls in SUFFIXES.values()}


@dataclass(frozen=True)
class ResolutionContext:
    """State carried between the fragments of one raw owner string."""

    previous_last_name: Optional[str] = None
    fragment_index: int = 0
    force_order: Optional[NameOrder] = None

    def carried_surname(self) -> Optional[str]:
        if self.fragment_index > 0:
            return self.previous_last_name
        return None


@dataclass(frozen=True)
class ParseResult:
    person: Optional[Person] = None
    reason: Optional[ReasonCode] = None
    # An honorific/suffix could not be consumed without starving the name
    starved: bool = False

    @property
    def ok(self) -> bool:
        return self.person is not None


class _Rejected(Exception):
    def __init__(self, reason: ReasonCode, starved: bool = False):
        super().__init__(reason.value)
        self.reason = reason
        self.starved = starved


def _is_initial(token: str) -> bool:
    return len(strip_name_edges(token)) == 1


def _starts_surname(core: Sequence[str], index: int) -> bool:
    """
    True when core[index] opens a particle surname inside the name.

    NGUYEN VAN MINH keeps VAN as a middle name; a particle only opens a
    surname when another particle follows (DE LA) or two tokens follow.
    """
    if affix_key(core[index]) not in SURNAME_PARTICLES:
        return False
    following = core[index + 1 :]
    return len(following) >= 2 or (bool(following) and affix_key(following[0]) in SURNAME_PARTICLES)


class PersonNameParser:
    def __init__(self, profile: Optional[JurisdictionProfile] = None):
        self.profile = profile or DEFAULT_PROFILE
        self.affixes = AffixExtractor(self.profile)
        self.first_names = load_word_list(FIRST_NAMES_FILE)

    def parse(self, fragment: str, context: Optional[ResolutionContext] = None) -> ParseResult:
        context = context or ResolutionContext()
        text = normalize_whitespace(fragment)
        try:
            if "," in text:
                person, starved = self._parse_comma(text)
            else:
                person, starved = self._parse_plain(text, context)
        except _Rejected as exc:
            return ParseResult(reason=exc.reason, starved=exc.starved)
        return ParseResult(person=person, starved=starved)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def _tokens(self, text: str) -> List[str]:
        tokens = [t for t in text.replace(",", " ").split() if has_alnum(t)]
        kept = [t for t in tokens if affix_key(t) not in PERSON_NOISE_TOKENS]
        return kept or tokens

    def _parse_comma(self, text: str):
        left, right = text.split(",", 1)
        left_tokens = self._tokens(left)
        right_tokens = self._tokens(right)

        if not left_tokens and not right_tokens:
            raise _Rejected(ReasonCode.UNPARSEABLE_OR_EMPTY)
        if not left_tokens:
            raise _Rejected(ReasonCode.PERSON_MISSING_LAST_NAME)
        if not right_tokens:
            raise _Rejected(ReasonCode.PERSON_MISSING_FIRST_OR_LAST)

        # The surname side is re-checked for its own suffix ("SMITH JR, JOHN")
        last = self.affixes.extract(left_tokens, min_remaining=1)
        given = self.affixes.extract(right_tokens, min_remaining=1)
        starved = last.starved or given.starved

        person = self._build(
            first=given.tokens[:1],
            middle=given.tokens[1:],
            last=last.tokens,
            prefix=last.prefix or given.prefix,
            suffix=self._pick_suffix(last.suffix, given.suffix),
            starved=starved,
        )
        return person, starved

    def _parse_plain(self, text: str, context: ResolutionContext):
        tokens = self._tokens(text)
        if not tokens:
            raise _Rejected(ReasonCode.UNPARSEABLE_OR_EMPTY)

        carried = context.carried_surname()
        affix = self.affixes.extract(tokens, min_remaining=1 if carried else 2)
        core = list(affix.tokens)
        prefix, suffix, starved = affix.prefix, affix.suffix, affix.starved

        if carried and self._continues_surname(core, carried):
            person = self._build(core[:1], core[1:], [carried], prefix, suffix, starved)
            return person, starved

        if len(core) < 2:
            raise _Rejected(ReasonCode.INSUFFICIENT_NAME_PARTS, starved)

        order = self._order(text, core, prefix, context)
        if order == NameOrder.LAST_FIRST:
            if suffix is None:
                suffix, inner = self.affixes.extract_inner_suffix(core)
                core = list(inner)
            # A run of two or more leading particles extends the surname:
            # DE LA CRUZ JUAN. A lone VAN / LE is a surname of its own.
            run = 0
            while run < len(core) - 2 and affix_key(core[run]) in SURNAME_PARTICLES:
                run += 1
            end = run if run >= 2 else 0
            last, first, middle = core[: end + 1], core[end + 1 : end + 2], core[end + 2 :]
        else:
            # Particles before the last token extend the surname: JUAN DE LA CRUZ
            start = len(core) - 1
            while start - 1 >= 1 and affix_key(core[start - 1]) in SURNAME_PARTICLES:
                start -= 1
            first, middle, last = core[:1], core[1:start], core[start:]

        person = self._build(first, middle, last, prefix, suffix, starved)
        return person, starved

    def _order(self, text: str, core: Sequence[str], prefix: Optional[str], context: ResolutionContext) -> NameOrder:
        order = context.force_order or self.profile.name_order
        if order != NameOrder.AUTO:
            return order
        if not is_all_caps(text):
            return NameOrder.FIRST_LAST
        # "DR JAMES T O'BRIEN", "JUAN DE LA CRUZ": a given name comes first
        interior_initial = any(_is_initial(t) for t in core[1:-1]) and not _is_initial(core[-1])
        interior_particle = affix_key(core[0]) not in SURNAME_PARTICLES and any(
            _starts_surname(core, i) for i in range(1, len(core) - 1)
        )
        if prefix is not None or interior_initial or interior_particle:
            return NameOrder.FIRST_LAST
        return NameOrder.LAST_FIRST

    def _continues_surname(self, core: Sequence[str], carried: str) -> bool:
        if len(core) == 1:
            return True
        if len(core) != 2:
            return False
        carried_key = carried.upper()
        if any(strip_name_edges(t).upper() == carried_key for t in core):
            return False
        if _is_initial(core[1]):
            return True
        return all(affix_key(t) in self.first_names for t in core)

    def _pick_suffix(self, first: Optional[str], second: Optional[str]) -> Optional[str]:
        if first is None or second is None:
            return first or second
        rank_first = self.profile.suffix_rank(_SUFFIX_CLASS_BY_VALUE[first])
        rank_second = self.profile.suffix_rank(_SUFFIX_CLASS_BY_VALUE[second])
        return second if rank_second < rank_first else first

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def _component(self, tokens: Sequence[str], starved: bool) -> str:
        value = strip_name_edges(" ".join(tokens))
        if not value:
            return ""
        if not is_plausible_name(value):
            raise _Rejected(ReasonCode.AMBIGUOUS_OR_INCOMPLETE_PERSON_NAME, starved)
        return title_case_name(value)

    def _build(self, first, middle, last, prefix, suffix, starved) -> Person:
        if starved and any(is_affix_token(t) for t in list(first) + list(last)):
            raise _Rejected(ReasonCode.AMBIGUOUS_OR_INCOMPLETE_PERSON_NAME, starved)

        first_name = self._component(first, starved)
        last_name = self._component(last, starved)
        middle_name = self._component(middle, starved) if middle else ""
        if not first_name or not last_name:
            raise _Rejected(ReasonCode.PERSON_MISSING_FIRST_OR_LAST, starved)

        try:
            return Person(
                first_name=first_name,
                last_name=last_name,
                middle_name=middle_name or None,
                prefix_name=prefix,
                suffix_name=suffix,
            )
        except ValidationError as e:
            logger.warning(f"Person construction failed for {first_name!r} {last_name!r}: {e}")
            raise _Rejected(ReasonCode.AMBIGUOUS_OR_INCOMPLETE_PERSON_NAME, starved) from e
