"""
Single-string owner resolution.

Runs one raw owner string through normalize -> split -> classify ->
parse and returns the parsed owners together with every rejected fragment.
Total over all strings: bad input becomes InvalidFragment entries, never an
exception.
"""

from dataclasses import replace
from typing import Optional

from pydantic import ValidationError
from loguru import logger

from ownermap.config.profile import DEFAULT_PROFILE, JurisdictionProfile
from ownermap.models.owner import Company, ReasonCode, ResolvedString
from ownermap.services.composite_splitter import split_composite
from ownermap.services.entity_classifier import EntityClassifier, EntityKind
from ownermap.services.invalid_collector import InvalidFragmentCollector
from ownermap.services.normalizer import normalize_owner_text
from ownermap.services.person_parser import PersonNameParser, ResolutionContext
from ownermap.utils.text import normalize_whitespace


class OwnerStringResolver:
    def __init__(self, profile: Optional[JurisdictionProfile] = None):
        self.profile = profile or DEFAULT_PROFILE
        self.classifier = EntityClassifier(self.profile)
        self.parser = PersonNameParser(self.profile)

    def _company(self, name: str) -> Optional[Company]:
        try:
            return Company(name=name)
        except ValidationError as e:
            logger.warning(f"Company construction failed for {name!r}: {e}")
            return None

    def resolve(
        self,
        raw,
        mailing_address: Optional[str] = None,
        context: Optional[ResolutionContext] = None,
    ) -> ResolvedString:
        raw = raw if isinstance(raw, str) else ""
        result = ResolvedString(raw=raw)
        invalid = InvalidFragmentCollector()

        # Blank input is "no owner here", not a rejection
        if not normalize_whitespace(raw):
            return result

        cleaned = normalize_owner_text(raw)
        if not cleaned:
            invalid.add(raw, ReasonCode.EMPTY_AFTER_CLEAN)
            result.invalid.extend(invalid.results())
            return result

        fragments = split_composite(cleaned, self.profile, self.classifier)
        if not fragments:
            invalid.add(raw, ReasonCode.UNPARSEABLE_OR_EMPTY)
            result.invalid.extend(invalid.results())
            return result

        # Fresh context per raw string: surnames never carry across strings
        context = context or ResolutionContext()
        for index, fragment in enumerate(fragments):
            context = replace(context, fragment_index=index)
            owner = None
            classification = self.classifier.classify(fragment)

            if classification.kind == EntityKind.COMPANY:
                owner = self._company(fragment)
                if classification.reason is not None:
                    invalid.add(fragment, classification.reason)
            elif classification.kind == EntityKind.REJECTED:
                invalid.add(fragment, classification.reason)
            else:
                parsed = self.parser.parse(fragment, context)
                if parsed.starved:
                    invalid.add(fragment, ReasonCode.AFFIX_TOKEN_STARVATION)
                if parsed.ok:
                    owner = parsed.person
                    context = replace(context, previous_last_name=parsed.person.last_name)
                elif self.profile.company_fallback:
                    owner = self._company(fragment)
                    invalid.add(fragment, ReasonCode.COMPANY_FALLBACK)
                else:
                    invalid.add(fragment, parsed.reason)

            if owner is not None:
                if mailing_address:
                    owner = owner.model_copy(update={"mailing_address": mailing_address})
                result.owners.append(owner)

        result.invalid.extend(invalid.results())
        return result
