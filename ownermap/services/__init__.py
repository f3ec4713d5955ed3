"""
Owner resolution pipeline.

Modules, in pipeline order:
- normalizer: raw text cleanup
- composite_splitter: one string -> single-party fragments
- entity_classifier: Company vs Person
- affix_extractor: honorific prefix / suffix handling
- person_parser: first / middle / last assignment
- deduplicator: canonical keys and per-bucket dedup
- invalid_collector: audit of rejected fragments
- string_resolver: the stages above for one raw string
- timeline_assembler: date-keyed owner timeline for one property
- owner_resolution_service: public entry points
"""

from ownermap.services.affix_extractor import AffixExtractor, AffixResult
from ownermap.services.composite_splitter import split_composite
from ownermap.services.deduplicator import canonical_key, dedupe_owners
from ownermap.services.entity_classifier import Classification, EntityClassifier, EntityKind
from ownermap.services.invalid_collector import InvalidFragmentCollector
from ownermap.services.normalizer import normalize_owner_text
from ownermap.services.owner_resolution_service import resolve_document, resolve_owner_string
from ownermap.services.person_parser import ParseResult, PersonNameParser, ResolutionContext
from ownermap.services.string_resolver import OwnerStringResolver
from ownermap.services.timeline_assembler import TimelineAssembler

__all__ = [
    "AffixExtractor",
    "AffixResult",
    "Classification",
    "EntityClassifier",
    "EntityKind",
    "InvalidFragmentCollector",
    "OwnerStringResolver",
    "ParseResult",
    "PersonNameParser",
    "ResolutionContext",
    "TimelineAssembler",
    "canonical_key",
    "dedupe_owners",
    "normalize_owner_text",
    "resolve_document",
    "resolve_owner_string",
    "split_composite",
]
