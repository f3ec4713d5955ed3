"""
Owner Resolution Service.

Entry points for turning scraped owner strings into typed owner records:

- resolve_owner_string: one raw string -> owners + rejected fragments
- resolve_document: one property record -> owners_by_date timeline

Both are pure and keep no state between calls, so documents may be resolved
concurrently.
"""

from typing import Any, Mapping, Optional, Union

from ownermap.config.profile import DEFAULT_PROFILE, JurisdictionProfile
from ownermap.models.owner import OwnerDocument, OwnerMappingResult, ResolvedString
from ownermap.services.string_resolver import OwnerStringResolver
from ownermap.services.timeline_assembler import CURRENT_KEY, TimelineAssembler
from ownermap.utils.logging_utils import Timer, bind_context


def resolve_owner_string(raw: str, profile: Optional[JurisdictionProfile] = None) -> ResolvedString:
    """Resolve a single raw owner string. Never raises for string input."""
    return OwnerStringResolver(profile or DEFAULT_PROFILE).resolve(raw)


def resolve_document(
    document: Union[OwnerDocument, Mapping[str, Any]],
    profile: Optional[JurisdictionProfile] = None,
    property_id: Optional[str] = None,
) -> OwnerMappingResult:
    """
    Resolve every owner string of one property record.

    A plain mapping is validated into an OwnerDocument first; a structurally
    malformed document (sales_by_date not a mapping, non-string owners, ...)
    raises pydantic.ValidationError. Data-quality problems never raise, they
    end up in invalid_owners.
    """
    if not isinstance(document, OwnerDocument):
        document = OwnerDocument.model_validate(document)

    profile = profile or DEFAULT_PROFILE
    log = bind_context(property_id=property_id, profile=profile.name)

    with Timer() as timer:
        result = TimelineAssembler(profile).assemble(document)

    owner_count = sum(len(owners) for owners in result.owners_by_date.values())
    log.bind(
        buckets=len(result.owners_by_date),
        owners=owner_count,
        invalid=len(result.invalid_owners),
        duration_ms=round(timer.elapsed_ms, 1),
    ).info(
        f"Resolved owners for {property_id or 'document'}: "
        f"{len(result.owners_by_date)} buckets, {owner_count} owners "
        f"({len(result.owners_by_date[CURRENT_KEY])} current), "
        f"{len(result.invalid_owners)} invalid, {timer.elapsed_ms:.1f} ms"
    )
    return result
