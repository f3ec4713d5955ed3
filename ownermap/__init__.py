"""
ownermap - owner-identity resolution for property appraiser records.

Turns noisy owner strings ("SMITH JR, JOHN ROBERT", "DOE JANE & SMITH MARY",
"RIVERSIDE HOLDINGS LLC") into typed Person / Company records organized in a
date-keyed ownership timeline, with an audit list of unparsed fragments.
"""

from ownermap.config import (
    DEFAULT_PROFILE,
    DigitPolicy,
    JurisdictionProfile,
    NameOrder,
    get_profile,
    load_profile,
)
from ownermap.models import (
    Company,
    InvalidFragment,
    MailingAddress,
    OwnerDocument,
    OwnerMappingResult,
    ParsedOwner,
    Person,
    ReasonCode,
    ResolvedString,
)
from ownermap.services import (
    AffixExtractor,
    EntityClassifier,
    InvalidFragmentCollector,
    PersonNameParser,
    ResolutionContext,
    TimelineAssembler,
    canonical_key,
    dedupe_owners,
    normalize_owner_text,
    resolve_document,
    resolve_owner_string,
    split_composite,
)

__version__ = "0.1.0"

__all__ = [
    "AffixExtractor",
    "Company",
    "DEFAULT_PROFILE",
    "DigitPolicy",
    "EntityClassifier",
    "InvalidFragment",
    "InvalidFragmentCollector",
    "JurisdictionProfile",
    "MailingAddress",
    "NameOrder",
    "OwnerDocument",
    "OwnerMappingResult",
    "ParsedOwner",
    "Person",
    "PersonNameParser",
    "ReasonCode",
    "ResolutionContext",
    "ResolvedString",
    "TimelineAssembler",
    "canonical_key",
    "dedupe_owners",
    "get_profile",
    "load_profile",
    "normalize_owner_text",
    "resolve_document",
    "resolve_owner_string",
    "split_composite",
]
