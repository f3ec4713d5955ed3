"""
Timeline Assembler.

Builds the owners_by_date timeline for one property:

    {"1999-01-01": [...], "2020-05-01": [...], "unknown_date_1": [...], "current": [...]}

- every sale date bucket is resolved and deduplicated on its own
- sales keyed by None or by a string that is not a real YYYY-MM-DD date get
  their own unknown_date_N bucket, in first-seen order
- prior owners (grantors) that never show up as a grantee or a current owner
  land in one more unknown_date_N bucket
- empty buckets are omitted, except "current" which is always present
- keys come out as ascending ISO dates, unknown_date_N by number, current last
"""

import re
from datetime import date
from typing import Dict, Iterable, List, Optional

from loguru import logger

from ownermap.config.profile import DEFAULT_PROFILE, JurisdictionProfile
from ownermap.models.owner import MailingAddress, OwnerDocument, OwnerMappingResult, ParsedOwner
from ownermap.services.deduplicator import canonical_key, dedupe_owners
from ownermap.services.invalid_collector import InvalidFragmentCollector
from ownermap.services.string_resolver import OwnerStringResolver

CURRENT_KEY = "current"
UNKNOWN_PREFIX = "unknown_date_"

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_UNKNOWN_KEY_RE = re.compile(rf"^{UNKNOWN_PREFIX}(\d+)$")


def iso_date_key(key) -> Optional[str]:
    """Return the key as YYYY-MM-DD when it is a real calendar date, else None."""
    if not isinstance(key, str):
        return None
    key = key.strip()
    if not _ISO_DATE_RE.match(key):
        return None
    try:
        date.fromisoformat(key)
    except ValueError:
        return None
    return key


def unknown_key_number(key) -> Optional[int]:
    if not isinstance(key, str):
        return None
    match = _UNKNOWN_KEY_RE.match(key.strip())
    return int(match.group(1)) if match else None


class TimelineAssembler:
    def __init__(
        self,
        profile: Optional[JurisdictionProfile] = None,
        resolver: Optional[OwnerStringResolver] = None,
    ):
        self.profile = profile or DEFAULT_PROFILE
        self.resolver = resolver or OwnerStringResolver(self.profile)

    def _resolve_all(
        self,
        raws: Iterable[str],
        collector: InvalidFragmentCollector,
        addresses: Optional[Dict[str, str]] = None,
    ) -> List[ParsedOwner]:
        owners: List[ParsedOwner] = []
        for raw in raws:
            address = addresses.get(raw) if addresses else None
            resolved = self.resolver.resolve(raw, mailing_address=address)
            owners.extend(resolved.owners)
            collector.extend(resolved.invalid)
        return dedupe_owners(owners)

    def assemble(self, document: OwnerDocument) -> OwnerMappingResult:
        collector = InvalidFragmentCollector()
        dated: Dict[str, List[ParsedOwner]] = {}
        labelled: Dict[int, List[ParsedOwner]] = {}
        unlabelled: List[List[ParsedOwner]] = []

        for key, raws in document.sales_by_date.items():
            owners = self._resolve_all(raws, collector)
            iso = iso_date_key(key)
            number = unknown_key_number(key)
            if iso is not None:
                dated[iso] = dedupe_owners(dated.get(iso, []) + owners)
            elif number is not None:
                labelled[number] = dedupe_owners(labelled.get(number, []) + owners)
            else:
                unlabelled.append(owners)

        current = self._resolve_all(
            document.current_owner_raw, collector, document.current_owner_addresses
        )

        if self.profile.merge_latest_sale_into_current:
            sale_dates = [k for k, owners in dated.items() if owners]
            if sale_dates:
                current = dedupe_owners(current + dated[max(sale_dates)])

        # Grantors never seen as a grantee or current owner
        known = {
            canonical_key(owner)
            for bucket in [*dated.values(), *labelled.values(), *unlabelled, current]
            for owner in bucket
        }
        leftovers = []
        for owner in self._resolve_all(document.prior_owners_raw, collector):
            key = canonical_key(owner)
            if key not in known:
                known.add(key)
                leftovers.append(owner)
        if leftovers:
            unlabelled.append(leftovers)

        unknown = {number: owners for number, owners in labelled.items() if owners}
        next_number = 1
        for owners in unlabelled:
            if not owners:
                continue
            while next_number in unknown:
                next_number += 1
            unknown[next_number] = owners

        owners_by_date: Dict[str, List[ParsedOwner]] = {}
        for key in sorted(dated):
            if dated[key]:
                owners_by_date[key] = dated[key]
        for number in sorted(unknown):
            owners_by_date[f"{UNKNOWN_PREFIX}{number}"] = unknown[number]
        owners_by_date[CURRENT_KEY] = current

        mailing_addresses = [
            MailingAddress(owner=owner, unnormalized_address=owner.mailing_address)
            for owner in current
            if owner.mailing_address
        ]

        invalid = collector.results()
        logger.debug(
            f"Assembled {len(owners_by_date)} buckets "
            f"({len(dated)} dated, {len(unknown)} unknown), {len(invalid)} invalid fragments"
        )
        return OwnerMappingResult(
            owners_by_date=owners_by_date,
            invalid_owners=invalid,
            mailing_addresses=mailing_addresses,
        )
