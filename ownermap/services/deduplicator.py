"""Owner deduplication within one date bucket."""

from typing import List, Sequence

from ownermap.models.owner import Company, ParsedOwner, Person
from ownermap.utils.text import comparison_key


def canonical_key(owner) -> str:
    """
    Equality key for an owner, or "" when required fields are missing.

    company:<name>
    person:<prefix>|<first>|<middle>|<last>|<suffix>
    """
    if isinstance(owner, Company):
        name = comparison_key(owner.name)
        return f"company:{name}" if name else ""

    if isinstance(owner, Person):
        first = comparison_key(owner.first_name)
        last = comparison_key(owner.last_name)
        if not first or not last:
            return ""
        parts = [
            comparison_key(owner.prefix_name),
            first,
            comparison_key(owner.middle_name),
            last,
            comparison_key(owner.suffix_name),
        ]
        return "person:" + "|".join(parts)

    return ""


def _backfill(kept, duplicate):
    missing = {
        field: getattr(duplicate, field)
        for field in type(kept).model_fields
        if getattr(kept, field) is None and getattr(duplicate, field) is not None
    }
    return kept.model_copy(update=missing) if missing else kept


def dedupe_owners(owners: Sequence[ParsedOwner]) -> List[ParsedOwner]:
    """Drop repeated owners, keeping the first and backfilling its empty optional fields."""
    kept = {}
    for owner in owners:
        key = canonical_key(owner)
        if not key:
            continue
        if key in kept:
            kept[key] = _backfill(kept[key], owner)
        else:
            kept[key] = owner
    return list(kept.values())
