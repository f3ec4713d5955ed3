from typing import Iterable, List

from loguru import logger

from ownermap.models.owner import InvalidFragment, ReasonCode
from ownermap.utils.text import comparison_key


class InvalidFragmentCollector:
    """Append-only audit of rejected owner fragments."""

    def __init__(self):
        self._items: List[InvalidFragment] = []

    def add(self, raw: str, reason: ReasonCode) -> None:
        logger.debug(f"Rejected owner fragment {raw!r}: {reason.value}")
        self._items.append(InvalidFragment(raw=raw, reason=reason))

    def extend(self, items: Iterable[InvalidFragment]) -> None:
        for item in items:
            self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def results(self) -> List[InvalidFragment]:
        """Entries deduplicated by (normalized raw, reason); first spelling wins."""
        seen = set()
        unique = []
        for item in self._items:
            key = (comparison_key(item.raw), item.reason)
            if key in seen:
                continue
            seen.add(key)
            unique.append(item)
        return unique
