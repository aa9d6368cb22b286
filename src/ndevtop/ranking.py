"""
Ordering of the active device list.
"""

from typing import Iterable, List, Optional

from src.utils.logger import get_logger

from .models import DeviceRecord, SortSpec, SORT_BY_NAME, SORT_KEYS

logger = get_logger(__name__)


class RankingEngine:
    """Holds the sort spec and orders device records by it."""

    def __init__(self, spec: Optional[SortSpec] = None):
        self.spec = spec if spec is not None else SortSpec()

    def set_sort_order(self, key: str, ascending: bool) -> None:
        """Change the ranking; unknown keys leave the spec as it is."""
        if key not in SORT_KEYS:
            logger.debug(f"Ignoring unknown sort key {key!r}")
            return
        self.spec.key = key
        self.spec.ascending = ascending

    def sort_key(self, record: DeviceRecord):
        if self.spec.key == SORT_BY_NAME:
            return (record.name,)
        return (record.diff(self.spec.key), record.name)

    def sort(self, records: Iterable[DeviceRecord]) -> List[DeviceRecord]:
        """Return a new list ordered by the current spec.

        Descending order is the ascending order reversed, so ties on the
        metric come out in reverse name order as well.
        """
        ordered = sorted(records, key=self.sort_key)
        if not self.spec.ascending:
            ordered.reverse()
        return ordered
