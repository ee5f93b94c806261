from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Iterator

ROC_OFFSET = 1911

# Empirical bound: no lunar year boundary sits further than this from the
# Gregorian date being searched around.
DEFAULT_RADIUS_DAYS = 220


def to_ad_year(era: str, year: int) -> int:
    """Gregorian year for `year` in `era`; any era other than ROC (case-insensitive) is AD."""
    return year + ROC_OFFSET if era.lower() == "roc" else year

def to_roc_year(ad_year: int) -> int:
    return ad_year - ROC_OFFSET


@dataclass(frozen=True)
class SearchWindow:
    """Closed interval [center - radius, center + radius] scanned in ascending order."""
    radius_days: int = DEFAULT_RADIUS_DAYS

    def __post_init__(self) -> None:
        if self.radius_days < 0:
            raise ValueError("radius_days must be non-negative")

    @property
    def size(self) -> int:
        return 2 * self.radius_days + 1

    def dates(self, center: date) -> Iterator[date]:
        # Clamp to the representable date range rather than overflow.
        c = center.toordinal()
        lo = max(date.min.toordinal(), c - self.radius_days)
        hi = min(date.max.toordinal(), c + self.radius_days)
        for ordinal in range(lo, hi + 1):
            yield date.fromordinal(ordinal)


DEFAULT_WINDOW = SearchWindow()
