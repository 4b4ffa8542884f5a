"""
Population Threshold Resolver

Risk tiers are relative to everyone who has taken the survey: the 33rd and
66th percentiles of all stored percentages are the Low/Moderate and
Moderate/High cut points. The distribution is read fresh for every
submission and may already be stale when the record is written; small
drift between concurrent submitters is accepted.
"""

import logging
import math
from typing import Iterable, List, Optional

from .models import ThresholdSnapshot

logger = logging.getLogger(__name__)

FALLBACK_P33 = 33.3
FALLBACK_P66 = 66.6

PERCENTILE_RANKS = (0.33, 0.66)


def nearest_rank_percentile(sorted_values: List[float], rank: float) -> float:
    """
    Nearest-rank percentile of an ascending, non-empty list.

    Always returns an observed value, like a document store's approximate
    $percentile over small collections.
    """
    n = len(sorted_values)
    position = max(int(math.ceil(rank * n)) - 1, 0)
    return sorted_values[min(position, n - 1)]


def _clean(values: Iterable[Optional[float]]) -> List[float]:
    cleaned = []
    for v in values:
        if v is None:
            continue
        f = float(v)
        if math.isfinite(f):
            cleaned.append(f)
    return cleaned


def resolve_thresholds(all_percentages: Iterable[Optional[float]]) -> ThresholdSnapshot:
    """
    Resolve {p33, p66} from every stored percentage, the submitter's own
    previous value included.

    Falls back to {33.3, 66.6} when there is nothing to compute from.
    """
    values = sorted(_clean(all_percentages))
    cuts = [nearest_rank_percentile(values, r) for r in PERCENTILE_RANKS] if values else []

    if len(cuts) < 2:
        logger.info("No stored percentages, using fallback thresholds %s/%s", FALLBACK_P33, FALLBACK_P66)
        return ThresholdSnapshot(
            p33=FALLBACK_P33,
            p66=FALLBACK_P66,
            sample_size=len(values),
            fallback_used=True,
        )

    return ThresholdSnapshot(
        p33=cuts[0],
        p66=cuts[1],
        sample_size=len(values),
        fallback_used=False,
    )
