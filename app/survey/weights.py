"""
Survey Risk Weight Table
========================
Single versioned table of per-question risk weights for the three answer sets.

Each set partitions its question indices (0-based) into high (3),
moderate (2) and low (1) risk weight. Set 1 carries one inverted
question, scored as (MAX_SCALE + 1) - raw.

Changing any index here changes classification outcomes. Bump
WEIGHTS_VERSION when editing.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

WEIGHTS_VERSION = "survey_weights_v1"

MIN_SCALE = 1
MAX_SCALE = 5

HIGH_WEIGHT = 3
MODERATE_WEIGHT = 2
LOW_WEIGHT = 1


@dataclass(frozen=True)
class SetWeights:
    """Weight partition for one answer set."""
    set_number: int
    request_field: str
    length: int
    high: FrozenSet[int]
    moderate: FrozenSet[int]
    inverted_index: Optional[int] = None

    def weight(self, index: int) -> int:
        if index in self.high:
            return HIGH_WEIGHT
        if index in self.moderate:
            return MODERATE_WEIGHT
        return LOW_WEIGHT

    def tier(self, index: int) -> str:
        return {HIGH_WEIGHT: "high", MODERATE_WEIGHT: "moderate", LOW_WEIGHT: "low"}[self.weight(index)]

    def is_inverted(self, index: int) -> bool:
        return self.inverted_index is not None and index == self.inverted_index

    @property
    def total_weight(self) -> int:
        return sum(self.weight(i) for i in range(self.length))


SET_1 = SetWeights(
    set_number=1,
    request_field="scoresSet1",
    length=25,
    high=frozenset({2, 4, 5, 6, 7, 9, 10, 14, 15, 21, 22, 24}),
    moderate=frozenset({0, 3, 8, 11, 16, 17, 18, 19, 23}),
    # "Do you feel more productive when you reduce screen time?"
    inverted_index=16,
)

SET_2 = SetWeights(
    set_number=2,
    request_field="scoresSet2",
    length=25,
    high=frozenset({6, 14, 15, 18, 20, 22}),
    moderate=frozenset({0, 1, 5, 7, 8, 9, 10, 13, 16, 19, 21, 23}),
)

SET_3 = SetWeights(
    set_number=3,
    request_field="scoresSet3",
    length=20,
    high=frozenset({0, 4, 9, 12, 13, 18, 19}),
    moderate=frozenset({1, 2, 6, 7, 8, 10, 11, 14}),
)

WEIGHT_TABLE: Tuple[SetWeights, ...] = (SET_1, SET_2, SET_3)

WEIGHTS_BY_SET: Dict[int, SetWeights] = {w.set_number: w for w in WEIGHT_TABLE}

FULL_SURVEY_QUESTIONS = sum(w.length for w in WEIGHT_TABLE)


def _check_table() -> None:
    for w in WEIGHT_TABLE:
        overlap = w.high & w.moderate
        if overlap:
            raise ValueError(f"Set {w.set_number} has indices in both high and moderate: {sorted(overlap)}")
        out_of_bounds = [i for i in (w.high | w.moderate) if not 0 <= i < w.length]
        if out_of_bounds:
            raise ValueError(f"Set {w.set_number} has indices outside 0..{w.length - 1}: {sorted(out_of_bounds)}")
        if w.inverted_index is not None and not 0 <= w.inverted_index < w.length:
            raise ValueError(f"Set {w.set_number} inverted index {w.inverted_index} out of bounds")
    inverted = [w.set_number for w in WEIGHT_TABLE if w.inverted_index is not None]
    if inverted != [1]:
        raise ValueError(f"Exactly one inverted question is expected in Set 1, found in sets {inverted}")


_check_table()
