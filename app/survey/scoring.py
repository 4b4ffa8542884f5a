"""
Survey Weighted Scorer

Turns raw 1-5 answers into a weighted dependency score.

For every supplied set and every answer v at index i:
1. w = weight of i in that set (high 3 / moderate 2 / low 1)
2. Set 1 inverted index: v = (MAX_SCALE + 1) - v
3. total += v * w, max += MAX_SCALE * w, min += MIN_SCALE * w

Sets that were not supplied contribute nothing, so a Set 1 only
submission is normalized on the same 0-100 scale as a full survey.
"""

from typing import Any, Optional, Sequence

from .errors import AnswerOutOfRangeError
from .models import ScoreBreakdown
from .weights import WEIGHT_TABLE, MIN_SCALE, MAX_SCALE, SetWeights


def _answer_value(weights: SetWeights, index: int, value: Any) -> int:
    # bool is an int subclass; JSON true/false is not an answer
    if isinstance(value, bool) or not isinstance(value, int):
        raise AnswerOutOfRangeError(weights.set_number, index, value)
    if not MIN_SCALE <= value <= MAX_SCALE:
        raise AnswerOutOfRangeError(weights.set_number, index, value)
    return value


def effective_answer(weights: SetWeights, index: int, value: Any) -> int:
    """Answer after range check and inversion."""
    v = _answer_value(weights, index, value)
    if weights.is_inverted(index):
        return (MAX_SCALE + 1) - v
    return v


def score_answer_sets(
    set1: Sequence[Any],
    set2: Optional[Sequence[Any]] = None,
    set3: Optional[Sequence[Any]] = None,
) -> ScoreBreakdown:
    """
    Compute weighted totals over the supplied answer sets.

    Expects shapes already checked by validate_answer_sets().

    Raises:
        AnswerOutOfRangeError: an answer is not an integer in [1, 5]
    """
    total_score = 0
    max_possible = 0
    min_possible = 0
    questions_answered = 0
    sets_answered = []

    for weights, answers in zip(WEIGHT_TABLE, (set1, set2, set3)):
        if answers is None:
            continue
        sets_answered.append(weights.set_number)
        for index, raw in enumerate(answers):
            w = weights.weight(index)
            total_score += effective_answer(weights, index, raw) * w
            max_possible += MAX_SCALE * w
            min_possible += MIN_SCALE * w
            questions_answered += 1

    return ScoreBreakdown(
        total_score=total_score,
        max_possible=max_possible,
        min_possible=min_possible,
        questions_answered=questions_answered,
        sets_answered=tuple(sets_answered),
    )


def compute_percentage(breakdown: ScoreBreakdown) -> float:
    """Normalize the weighted total to 0-100. Unrounded."""
    span = breakdown.max_possible - breakdown.min_possible
    if span <= 0:
        return 0.0
    return 100.0 * (breakdown.total_score - breakdown.min_possible) / span
