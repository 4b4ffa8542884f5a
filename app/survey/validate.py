"""
Answer set shape checks, run before any scoring or storage access.

Only lengths are checked here. Per-answer range is enforced by the scorer.
Every set is checked; one error names all failing sets, Set 1 first.
"""

from typing import Any, List, Optional, Sequence, Tuple

from .errors import SurveyErrorCode, SurveyValidationError
from .weights import SET_1, SET_2, SET_3, SetWeights


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _has_length(answers: Any, weights: SetWeights) -> bool:
    return _is_sequence(answers) and len(answers) == weights.length


def _set_problems(
    set1: Optional[Sequence[Any]],
    set2: Optional[Sequence[Any]],
    set3: Optional[Sequence[Any]],
) -> List[Tuple[SurveyErrorCode, str, int]]:
    problems = []
    if set1 is None or not _has_length(set1, SET_1):
        problems.append((
            SurveyErrorCode.MISSING_REQUIRED_SET,
            f"Score Set 1 is required and must contain {SET_1.length} answers",
            SET_1.set_number,
        ))
    for answers, weights in ((set2, SET_2), (set3, SET_3)):
        if answers is not None and not _has_length(answers, weights):
            problems.append((
                SurveyErrorCode.INVALID_SET_LENGTH,
                f"Score Set {weights.set_number} must contain {weights.length} answers",
                weights.set_number,
            ))
    return problems


def validate_answer_sets(
    set1: Optional[Sequence[Any]],
    set2: Optional[Sequence[Any]] = None,
    set3: Optional[Sequence[Any]] = None,
) -> None:
    """
    Validate answer set shapes. Pure; raises SurveyValidationError.

    Set 1 is mandatory and must hold exactly 25 answers. Sets 2 and 3 are
    optional, but when present must hold exactly 25 and 20 answers.

    The first failing set gives the error code and set_number; set_numbers
    lists every failing set and the message joins all of their messages.
    """
    problems = _set_problems(set1, set2, set3)
    if not problems:
        return

    error_code, _, set_number = problems[0]
    raise SurveyValidationError(
        error_code,
        "; ".join(message for _, message, _ in problems),
        set_number=set_number,
        set_numbers=[n for _, _, n in problems],
    )
