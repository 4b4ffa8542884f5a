"""
Survey Submission Flow

validate -> score -> read population percentiles -> classify -> upsert

Validation and scoring are pure and finish before the store is touched.
The percentile read happens before the record is written; a failure in
either store call fails the whole submission and nothing is persisted.
"""

import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

from app.shared.hashing import canonicalize_and_hash

from .classify import classify
from .errors import AssessmentNotFoundError, StorageUnavailableError, SurveyException
from .models import (
    AssessmentResult,
    SubmitSurveyRequest,
    SurveyRecord,
    ThresholdSnapshot,
)
from .scoring import compute_percentage, score_answer_sets
from .store import SurveyStore
from .thresholds import resolve_thresholds
from .validate import validate_answer_sets
from .weights import WEIGHTS_VERSION

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class SubmissionOutcome:
    assessment: AssessmentResult
    record: SurveyRecord
    thresholds: ThresholdSnapshot


def _call_store(operation: str, fn: Callable[[], T]) -> T:
    """Run a store call; anything the adapter did not classify is a storage failure."""
    try:
        return fn()
    except SurveyException:
        raise
    except Exception as e:
        logger.error(f"Survey store {operation} failed: {type(e).__name__}: {e}")
        raise StorageUnavailableError(f"{operation} failed: {e}") from e


def assessment_hash(assessment: AssessmentResult) -> str:
    return canonicalize_and_hash(assessment.model_dump(mode="json"))


def current_thresholds(store: SurveyStore) -> ThresholdSnapshot:
    """Threshold snapshot over every stored percentage, right now."""
    percentages = _call_store("percentile read", store.aggregate_percentiles)
    return resolve_thresholds(percentages)


def submit_survey(store: SurveyStore, request: SubmitSurveyRequest) -> SubmissionOutcome:
    """
    Score, classify and store one survey submission.

    Raises:
        SurveyValidationError: missing Set 1 or wrong-length set
        AnswerOutOfRangeError: answer outside 1-5
        StorageUnavailableError: percentile read or upsert failed
        PreconditionViolation: scorer produced a percentage outside [0, 100]
    """
    try:
        validate_answer_sets(request.scoresSet1, request.scoresSet2, request.scoresSet3)
    except SurveyException as e:
        logger.info(f"Survey rejected for user {request.userId}: {e}")
        raise

    breakdown = score_answer_sets(request.scoresSet1, request.scoresSet2, request.scoresSet3)
    percentage = round(compute_percentage(breakdown), 1)

    thresholds = current_thresholds(store)

    assessment = classify(
        percentage,
        thresholds,
        breakdown.questions_answered,
        total_score=breakdown.total_score,
    )

    record = SurveyRecord(
        userId=request.userId,
        scoresSet1=list(request.scoresSet1),
        scoresSet2=list(request.scoresSet2) if request.scoresSet2 is not None else None,
        scoresSet3=list(request.scoresSet3) if request.scoresSet3 is not None else None,
        riskLevel=assessment.riskLevel,
        suggestions=assessment.suggestions,
        totalScore=assessment.totalScore,
        questionsAnswered=assessment.questionsAnswered,
        percentage=assessment.percentage,
        weightsVersion=WEIGHTS_VERSION,
        assessmentHash=assessment_hash(assessment),
    )

    stored = _call_store("upsert", lambda: store.upsert_by_user(request.userId, record))

    logger.info(
        f"Survey stored for user {request.userId}: "
        f"answered={assessment.questionsAnswered} percentage={assessment.percentage} "
        f"risk={assessment.riskLevel.value} thresholds={thresholds.p33}/{thresholds.p66}"
        f"{' (fallback)' if thresholds.fallback_used else ''}"
    )

    return SubmissionOutcome(assessment=assessment, record=stored, thresholds=thresholds)


def get_latest_assessment(store: SurveyStore, user_id: str) -> SurveyRecord:
    """The user's stored record; raises AssessmentNotFoundError if none."""
    record = _call_store("lookup", lambda: store.find_by_user(user_id))
    if record is None:
        raise AssessmentNotFoundError(user_id)
    return record
