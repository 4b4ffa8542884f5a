"""
Survey Scoring Module

Digital-wellness risk scoring: weighted Likert answers are normalized to a
0-100 dependency percentage and classified against the population's
33rd/66th percentiles.

Design Principles:
- PURE: validation, scoring and classification have no side effects
- PARTIAL: Set 1 alone is a valid, preliminary submission
- ONE RECORD PER USER: later submissions replace earlier ones
- DETERMINISTIC: same answers and thresholds -> same assessment

Version: survey_scoring_v1
"""

from .models import (
    RiskLevel,
    ScoreBreakdown,
    ThresholdSnapshot,
    SurveySubmission,
    SubmitSurveyRequest,
    AssessmentResult,
    SurveyRecord,
)
from .errors import (
    SurveyErrorCode,
    SurveyException,
    SurveyValidationError,
    AnswerOutOfRangeError,
    StorageUnavailableError,
    PreconditionViolation,
    AssessmentNotFoundError,
)
from .validate import validate_answer_sets
from .scoring import score_answer_sets, compute_percentage
from .thresholds import resolve_thresholds
from .classify import classify
from .store import SurveyStore, PostgresSurveyStore, InMemorySurveyStore, get_store
from .service import submit_survey, get_latest_assessment, current_thresholds
from .router import router as survey_router

__all__ = [
    # Models
    "RiskLevel",
    "ScoreBreakdown",
    "ThresholdSnapshot",
    "SurveySubmission",
    "SubmitSurveyRequest",
    "AssessmentResult",
    "SurveyRecord",
    # Errors
    "SurveyErrorCode",
    "SurveyException",
    "SurveyValidationError",
    "AnswerOutOfRangeError",
    "StorageUnavailableError",
    "PreconditionViolation",
    "AssessmentNotFoundError",
    # Functions
    "validate_answer_sets",
    "score_answer_sets",
    "compute_percentage",
    "resolve_thresholds",
    "classify",
    "submit_survey",
    "get_latest_assessment",
    "current_thresholds",
    # Storage
    "SurveyStore",
    "PostgresSurveyStore",
    "InMemorySurveyStore",
    "get_store",
    # Router
    "survey_router",
]

__version__ = "survey_scoring_v1"
