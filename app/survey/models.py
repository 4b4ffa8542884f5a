"""
Survey Scoring Models

Pydantic models for survey submissions, assessment results and stored
records, plus the plain dataclasses passed between the pure scoring steps.

Version: survey_scoring_v1
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field

from .weights import WEIGHTS_VERSION

# survey_records.user_id column width
USER_ID_MAX_LENGTH = 128


class RiskLevel(str, Enum):
    LOW = "Low Risk"
    MODERATE = "Moderate Risk"
    HIGH = "High Risk"


@dataclass(frozen=True)
class ScoreBreakdown:
    """Weighted totals over the answer sets that were supplied."""
    total_score: int
    max_possible: int
    min_possible: int
    questions_answered: int
    sets_answered: Tuple[int, ...] = ()


@dataclass(frozen=True)
class ThresholdSnapshot:
    """Population cut points for one submission. Never persisted."""
    p33: float
    p66: float
    sample_size: int = 0
    fallback_used: bool = False


class SurveySubmission(BaseModel):
    """
    Answer sets as sent by the survey form or the chat agent.

    Left untyped on purpose so shape and range problems are reported by the
    validator and scorer with the set they belong to, not by pydantic.
    """
    scoresSet1: Optional[Any] = None
    scoresSet2: Optional[Any] = None
    scoresSet3: Optional[Any] = None


class SubmitSurveyRequest(SurveySubmission):
    """Submission bound to an externally authenticated user."""
    userId: str = Field(min_length=1, max_length=USER_ID_MAX_LENGTH)


class AssessmentResult(BaseModel):
    """Classification returned to the caller and copied onto the record."""
    riskLevel: RiskLevel
    suggestions: str
    totalScore: float
    questionsAnswered: int
    percentage: float = Field(ge=0, le=100)

    class Config:
        extra = "forbid"


class SurveyRecord(BaseModel):
    """
    One stored assessment per user.

    A later submission replaces the record; createdAt keeps the time of the
    first submission.
    """
    userId: str
    scoresSet1: List[int]
    scoresSet2: Optional[List[int]] = None
    scoresSet3: Optional[List[int]] = None
    riskLevel: RiskLevel
    suggestions: str
    totalScore: float
    questionsAnswered: int
    percentage: float
    weightsVersion: str = WEIGHTS_VERSION
    assessmentHash: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    class Config:
        extra = "forbid"

    def to_assessment(self) -> AssessmentResult:
        return AssessmentResult(
            riskLevel=self.riskLevel,
            suggestions=self.suggestions,
            totalScore=self.totalScore,
            questionsAnswered=self.questionsAnswered,
            percentage=self.percentage,
        )


# Response models for API endpoints

class SubmitSurveyResponse(BaseModel):
    success: bool = True
    message: str = "Survey submitted successfully"
    assessment: AssessmentResult
    generated_at: datetime = Field(default_factory=datetime.utcnow)


class LatestAssessmentResponse(BaseModel):
    success: bool = True
    record: SurveyRecord


class ThresholdResponse(BaseModel):
    p33: float
    p66: float
    sample_size: int
    fallback_used: bool
    generated_at: datetime = Field(default_factory=datetime.utcnow)
