"""
Survey Scoring - Error Codes
============================
Every failure raised by the scoring engine carries an error code and the
HTTP status the router should answer with.

- MISSING_REQUIRED_SET / INVALID_SET_LENGTH = 400 (caller resubmits)
- ANSWER_OUT_OF_RANGE = 422 (data integrity, never clamped)
- STORAGE_UNAVAILABLE = 503 (retryable, nothing persisted)
- PRECONDITION_VIOLATION = 500 (internal invariant break)
- ASSESSMENT_NOT_FOUND = 404
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class SurveyErrorCode(Enum):
    MISSING_REQUIRED_SET = "MISSING_REQUIRED_SET"
    INVALID_SET_LENGTH = "INVALID_SET_LENGTH"
    ANSWER_OUT_OF_RANGE = "ANSWER_OUT_OF_RANGE"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    PRECONDITION_VIOLATION = "PRECONDITION_VIOLATION"
    ASSESSMENT_NOT_FOUND = "ASSESSMENT_NOT_FOUND"


class SurveyException(Exception):
    """Base exception for survey scoring failures."""

    def __init__(self, error_code: SurveyErrorCode, message: str, http_code: int = 500):
        self.error_code = error_code
        self.message = message
        self.http_code = http_code
        super().__init__(f"{error_code.value}: {message}")

    def to_detail(self) -> Dict[str, Any]:
        return {"error_code": self.error_code.value, "message": self.message}


class SurveyValidationError(SurveyException):
    """Answer sets are missing or have the wrong shape."""

    def __init__(
        self,
        error_code: SurveyErrorCode,
        message: str,
        set_number: Optional[int] = None,
        set_numbers: Optional[List[int]] = None,
    ):
        self.set_number = set_number
        if set_numbers is None:
            set_numbers = [set_number] if set_number is not None else []
        self.set_numbers = list(set_numbers)
        super().__init__(error_code, message, http_code=400)

    def to_detail(self) -> Dict[str, Any]:
        detail = super().to_detail()
        detail["set_number"] = self.set_number
        detail["set_numbers"] = self.set_numbers
        return detail


class AnswerOutOfRangeError(SurveyException):
    """An answer is not an integer on the 1-5 scale."""

    def __init__(self, set_number: int, index: int, value: Any):
        self.set_number = set_number
        self.index = index
        self.value = value
        super().__init__(
            SurveyErrorCode.ANSWER_OUT_OF_RANGE,
            f"Score Set {set_number} answer #{index + 1} must be an integer between 1 and 5, got {value!r}",
            http_code=422,
        )


class StorageUnavailableError(SurveyException):
    def __init__(self, message: str):
        super().__init__(SurveyErrorCode.STORAGE_UNAVAILABLE, message, http_code=503)


class PreconditionViolation(SurveyException):
    def __init__(self, message: str):
        super().__init__(SurveyErrorCode.PRECONDITION_VIOLATION, message, http_code=500)


class AssessmentNotFoundError(SurveyException):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(
            SurveyErrorCode.ASSESSMENT_NOT_FOUND,
            "No survey found for this user. Please take the survey first.",
            http_code=404,
        )
