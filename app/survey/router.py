"""
Survey Endpoints

Endpoints:
- GET  /api/v1/survey/health     - module status (public)
- GET  /api/v1/survey/questions  - bilingual question catalogue with weights (public)
- POST /api/v1/survey/submit     - score, classify and store a submission
- GET  /api/v1/survey/me         - caller's latest stored assessment
- GET  /api/v1/survey/thresholds - current population thresholds (admin)

The caller is identified by the X-User-Id header, set by the
authenticating gateway in front of this service.
"""

import os
import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from .catalogue import build_catalogue
from .errors import SurveyException
from .models import (
    USER_ID_MAX_LENGTH,
    LatestAssessmentResponse,
    SubmitSurveyRequest,
    SubmitSurveyResponse,
    SurveySubmission,
    ThresholdResponse,
)
from .service import current_thresholds, get_latest_assessment, submit_survey
from .store import SurveyStore, get_store
from .weights import WEIGHTS_VERSION

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/survey",
    tags=["survey"],
)

MODULE_VERSION = "survey_scoring_v1"


def require_user_id(x_user_id: Optional[str] = Header(None, alias="X-User-Id")) -> str:
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Not authorized, no user identity")
    user_id = x_user_id.strip()
    if len(user_id) > USER_ID_MAX_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"X-User-Id must be at most {USER_ID_MAX_LENGTH} characters",
        )
    return user_id


def verify_admin_key(x_admin_api_key: str = Header(None, alias="X-Admin-API-Key")) -> str:
    """Verify admin API key from header."""
    expected_key = os.environ.get("ADMIN_API_KEY")

    if not expected_key:
        return "dev_mode"

    if not x_admin_api_key:
        raise HTTPException(status_code=401, detail="Missing X-Admin-API-Key header")

    if x_admin_api_key != expected_key:
        raise HTTPException(status_code=401, detail="Invalid admin API key")

    return x_admin_api_key


def _to_http(e: SurveyException) -> HTTPException:
    if e.http_code >= 500:
        logger.exception(f"Survey request failed: {e}")
    return HTTPException(status_code=e.http_code, detail=e.to_detail())


@router.get("/health")
def survey_health(store: SurveyStore = Depends(get_store)):
    """Health check for the survey module. Does not touch the database."""
    return {
        "status": "ok",
        "module": "survey_scoring",
        "version": MODULE_VERSION,
        "weights_version": WEIGHTS_VERSION,
        "store_backend": store.backend,
        "timestamp": datetime.utcnow().isoformat(),
    }


@router.get("/questions")
def survey_questions():
    return build_catalogue()


@router.post("/submit", response_model=SubmitSurveyResponse, status_code=201)
def submit(
    submission: SurveySubmission,
    user_id: str = Depends(require_user_id),
    store: SurveyStore = Depends(get_store),
):
    """
    Submit Set 1 (required) and optionally Sets 2 and 3.

    Partial submissions are classified as a preliminary assessment and
    replace any earlier record of the same user.
    """
    request = SubmitSurveyRequest(userId=user_id, **submission.model_dump())
    try:
        outcome = submit_survey(store, request)
    except SurveyException as e:
        raise _to_http(e)
    return SubmitSurveyResponse(assessment=outcome.assessment)


@router.get("/me", response_model=LatestAssessmentResponse)
def latest_assessment(
    user_id: str = Depends(require_user_id),
    store: SurveyStore = Depends(get_store),
):
    try:
        record = get_latest_assessment(store, user_id)
    except SurveyException as e:
        raise _to_http(e)
    return LatestAssessmentResponse(record=record)


@router.get("/thresholds", response_model=ThresholdResponse)
def thresholds(
    admin_key: str = Depends(verify_admin_key),
    store: SurveyStore = Depends(get_store),
):
    """Thresholds a submission would be classified against right now."""
    try:
        snapshot = current_thresholds(store)
    except SurveyException as e:
        raise _to_http(e)
    return ThresholdResponse(
        p33=snapshot.p33,
        p66=snapshot.p66,
        sample_size=snapshot.sample_size,
        fallback_used=snapshot.fallback_used,
    )
