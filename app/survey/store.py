"""
Survey Record Store

Storage adapters behind the scoring engine. The engine needs exactly:
- aggregate_percentiles(): every user's current percentage
- upsert_by_user(): atomic create-or-replace keyed by user id

plus find_by_user() for the latest-assessment lookup.

Adapters:
- PostgresSurveyStore: psycopg2, single INSERT ... ON CONFLICT per upsert
- InMemorySurveyStore: dict guarded by a lock (local runs, tests)

Any storage failure surfaces as StorageUnavailableError; nothing is
written on failure.
"""

import os
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional

import psycopg2
from psycopg2.extras import Json, RealDictCursor

from .errors import StorageUnavailableError
from .migration import SURVEY_MIGRATION_SQL
from .models import SurveyRecord

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL")
STORE_BACKEND = os.getenv("SURVEY_STORE_BACKEND", "postgres").lower()
CONNECT_TIMEOUT = int(os.getenv("SURVEY_DB_CONNECT_TIMEOUT", "5"))


class SurveyStore(ABC):
    backend = "abstract"

    @abstractmethod
    def aggregate_percentiles(self) -> List[float]:
        """Current percentage of every stored record."""

    @abstractmethod
    def upsert_by_user(self, user_id: str, record: SurveyRecord) -> SurveyRecord:
        """Create or replace the user's record and return what was stored."""

    @abstractmethod
    def find_by_user(self, user_id: str) -> Optional[SurveyRecord]:
        """The user's record, or None."""


class InMemorySurveyStore(SurveyStore):
    backend = "memory"

    def __init__(self):
        self._records: Dict[str, SurveyRecord] = {}
        self._lock = Lock()

    def aggregate_percentiles(self) -> List[float]:
        with self._lock:
            return [r.percentage for r in self._records.values()]

    def upsert_by_user(self, user_id: str, record: SurveyRecord) -> SurveyRecord:
        now = datetime.now(timezone.utc)
        with self._lock:
            existing = self._records.get(user_id)
            stored = record.model_copy(update={
                "userId": user_id,
                "createdAt": existing.createdAt if existing else now,
                "updatedAt": now,
            }, deep=True)
            self._records[user_id] = stored
        return stored.model_copy(deep=True)

    def find_by_user(self, user_id: str) -> Optional[SurveyRecord]:
        with self._lock:
            record = self._records.get(user_id)
        return record.model_copy(deep=True) if record else None

    def count(self) -> int:
        with self._lock:
            return len(self._records)


UPSERT_SQL = """
    INSERT INTO survey_records (
        user_id, scores_set1, scores_set2, scores_set3,
        risk_level, suggestions, total_score, questions_answered, percentage,
        weights_version, assessment_hash, created_at, updated_at
    )
    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, NOW(), NOW())
    ON CONFLICT (user_id) DO UPDATE SET
        scores_set1 = EXCLUDED.scores_set1,
        scores_set2 = EXCLUDED.scores_set2,
        scores_set3 = EXCLUDED.scores_set3,
        risk_level = EXCLUDED.risk_level,
        suggestions = EXCLUDED.suggestions,
        total_score = EXCLUDED.total_score,
        questions_answered = EXCLUDED.questions_answered,
        percentage = EXCLUDED.percentage,
        weights_version = EXCLUDED.weights_version,
        assessment_hash = EXCLUDED.assessment_hash,
        updated_at = NOW()
    RETURNING *
"""


def _json_or_none(answers: Optional[List[int]]):
    return Json(answers) if answers is not None else None


def row_to_record(row: Dict[str, Any]) -> SurveyRecord:
    return SurveyRecord(
        userId=row["user_id"],
        scoresSet1=row["scores_set1"],
        scoresSet2=row.get("scores_set2"),
        scoresSet3=row.get("scores_set3"),
        riskLevel=row["risk_level"],
        suggestions=row["suggestions"],
        totalScore=row["total_score"],
        questionsAnswered=row["questions_answered"],
        percentage=row["percentage"],
        weightsVersion=row["weights_version"],
        assessmentHash=row.get("assessment_hash"),
        createdAt=row.get("created_at"),
        updatedAt=row.get("updated_at"),
    )


class PostgresSurveyStore(SurveyStore):
    backend = "postgres"

    def __init__(self, database_url: Optional[str] = None, connect_timeout: int = CONNECT_TIMEOUT):
        self._database_url = database_url or DATABASE_URL
        self._connect_timeout = connect_timeout

    def _get_conn(self):
        if not self._database_url:
            raise StorageUnavailableError("DATABASE_URL is not configured")
        try:
            return psycopg2.connect(
                self._database_url,
                cursor_factory=RealDictCursor,
                connect_timeout=self._connect_timeout,
            )
        except psycopg2.Error as e:
            logger.error(f"Database connection error: {e}")
            raise StorageUnavailableError(f"Database connection failed: {e}") from e

    def ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(SURVEY_MIGRATION_SQL)
            conn.commit()
            cur.close()
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"survey_records migration failed: {e}")
            raise StorageUnavailableError(f"Schema migration failed: {e}") from e
        finally:
            conn.close()

    def aggregate_percentiles(self) -> List[float]:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT percentage FROM survey_records WHERE percentage IS NOT NULL")
            rows = cur.fetchall()
            cur.close()
            return [float(row["percentage"]) for row in rows]
        except psycopg2.Error as e:
            logger.error(f"Percentile read failed: {e}")
            raise StorageUnavailableError(f"Percentile read failed: {e}") from e
        finally:
            conn.close()

    def upsert_by_user(self, user_id: str, record: SurveyRecord) -> SurveyRecord:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(UPSERT_SQL, (
                user_id,
                Json(record.scoresSet1),
                _json_or_none(record.scoresSet2),
                _json_or_none(record.scoresSet3),
                record.riskLevel.value,
                record.suggestions,
                record.totalScore,
                record.questionsAnswered,
                record.percentage,
                record.weightsVersion,
                record.assessmentHash,
            ))
            row = cur.fetchone()
            conn.commit()
            cur.close()
            return row_to_record(row)
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Survey upsert failed for user {user_id}: {e}")
            raise StorageUnavailableError(f"Survey upsert failed: {e}") from e
        finally:
            conn.close()

    def find_by_user(self, user_id: str) -> Optional[SurveyRecord]:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT * FROM survey_records WHERE user_id = %s", (user_id,))
            row = cur.fetchone()
            cur.close()
            return row_to_record(row) if row else None
        except psycopg2.Error as e:
            logger.error(f"Survey lookup failed for user {user_id}: {e}")
            raise StorageUnavailableError(f"Survey lookup failed: {e}") from e
        finally:
            conn.close()


_store: Optional[SurveyStore] = None
_store_lock = Lock()


def get_store() -> SurveyStore:
    """Process-wide store for the configured backend."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                if STORE_BACKEND == "memory":
                    _store = InMemorySurveyStore()
                else:
                    _store = PostgresSurveyStore()
                logger.info(f"Survey store backend: {_store.backend}")
    return _store
