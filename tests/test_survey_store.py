"""
Survey Record Store Tests

In-memory adapter:
- Upsert creates, then replaces; one record per user
- createdAt survives replacement, updatedAt moves
- Returned records are copies

Postgres adapter (psycopg2 mocked):
- ON CONFLICT upsert, commit, connection always closed
- psycopg2 errors => StorageUnavailableError, rollback on write failure
- Missing DATABASE_URL => StorageUnavailableError
"""

import threading
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import psycopg2
import pytest

from app.survey import store as store_module
from app.survey.errors import StorageUnavailableError, SurveyErrorCode
from app.survey.migration import get_migration_sql
from app.survey.models import USER_ID_MAX_LENGTH, RiskLevel, SurveyRecord
from app.survey.store import (
    InMemorySurveyStore,
    PostgresSurveyStore,
    row_to_record,
)


# ============================================================================
# TEST FIXTURES
# ============================================================================

def _record(user_id="user-1", percentage=50.0, risk=RiskLevel.MODERATE, set2=None):
    return SurveyRecord(
        userId=user_id,
        scoresSet1=[3] * 25,
        scoresSet2=set2,
        riskLevel=risk,
        suggestions="keep going",
        totalScore=174,
        questionsAnswered=25 if set2 is None else 50,
        percentage=percentage,
        assessmentHash="sha256:abc",
    )


@pytest.fixture
def memory_store():
    return InMemorySurveyStore()


@pytest.fixture
def db_row():
    ts = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)
    return {
        "user_id": "user-1",
        "scores_set1": [3] * 25,
        "scores_set2": None,
        "scores_set3": None,
        "risk_level": "Moderate Risk",
        "suggestions": "keep going",
        "total_score": 174.0,
        "questions_answered": 25,
        "percentage": 50.0,
        "weights_version": "survey_weights_v1",
        "assessment_hash": "sha256:abc",
        "created_at": ts,
        "updated_at": ts,
    }


@pytest.fixture
def mock_conn():
    conn = MagicMock()
    cursor = MagicMock()
    conn.cursor.return_value = cursor
    with patch("app.survey.store.psycopg2.connect", return_value=conn) as connect:
        yield connect, conn, cursor


@pytest.fixture
def pg_store():
    return PostgresSurveyStore(database_url="postgresql://test/survey")


# ============================================================================
# IN-MEMORY STORE
# ============================================================================

class TestInMemoryStore:

    def test_empty(self, memory_store):
        assert memory_store.aggregate_percentiles() == []
        assert memory_store.find_by_user("nobody") is None

    def test_upsert_creates(self, memory_store):
        stored = memory_store.upsert_by_user("user-1", _record())

        assert stored.userId == "user-1"
        assert stored.createdAt is not None
        assert stored.updatedAt == stored.createdAt
        assert memory_store.count() == 1

    def test_upsert_replaces(self, memory_store):
        first = memory_store.upsert_by_user("user-1", _record(percentage=50.0))
        second = memory_store.upsert_by_user(
            "user-1", _record(percentage=80.0, risk=RiskLevel.HIGH, set2=[4] * 25)
        )

        assert memory_store.count() == 1
        assert memory_store.aggregate_percentiles() == [80.0]
        assert second.createdAt == first.createdAt
        assert second.updatedAt >= first.updatedAt
        assert second.scoresSet2 == [4] * 25

    def test_user_id_from_key(self, memory_store):
        stored = memory_store.upsert_by_user("user-2", _record(user_id="user-1"))

        assert stored.userId == "user-2"
        assert memory_store.find_by_user("user-1") is None

    def test_aggregate_covers_all_users(self, memory_store):
        memory_store.upsert_by_user("a", _record("a", 10.0))
        memory_store.upsert_by_user("b", _record("b", 20.0))
        memory_store.upsert_by_user("c", _record("c", 30.0))

        assert sorted(memory_store.aggregate_percentiles()) == [10.0, 20.0, 30.0]

    def test_find_returns_copy(self, memory_store):
        memory_store.upsert_by_user("user-1", _record())

        found = memory_store.find_by_user("user-1")
        found.scoresSet1.append(99)

        assert len(memory_store.find_by_user("user-1").scoresSet1) == 25

    def test_concurrent_upserts_same_user(self, memory_store):
        def submit(p):
            memory_store.upsert_by_user("user-1", _record(percentage=p))

        threads = [threading.Thread(target=submit, args=(float(i),)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert memory_store.count() == 1
        assert len(memory_store.aggregate_percentiles()) == 1


# ============================================================================
# ROW MAPPING
# ============================================================================

class TestRowMapping:

    def test_row_to_record(self, db_row):
        record = row_to_record(db_row)

        assert record.userId == "user-1"
        assert record.riskLevel == RiskLevel.MODERATE
        assert record.scoresSet2 is None
        assert record.weightsVersion == "survey_weights_v1"
        assert record.createdAt == db_row["created_at"]


# ============================================================================
# POSTGRES STORE
# ============================================================================

class TestPostgresStore:

    def test_no_database_url(self, monkeypatch):
        monkeypatch.setattr(store_module, "DATABASE_URL", None)
        pg = PostgresSurveyStore()

        with pytest.raises(StorageUnavailableError) as exc:
            pg.aggregate_percentiles()

        assert exc.value.error_code == SurveyErrorCode.STORAGE_UNAVAILABLE
        assert exc.value.http_code == 503

    def test_connect_failure(self, pg_store):
        with patch(
            "app.survey.store.psycopg2.connect",
            side_effect=psycopg2.OperationalError("could not connect"),
        ):
            with pytest.raises(StorageUnavailableError) as exc:
                pg_store.find_by_user("user-1")

        assert "could not connect" in exc.value.message

    def test_aggregate_percentiles(self, pg_store, mock_conn):
        _, conn, cursor = mock_conn
        cursor.fetchall.return_value = [{"percentage": 12.5}, {"percentage": 80}]

        assert pg_store.aggregate_percentiles() == [12.5, 80.0]
        sql = cursor.execute.call_args[0][0]
        assert "SELECT percentage FROM survey_records" in sql
        conn.close.assert_called_once()

    def test_upsert(self, pg_store, mock_conn, db_row):
        _, conn, cursor = mock_conn
        cursor.fetchone.return_value = db_row

        stored = pg_store.upsert_by_user("user-1", _record())

        sql, params = cursor.execute.call_args[0]
        assert "ON CONFLICT (user_id) DO UPDATE" in sql
        assert params[0] == "user-1"
        assert params[2] is None
        assert params[4] == "Moderate Risk"
        assert params[8] == 50.0
        conn.commit.assert_called_once()
        conn.close.assert_called_once()
        assert stored.createdAt == db_row["created_at"]

    def test_upsert_failure_rolls_back(self, pg_store, mock_conn):
        _, conn, cursor = mock_conn
        cursor.execute.side_effect = psycopg2.Error("DB failure")

        with pytest.raises(StorageUnavailableError):
            pg_store.upsert_by_user("user-1", _record())

        conn.rollback.assert_called_once()
        conn.commit.assert_not_called()
        conn.close.assert_called_once()

    def test_find_by_user(self, pg_store, mock_conn, db_row):
        _, conn, cursor = mock_conn
        cursor.fetchone.return_value = db_row

        record = pg_store.find_by_user("user-1")

        assert record.percentage == 50.0
        assert cursor.execute.call_args[0][1] == ("user-1",)

    def test_find_by_user_missing(self, pg_store, mock_conn):
        _, _, cursor = mock_conn
        cursor.fetchone.return_value = None

        assert pg_store.find_by_user("nobody") is None

    def test_ensure_schema(self, pg_store, mock_conn):
        _, conn, cursor = mock_conn

        pg_store.ensure_schema()

        assert "CREATE TABLE IF NOT EXISTS survey_records" in cursor.execute.call_args[0][0]
        conn.commit.assert_called_once()

    def test_user_id_column_matches_request_limit(self):
        assert f"user_id VARCHAR({USER_ID_MAX_LENGTH}) PRIMARY KEY" in get_migration_sql()
        assert USER_ID_MAX_LENGTH == 128


# ============================================================================
# BACKEND SELECTION
# ============================================================================

class TestGetStore:

    def test_memory_backend(self, monkeypatch):
        monkeypatch.setattr(store_module, "_store", None)
        monkeypatch.setattr(store_module, "STORE_BACKEND", "memory")

        first = store_module.get_store()

        assert isinstance(first, InMemorySurveyStore)
        assert store_module.get_store() is first

    def test_postgres_backend(self, monkeypatch):
        monkeypatch.setattr(store_module, "_store", None)
        monkeypatch.setattr(store_module, "STORE_BACKEND", "postgres")

        assert isinstance(store_module.get_store(), PostgresSurveyStore)
