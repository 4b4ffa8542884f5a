"""
Survey Records Migration
Creates the survey_records table in PostgreSQL.

user_id is the primary key: at most one record per user, replaced in place
by INSERT ... ON CONFLICT (user_id) DO UPDATE.
"""

from .models import USER_ID_MAX_LENGTH

SURVEY_MIGRATION_SQL = f"""
CREATE TABLE IF NOT EXISTS survey_records (
    user_id VARCHAR({USER_ID_MAX_LENGTH}) PRIMARY KEY,

    scores_set1 JSONB NOT NULL,
    scores_set2 JSONB,
    scores_set3 JSONB,

    risk_level VARCHAR(20) NOT NULL,
    suggestions TEXT NOT NULL,
    total_score DOUBLE PRECISION NOT NULL,
    questions_answered INTEGER NOT NULL,
    percentage DOUBLE PRECISION NOT NULL
        CHECK (percentage >= 0 AND percentage <= 100),

    weights_version VARCHAR(50) NOT NULL,
    assessment_hash VARCHAR(80),

    created_at TIMESTAMPTZ DEFAULT NOW(),
    updated_at TIMESTAMPTZ DEFAULT NOW()
);

CREATE INDEX IF NOT EXISTS idx_survey_records_percentage ON survey_records(percentage);
CREATE INDEX IF NOT EXISTS idx_survey_records_risk_level ON survey_records(risk_level);
"""


def get_migration_sql() -> str:
    """Return the SQL migration script."""
    return SURVEY_MIGRATION_SQL
