#!/usr/bin/env python3
"""
Survey Records Schema Setup
===========================
Creates the survey_records table if it does not exist.

Usage:
    python scripts/init_survey_db.py
    python scripts/init_survey_db.py --print-sql
"""

import os
import sys
import logging
import argparse

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from app.survey.errors import StorageUnavailableError  # noqa: E402
from app.survey.migration import get_migration_sql  # noqa: E402
from app.survey.store import PostgresSurveyStore  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def init_schema(database_url: str = None) -> bool:
    """Apply the survey_records DDL. Returns True on success."""
    store = PostgresSurveyStore(database_url=database_url)
    try:
        store.ensure_schema()
    except StorageUnavailableError as e:
        logger.error(f"✗ survey_records setup failed: {e.message}")
        return False
    logger.info("✓ survey_records table ready")
    return True


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(description='Create the survey_records table')
    parser.add_argument('--database-url', help='PostgreSQL DSN (defaults to $DATABASE_URL)')
    parser.add_argument('--print-sql', action='store_true', help='Print the DDL without running it')
    args = parser.parse_args()

    if args.print_sql:
        print(get_migration_sql())
        return

    sys.exit(0 if init_schema(args.database_url) else 1)


if __name__ == '__main__':
    main()
