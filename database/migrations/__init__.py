"""
Database migrations package.
Organized by feature area for maintainability.

Each module contains related migrations that can be run independently.
The run_all_migrations() function executes all migrations in order.
"""

import logging

from .reservations import (
    migrate_reservations_full_day,
    migrate_status_history_table
)
from .clubs import migrate_clubs_account_fields

logger = logging.getLogger(__name__)


# Ordered list of all migrations
MIGRATIONS = [
    # Phase 1: Reservations
    ('reservations_full_day', migrate_reservations_full_day),
    ('status_history_table', migrate_status_history_table),

    # Phase 2: Club accounts
    ('clubs_account_fields', migrate_clubs_account_fields),
]


def run_all_migrations() -> dict:
    """
    Run all migrations in order.

    Each migration is idempotent - safe to run multiple times.

    Returns:
        dict: {
            'total': int,
            'applied': int,
            'skipped': int,
            'failed': int,
            'results': [(name, bool, str), ...]
        }
    """
    results = []
    applied = 0
    skipped = 0
    failed = 0

    logger.info("Running all database migrations...")

    for name, migration_func in MIGRATIONS:
        try:
            result = migration_func()
            if result:
                applied += 1
                results.append((name, True, 'applied'))
            else:
                skipped += 1
                results.append((name, True, 'skipped'))
        except Exception as e:
            failed += 1
            results.append((name, False, str(e)))
            logger.error(f"ERROR in migration {name}: {e}")

    logger.info(f"Migrations complete: {applied} applied, {skipped} skipped, {failed} failed")

    return {
        'total': len(MIGRATIONS),
        'applied': applied,
        'skipped': skipped,
        'failed': failed,
        'results': results
    }


__all__ = [
    'run_all_migrations',
    'MIGRATIONS',
    'migrate_reservations_full_day',
    'migrate_status_history_table',
    'migrate_clubs_account_fields',
]
