"""
Club migrations.
Account status, login tracking and hashed credentials for clubs.
"""

import logging
from database.connection import get_db

logger = logging.getLogger(__name__)


def migrate_clubs_account_fields() -> bool:
    """
    Migration: Add status, last_login and password_hash columns to clubs.

    Safe to run multiple times - checks if columns already exist.

    Returns:
        bool: True if migration applied, False if already applied
    """
    db = get_db()
    cursor = db.cursor()

    cursor.execute("PRAGMA table_info(clubs)")
    existing_columns = [row['name'] for row in cursor.fetchall()]

    columns_to_add = [
        ("ALTER TABLE clubs ADD COLUMN status TEXT NOT NULL DEFAULT 'active'", 'status'),
        ('ALTER TABLE clubs ADD COLUMN last_login TEXT', 'last_login'),
        ('ALTER TABLE clubs ADD COLUMN password_hash TEXT', 'password_hash'),
    ]
    missing = [(sql, col) for sql, col in columns_to_add if col not in existing_columns]

    if not missing:
        logger.info("Migration already applied - clubs account columns exist.")
        return False

    logger.info("Applying clubs_account_fields migration...")

    try:
        for sql, col_name in missing:
            db.execute(sql)
            logger.info(f"  Added column: {col_name}")

        db.commit()
        logger.info("Migration clubs_account_fields applied successfully!")
        return True

    except Exception as e:
        db.rollback()
        logger.error(f"Migration failed: {e}")
        raise
