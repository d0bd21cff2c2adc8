"""
Reservations migrations.
Brings legacy reservations tables up to the current column set.
"""

import logging
from database.connection import get_db

logger = logging.getLogger(__name__)


def migrate_reservations_full_day() -> bool:
    """
    Migration: Add is_full_day flag to reservations.

    Rows created before the flag existed keep is_full_day = 0; the display
    layer still recognises them as full-day through the 00:00-23:59 rule.

    Returns:
        bool: True if migration applied, False if already applied
    """
    db = get_db()
    cursor = db.cursor()

    cursor.execute("PRAGMA table_info(reservations)")
    existing_columns = [row['name'] for row in cursor.fetchall()]

    if 'is_full_day' in existing_columns:
        logger.info("Migration already applied - reservations.is_full_day exists.")
        return False

    logger.info("Applying reservations_full_day migration...")

    try:
        db.execute('ALTER TABLE reservations ADD COLUMN is_full_day INTEGER NOT NULL DEFAULT 0')
        db.commit()
        logger.info("Migration reservations_full_day applied successfully!")
        return True

    except Exception as e:
        db.rollback()
        logger.error(f"Migration failed: {e}")
        raise


def migrate_status_history_table() -> bool:
    """
    Migration: Create reservation_status_history if missing.

    Returns:
        bool: True if migration applied, False if already applied
    """
    db = get_db()
    cursor = db.cursor()

    cursor.execute('''
        SELECT name FROM sqlite_master
        WHERE type = 'table' AND name = 'reservation_status_history'
    ''')
    if cursor.fetchone():
        logger.info("Migration already applied - reservation_status_history exists.")
        return False

    logger.info("Applying status_history_table migration...")

    try:
        db.execute('''
            CREATE TABLE reservation_status_history (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                reservation_id INTEGER NOT NULL,
                status TEXT NOT NULL,
                previous_status TEXT,
                changed_by TEXT,
                notes TEXT DEFAULT '',
                created_at TEXT NOT NULL
            )
        ''')
        db.execute('''
            CREATE INDEX IF NOT EXISTS idx_status_history_reservation
            ON reservation_status_history(reservation_id)
        ''')
        db.commit()
        logger.info("Migration status_history_table applied successfully!")
        return True

    except Exception as e:
        db.rollback()
        logger.error(f"Migration failed: {e}")
        raise
