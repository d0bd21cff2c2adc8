"""
Reservation status management functions.
Handles status changes and the status history trail.
"""

import logging

from database import get_db
from utils.messages import MESSAGES
from utils.datetime_helpers import utc_now_iso
from .exceptions import ValidationError, NotFoundError

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

STATUS_PENDING = 'pending'
STATUS_APPROVED = 'approved'
STATUS_REJECTED = 'rejected'

# Order matters: analytics and presentation iterate in this order
RESERVATION_STATUSES = (STATUS_APPROVED, STATUS_PENDING, STATUS_REJECTED)


def validate_status(status) -> str:
    """
    Check that status is one of the three reservation statuses.

    Matching is exact and case sensitive.

    Raises:
        ValidationError: If status is not pending, approved or rejected
    """
    if not isinstance(status, str) or status not in RESERVATION_STATUSES:
        raise ValidationError(MESSAGES['invalid_status'], fields=['status'])
    return status


# =============================================================================
# STATUS TRANSITIONS
# =============================================================================

def set_reservation_status(reservation_id: int, status: str, changed_by: str = None,
                           notes: str = '') -> dict:
    """
    Set the status of a reservation.

    Any status can follow any other; there is no terminal state. Setting the
    current status again succeeds without writing anything.

    Args:
        reservation_id: Reservation ID
        status: 'pending', 'approved' or 'rejected'
        changed_by: Who made the change (username or club name)
        notes: Optional notes for the history trail

    Returns:
        dict: The stored reservation after the change

    Raises:
        ValidationError: If status is not one of the three literals or
            notes is not text
        NotFoundError: If the reservation does not exist
    """
    from .reservation_crud import get_reservation_by_id

    validate_status(status)
    if notes is not None and not isinstance(notes, str):
        raise ValidationError(MESSAGES['invalid_text'].format(field='notes'), fields=['notes'])

    db = get_db()
    cursor = db.cursor()

    try:
        cursor.execute('SELECT status FROM reservations WHERE id = ?', (reservation_id,))
        row = cursor.fetchone()
        if not row:
            raise NotFoundError(MESSAGES['reservation_not_found'])

        previous_status = row['status']
        if previous_status != status:
            cursor.execute('UPDATE reservations SET status = ? WHERE id = ?',
                           (status, reservation_id))
            record_status_change(cursor, reservation_id, status, previous_status,
                                 changed_by, notes)
            db.commit()
            logger.info('Reservation %s status %s -> %s by %s',
                        reservation_id, previous_status, status, changed_by or 'system')

    except Exception:
        db.rollback()
        raise

    return get_reservation_by_id(reservation_id)


# =============================================================================
# HISTORY
# =============================================================================

def record_status_change(cursor, reservation_id: int, status: str, previous_status: str = None,
                         changed_by: str = None, notes: str = '') -> None:
    """Insert a history row on an open cursor; the caller commits."""
    cursor.execute('''
        INSERT INTO reservation_status_history
        (reservation_id, status, previous_status, changed_by, notes, created_at)
        VALUES (?, ?, ?, ?, ?, ?)
    ''', (reservation_id, status, previous_status, changed_by or 'system', notes or '',
          utc_now_iso()))


def get_status_history(reservation_id: int) -> list:
    """
    Get status history for a reservation, oldest first.

    Args:
        reservation_id: Reservation ID

    Returns:
        List of history dicts
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT id, reservation_id, status, previous_status, changed_by, notes, created_at
        FROM reservation_status_history
        WHERE reservation_id = ?
        ORDER BY id
    ''', (reservation_id,))
    return [dict(row) for row in cursor.fetchall()]
