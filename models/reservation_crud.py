"""
Reservation CRUD operations.
Handles create, read, update, delete for reservations.
"""

import logging
import sqlite3
from datetime import timezone

from database import get_db
from utils.datetime_helpers import parse_timestamp, utc_now_iso
from utils.messages import MESSAGES
from utils.validators import missing_required_fields, is_blank
from .exceptions import ValidationError, NotFoundError
from .reservation_state import STATUS_PENDING, validate_status, record_status_change

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ['space_id', 'club_id', 'title', 'start_time', 'end_time']

# Fields a club or admin may change after creation
EDITABLE_FIELDS = ('title', 'description')


def _row_to_reservation(row) -> dict:
    """Convert a reservations row into a plain dict with a real boolean flag."""
    reservation = dict(row)
    reservation['is_full_day'] = bool(reservation.get('is_full_day'))
    return reservation


def _normalize_timestamp(value, field: str) -> str:
    """Parse a submitted timestamp and return it as UTC ISO-8601 text.

    Stored values share one offset so text order matches time order.
    """
    try:
        return parse_timestamp(value).astimezone(timezone.utc).isoformat()
    except (ValueError, TypeError):
        raise ValidationError(MESSAGES['invalid_timestamp'].format(field=field), fields=[field])


def _check_text_fields(**values) -> None:
    """Raise ValidationError for any provided value that is not a string."""
    wrong = [field for field, value in values.items()
             if value is not None and not isinstance(value, str)]
    if wrong:
        raise ValidationError(MESSAGES['invalid_text'].format(field=wrong[0]), fields=wrong)


def _build_filters(club_id=None, space_id=None, status=None) -> tuple:
    """Build WHERE clause and params for the optional reservation predicates."""
    clauses = []
    params = []

    if club_id is not None:
        clauses.append('r.club_id = ?')
        params.append(club_id)
    if space_id is not None:
        clauses.append('r.space_id = ?')
        params.append(space_id)
    if status is not None:
        clauses.append('r.status = ?')
        params.append(status)

    where = ('WHERE ' + ' AND '.join(clauses)) if clauses else ''
    return where, params


# =============================================================================
# CREATE
# =============================================================================

def create_reservation(
    space_id: int,
    club_id: int,
    title: str,
    start_time: str,
    end_time: str,
    description: str = '',
    is_full_day: bool = False,
    created_by: str = None
) -> dict:
    """
    Create a reservation request.

    New reservations always start as pending. The time range is stored as
    given: neither end-after-start nor overlap with other bookings of the
    same space is checked.

    Args:
        space_id: Space ID
        club_id: Requesting club ID
        title: Reservation title
        start_time: Start timestamp (ISO-8601)
        end_time: End timestamp (ISO-8601)
        description: Optional description
        is_full_day: Whether the booking covers the whole day
        created_by: Who submitted the request

    Returns:
        dict: The stored reservation including id and created_at

    Raises:
        ValidationError: If a required field is missing, title or description
            is not text, a timestamp does not parse, or the space/club does
            not exist
    """
    missing = missing_required_fields({
        'space_id': space_id,
        'club_id': club_id,
        'title': title,
        'start_time': start_time,
        'end_time': end_time,
    }, REQUIRED_FIELDS)
    if missing:
        raise ValidationError(MESSAGES['missing_fields'], fields=missing)

    _check_text_fields(title=title, description=description)

    start_iso = _normalize_timestamp(start_time, 'start_time')
    end_iso = _normalize_timestamp(end_time, 'end_time')

    db = get_db()
    cursor = db.cursor()

    try:
        cursor.execute('''
            INSERT INTO reservations (
                space_id, club_id, title, description, start_time, end_time,
                is_full_day, status, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        ''', (
            space_id, club_id, title.strip(), description or '', start_iso, end_iso,
            1 if is_full_day else 0, STATUS_PENDING, utc_now_iso()
        ))

        reservation_id = cursor.lastrowid

        record_status_change(cursor, reservation_id, STATUS_PENDING, None, created_by,
                             'Reservation requested')

        db.commit()

    except sqlite3.IntegrityError as e:
        db.rollback()
        logger.warning('Rejected reservation for space %s / club %s: %s', space_id, club_id, e)
        raise ValidationError('Unknown space or club', fields=['space_id', 'club_id'])
    except Exception:
        db.rollback()
        raise

    logger.info('Reservation %s created for club %s in space %s', reservation_id, club_id, space_id)
    return get_reservation_by_id(reservation_id)


# =============================================================================
# READ
# =============================================================================

def get_reservation_by_id(reservation_id: int) -> dict:
    """
    Get reservation by ID.

    Args:
        reservation_id: Reservation ID

    Returns:
        dict: Reservation

    Raises:
        NotFoundError: If the reservation does not exist
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM reservations WHERE id = ?', (reservation_id,))
    row = cursor.fetchone()
    if not row:
        raise NotFoundError(MESSAGES['reservation_not_found'])
    return _row_to_reservation(row)


def get_reservations(club_id: int = None, space_id: int = None, status: str = None) -> list:
    """
    Get reservations matching optional predicates, annotated with club name.

    Args:
        club_id: Filter by club
        space_id: Filter by space
        status: Filter by status

    Returns:
        List of reservation dicts ordered by start time; each carries
        club_name ('Unknown Club' when the club row is gone) and space_name
    """
    where, params = _build_filters(club_id, space_id, status)

    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'''
        SELECT r.*,
               COALESCE(c.name, 'Unknown Club') AS club_name,
               s.name AS space_name
        FROM reservations r
        LEFT JOIN clubs c ON r.club_id = c.id
        LEFT JOIN spaces s ON r.space_id = s.id
        {where}
        ORDER BY r.start_time, r.id
    ''', params)
    return [_row_to_reservation(row) for row in cursor.fetchall()]


def count_reservations(club_id: int = None, space_id: int = None, status: str = None) -> int:
    """
    Count reservations matching optional predicates.

    Returns:
        int: Number of matching reservations
    """
    where, params = _build_filters(club_id, space_id, status)

    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT COUNT(*) FROM reservations r {where}', params)
    return cursor.fetchone()[0]


# =============================================================================
# UPDATE
# =============================================================================

def update_reservation_details(reservation_id: int, **fields) -> dict:
    """
    Update the title and/or description of a reservation.

    Other keyword arguments are ignored; space, club, times and status are
    never touched here.

    Args:
        reservation_id: Reservation ID
        **fields: title and/or description

    Returns:
        dict: The stored reservation after the update

    Raises:
        ValidationError: If a provided value is not text or the title is blank
        NotFoundError: If the reservation does not exist
    """
    updates = {key: value for key, value in fields.items()
               if key in EDITABLE_FIELDS and value is not None}

    _check_text_fields(**updates)

    if 'title' in updates:
        if is_blank(updates['title']):
            raise ValidationError(MESSAGES['title_required'], fields=['title'])
        updates['title'] = updates['title'].strip()

    # Existence check doubles as the return value when nothing changes
    reservation = get_reservation_by_id(reservation_id)
    if not updates:
        return reservation

    set_clause = ', '.join(f'{key} = ?' for key in updates)
    values = list(updates.values()) + [reservation_id]

    db = get_db()
    try:
        db.execute(f'UPDATE reservations SET {set_clause} WHERE id = ?', values)
        db.commit()
    except Exception:
        db.rollback()
        raise

    return get_reservation_by_id(reservation_id)


# =============================================================================
# DELETE
# =============================================================================

def delete_reservation(reservation_id: int) -> None:
    """
    Permanently delete a reservation.

    Args:
        reservation_id: Reservation ID

    Raises:
        NotFoundError: If the reservation does not exist
    """
    db = get_db()
    try:
        cursor = db.execute('DELETE FROM reservations WHERE id = ?', (reservation_id,))
        if cursor.rowcount == 0:
            raise NotFoundError(MESSAGES['reservation_not_found'])
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info('Reservation %s deleted', reservation_id)


def delete_reservations_by_status(status: str) -> int:
    """
    Delete every reservation with the given status.

    Args:
        status: 'pending', 'approved' or 'rejected'

    Returns:
        int: Number of reservations deleted (0 if none matched)

    Raises:
        ValidationError: If status is not one of the three literals
    """
    validate_status(status)

    db = get_db()
    try:
        cursor = db.execute('DELETE FROM reservations WHERE status = ?', (status,))
        deleted = cursor.rowcount
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info('Deleted %s %s reservations', deleted, status)
    return deleted
