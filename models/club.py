"""
Club data access functions.
Handles club CRUD, club credentials and per-club reservation stats.
"""

import logging
import sqlite3

from flask import current_app
from werkzeug.security import generate_password_hash

from database import get_db
from utils.datetime_helpers import utc_now_iso
from utils.helpers import parse_int
from utils.messages import MESSAGES
from utils.validators import is_blank, validate_email
from .exceptions import ValidationError, NotFoundError, ConflictError

logger = logging.getLogger(__name__)

CLUB_STATUSES = ('active', 'inactive')

EDITABLE_FIELDS = ('name', 'description', 'email', 'logo', 'status', 'members')


def public_club(club: dict) -> dict:
    """Club dict without credential columns, safe to return from the API."""
    if club is None:
        return None
    return {key: value for key, value in club.items() if key != 'password_hash'}


def _require_text(fields: dict, *names) -> None:
    for name in names:
        value = fields.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(MESSAGES['invalid_text'].format(field=name), fields=[name])


def _validate_fields(fields: dict) -> dict:
    """Normalize and validate the editable club fields present in fields."""
    _require_text(fields, 'name', 'email', 'description', 'logo')
    cleaned = {}

    if 'name' in fields:
        if is_blank(fields['name']):
            raise ValidationError('Name and email are required', fields=['name'])
        cleaned['name'] = fields['name'].strip()

    if 'email' in fields:
        email = (fields['email'] or '').strip().lower()
        if not email:
            raise ValidationError('Name and email are required', fields=['email'])
        if not validate_email(email):
            raise ValidationError(MESSAGES['invalid_email'], fields=['email'])
        cleaned['email'] = email

    if 'status' in fields:
        if fields['status'] not in CLUB_STATUSES:
            raise ValidationError(MESSAGES['invalid_club_status'], fields=['status'])
        cleaned['status'] = fields['status']

    if 'members' in fields:
        members = parse_int(fields['members'])
        if members is None or members < 0:
            raise ValidationError(MESSAGES['invalid_members'], fields=['members'])
        cleaned['members'] = members

    if 'description' in fields:
        cleaned['description'] = fields['description'] or ''

    if 'logo' in fields:
        cleaned['logo'] = fields['logo'] or current_app.config.get('DEFAULT_CLUB_LOGO')

    return cleaned


# =============================================================================
# READ
# =============================================================================

def get_all_clubs(status: str = None) -> list:
    """
    Get all clubs.

    Args:
        status: Optional account status filter ('active' or 'inactive')

    Returns:
        List of club dicts ordered by id (password hashes included)
    """
    db = get_db()
    cursor = db.cursor()

    query = 'SELECT * FROM clubs'
    params = []
    if status:
        query += ' WHERE status = ?'
        params.append(status)
    query += ' ORDER BY id'

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_club_by_id(club_id: int) -> dict:
    """
    Get club by ID.

    Returns:
        Club dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM clubs WHERE id = ?', (club_id,))
    row = cursor.fetchone()
    return dict(row) if row else None


def get_club_by_email(email: str) -> dict:
    """
    Get club by login email (case-insensitive).

    Returns:
        Club dict or None if not found
    """
    if not email:
        return None
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM clubs WHERE email = ?', (email.strip().lower(),))
    row = cursor.fetchone()
    return dict(row) if row else None


# =============================================================================
# CREATE / UPDATE
# =============================================================================

def create_club(name: str, email: str, password: str = None, description: str = '',
                logo: str = None, status: str = 'active', members: int = 0) -> dict:
    """
    Create a club account.

    Args:
        name: Club name
        email: Login email (unique)
        password: Plain text password (will be hashed); None leaves the club
            unable to sign in until a password is set
        description: Club description
        logo: Logo URL or path
        status: 'active' or 'inactive'
        members: Member count

    Returns:
        dict: The stored club (without password hash)

    Raises:
        ValidationError: If a field is missing or invalid
        ConflictError: If the email is already used by another club
    """
    if is_blank(name) or is_blank(email):
        raise ValidationError('Name and email are required',
                              fields=[f for f, v in (('name', name), ('email', email)) if is_blank(v)])
    _require_text({'password': password}, 'password')

    cleaned = _validate_fields({
        'name': name,
        'email': email,
        'description': description,
        'logo': logo,
        'status': status,
        'members': members,
    })
    password_hash = generate_password_hash(password) if password else None

    db = get_db()
    cursor = db.cursor()
    try:
        cursor.execute('''
            INSERT INTO clubs (name, description, email, logo, status, members, password_hash, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        ''', (cleaned['name'], cleaned['description'], cleaned['email'], cleaned['logo'],
              cleaned['status'], cleaned['members'], password_hash, utc_now_iso()))
        db.commit()
    except sqlite3.IntegrityError:
        db.rollback()
        raise ConflictError(MESSAGES['email_exists'])

    logger.info('Club %s created (%s)', cursor.lastrowid, cleaned['email'])
    return public_club(get_club_by_id(cursor.lastrowid))


def update_club(club_id: int, **fields) -> dict:
    """
    Update editable club fields (name, description, email, logo, status, members).

    Returns:
        dict: The stored club (without password hash)

    Raises:
        ValidationError: If a field is invalid
        NotFoundError: If the club does not exist
        ConflictError: If the new email is already used by another club
    """
    cleaned = _validate_fields({key: value for key, value in fields.items() if key in EDITABLE_FIELDS})

    if not get_club_by_id(club_id):
        raise NotFoundError(MESSAGES['club_not_found'])
    if not cleaned:
        return public_club(get_club_by_id(club_id))

    set_clause = ', '.join(f'{key} = ?' for key in cleaned)
    values = list(cleaned.values()) + [club_id]

    db = get_db()
    try:
        db.execute(f'UPDATE clubs SET {set_clause} WHERE id = ?', values)
        db.commit()
    except sqlite3.IntegrityError:
        db.rollback()
        raise ConflictError(MESSAGES['email_exists'])

    return public_club(get_club_by_id(club_id))


def set_club_password(club_id: int, password: str) -> None:
    """
    Replace a club's password.

    Raises:
        NotFoundError: If the club does not exist
    """
    db = get_db()
    cursor = db.execute('UPDATE clubs SET password_hash = ? WHERE id = ?',
                        (generate_password_hash(password), club_id))
    if cursor.rowcount == 0:
        raise NotFoundError(MESSAGES['club_not_found'])
    db.commit()
    logger.info('Password reset for club %s', club_id)


def update_club_last_login(club_id: int) -> None:
    """Stamp the club's last successful sign-in."""
    db = get_db()
    db.execute('UPDATE clubs SET last_login = ? WHERE id = ?', (utc_now_iso(), club_id))
    db.commit()
