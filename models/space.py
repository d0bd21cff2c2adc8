"""
Space data access functions.
Handles space CRUD operations and the protected default space.
"""

import json
import logging
import sqlite3

from flask import current_app

from database import get_db
from utils.datetime_helpers import utc_now_iso
from utils.helpers import load_json_list, parse_int
from utils.messages import MESSAGES
from utils.validators import is_blank
from .exceptions import ValidationError, NotFoundError, ConflictError
from .reservation_crud import count_reservations

logger = logging.getLogger(__name__)


def _row_to_space(row) -> dict:
    space = dict(row)
    space['features'] = load_json_list(space.get('features'))
    return space


def _default_space_name() -> str:
    return current_app.config.get('DEFAULT_SPACE_NAME', 'Non-specific')


def _validated_fields(name, capacity, features, image=None) -> tuple:
    if is_blank(name):
        raise ValidationError('Name and capacity are required', fields=['name'])
    if not isinstance(name, str):
        raise ValidationError(MESSAGES['invalid_text'].format(field='name'), fields=['name'])
    if image is not None and not isinstance(image, str):
        raise ValidationError(MESSAGES['invalid_text'].format(field='image'), fields=['image'])
    parsed_capacity = parse_int(capacity)
    if parsed_capacity is None or parsed_capacity < 0:
        raise ValidationError(MESSAGES['invalid_capacity'], fields=['capacity'])
    if features is None:
        features = []
    if not isinstance(features, list):
        raise ValidationError('Features must be a list', fields=['features'])
    return name.strip(), parsed_capacity, [str(feature).strip() for feature in features if str(feature).strip()]


def get_all_spaces() -> list:
    """
    Get all spaces.

    Returns:
        List of space dicts ordered by id, features decoded to lists
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM spaces ORDER BY id')
    return [_row_to_space(row) for row in cursor.fetchall()]


def get_space_by_id(space_id: int) -> dict:
    """
    Get space by ID.

    Args:
        space_id: Space ID

    Returns:
        Space dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM spaces WHERE id = ?', (space_id,))
    row = cursor.fetchone()
    return _row_to_space(row) if row else None


def is_default_space(space: dict) -> bool:
    """True for the sentinel space (name compared case-insensitively)."""
    return (space.get('name') or '').strip().lower() == _default_space_name().lower()


def _find_default_space() -> dict:
    for space in get_all_spaces():
        if is_default_space(space):
            return space
    return None


def ensure_default_space() -> dict:
    """
    Return the sentinel space, creating it if it does not exist.

    Returns:
        dict: The default space
    """
    space = _find_default_space()
    if space:
        return space

    logger.info('Creating missing default space %r', _default_space_name())
    return create_space(
        name=_default_space_name(),
        capacity=0,
        features=[],
        image=current_app.config.get('DEFAULT_SPACE_IMAGE')
    )


def create_space(name: str, capacity, features: list = None, image: str = None) -> dict:
    """
    Create a space.

    Args:
        name: Space name
        capacity: Non-negative integer capacity
        features: Ordered list of feature tags
        image: Image URL or path

    Returns:
        dict: The stored space

    Raises:
        ValidationError: If name is blank or capacity is not a non-negative integer
        ConflictError: If name is the default space name and that space exists
    """
    name, capacity, features = _validated_fields(name, capacity, features, image)
    image = image or current_app.config.get('DEFAULT_SPACE_IMAGE')

    if is_default_space({'name': name}) and _find_default_space():
        raise ConflictError(MESSAGES['default_space_name_taken'].format(name=_default_space_name()))

    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        INSERT INTO spaces (name, capacity, features, image, created_at)
        VALUES (?, ?, ?, ?, ?)
    ''', (name, capacity, json.dumps(features), image, utc_now_iso()))
    db.commit()

    return get_space_by_id(cursor.lastrowid)


def update_space(space_id: int, name: str, capacity, features: list = None,
                 image: str = None) -> dict:
    """
    Replace the editable fields of a space.

    The default space keeps its name, and no other space may take it.

    Returns:
        dict: The stored space

    Raises:
        ValidationError: If name is blank or capacity is invalid
        NotFoundError: If the space does not exist
        ConflictError: If the update would rename the default space or give
            another space its name
    """
    name, capacity, features = _validated_fields(name, capacity, features, image)
    image = image or current_app.config.get('DEFAULT_SPACE_IMAGE')

    space = get_space_by_id(space_id)
    if not space:
        raise NotFoundError(MESSAGES['space_not_found'])

    renamed_to_default = is_default_space({'name': name})
    if is_default_space(space) and not renamed_to_default:
        raise ConflictError(MESSAGES['default_space_renamed'].format(name=space['name']))
    if renamed_to_default and not is_default_space(space):
        raise ConflictError(MESSAGES['default_space_name_taken'].format(name=_default_space_name()))

    db = get_db()
    db.execute('''
        UPDATE spaces SET name = ?, capacity = ?, features = ?, image = ?
        WHERE id = ?
    ''', (name, capacity, json.dumps(features), image, space_id))
    db.commit()

    return get_space_by_id(space_id)


def delete_space(space_id: int) -> None:
    """
    Delete a space.

    Args:
        space_id: Space ID

    Raises:
        NotFoundError: If the space does not exist
        ConflictError: If it is the default space or still has reservations
    """
    space = get_space_by_id(space_id)
    if not space:
        raise NotFoundError(MESSAGES['space_not_found'])

    if is_default_space(space):
        raise ConflictError(MESSAGES['default_space_protected'].format(name=space['name']))

    if count_reservations(space_id=space_id):
        raise ConflictError(MESSAGES['space_has_reservations'])

    db = get_db()
    try:
        db.execute('DELETE FROM spaces WHERE id = ?', (space_id,))
        db.commit()
    except sqlite3.IntegrityError:
        # A reservation was added after the count
        db.rollback()
        raise ConflictError(MESSAGES['space_has_reservations'])
    logger.info('Space %s deleted', space_id)
