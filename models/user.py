"""
Principal model and administrator data access functions.
Handles authentication principals (administrators and clubs) for Flask-Login.
"""

from werkzeug.security import generate_password_hash, check_password_hash
from database import get_db
from utils.datetime_helpers import utc_now_iso

ROLE_ADMIN = 'admin'
ROLE_CLUB = 'club'


class Principal:
    """
    Authenticated actor for Flask-Login integration.
    Wraps either an administrator row or a club row.
    """

    def __init__(self, role: str, record: dict):
        """
        Initialize Principal from a database row.

        Args:
            role: 'admin' or 'club'
            record: Dictionary with user or club data from database
        """
        self.role = role
        self.id = record['id']
        self.email = record['email']
        if role == ROLE_ADMIN:
            self.name = record.get('full_name') or record['username']
            self.username = record['username']
            self.active = bool(record.get('active'))
        else:
            self.name = record['name']
            self.username = record['email']
            self.active = record.get('status', 'active') == 'active'

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    @property
    def is_authenticated(self):
        """Required by Flask-Login."""
        return True

    @property
    def is_active(self):
        """Required by Flask-Login."""
        return self.active

    @property
    def is_anonymous(self):
        """Required by Flask-Login."""
        return False

    def get_id(self):
        """Required by Flask-Login. Encodes role and row id, e.g. 'club:3'."""
        return f'{self.role}:{self.id}'

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'role': self.role,
            'name': self.name,
            'email': self.email,
        }


def load_principal(principal_id: str):
    """
    Resolve a Flask-Login id ('admin:1', 'club:3') to a Principal.

    Returns:
        Principal or None if the id is malformed or the row is gone
    """
    from models.club import get_club_by_id

    role, _, raw_id = (principal_id or '').partition(':')
    if not raw_id.isdigit():
        return None

    if role == ROLE_ADMIN:
        record = get_user_by_id(int(raw_id))
    elif role == ROLE_CLUB:
        record = get_club_by_id(int(raw_id))
    else:
        return None

    return Principal(role, record) if record else None


def get_user_by_id(user_id: int) -> dict:
    """
    Get administrator by ID.

    Args:
        user_id: User ID

    Returns:
        User dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM users WHERE id = ?', (user_id,))
    row = cursor.fetchone()
    return dict(row) if row else None


def get_user_by_username(username: str) -> dict:
    """
    Get administrator by username.

    Args:
        username: Username to search for

    Returns:
        User dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM users WHERE username = ?', (username,))
    row = cursor.fetchone()
    return dict(row) if row else None


def create_user(username: str, email: str, password: str, full_name: str = None) -> int:
    """
    Create new administrator with hashed password.

    Args:
        username: Unique username
        email: Unique email
        password: Plain text password (will be hashed)
        full_name: User's full name

    Returns:
        New user ID

    Raises:
        sqlite3.IntegrityError if username or email already exists
    """
    db = get_db()
    password_hash = generate_password_hash(password)

    cursor = db.cursor()
    cursor.execute('''
        INSERT INTO users (username, email, password_hash, full_name, active, created_at)
        VALUES (?, ?, ?, ?, 1, ?)
    ''', (username, email, password_hash, full_name, utc_now_iso()))

    db.commit()
    return cursor.lastrowid


def update_last_login(user_id: int) -> None:
    """
    Update last login timestamp.

    Args:
        user_id: User ID
    """
    db = get_db()
    db.execute('UPDATE users SET last_login = ? WHERE id = ?', (utc_now_iso(), user_id))
    db.commit()


def check_password(record: dict, password: str) -> bool:
    """
    Verify password against stored hash.

    Args:
        record: User or club dictionary with password_hash
        password: Plain text password to check

    Returns:
        True if password matches
    """
    if not record.get('password_hash') or not password:
        return False
    return check_password_hash(record['password_hash'], password)
