"""
Database schema definitions.
Table creation, indexes, and structure management.
"""


def drop_tables(db):
    """Drop all existing tables."""
    # Disable foreign key constraints before dropping
    db.execute('PRAGMA foreign_keys = OFF')

    tables = [
        'reservation_status_history',
        'reservations',
        'spaces',
        'clubs',
        'users'
    ]

    for table in tables:
        db.execute(f'DROP TABLE IF EXISTS {table}')

    # Re-enable foreign key constraints
    db.execute('PRAGMA foreign_keys = ON')


def create_tables(db):
    """Create all database tables."""

    # 1. Administrators
    db.execute('''
        CREATE TABLE users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT UNIQUE NOT NULL,
            email TEXT UNIQUE NOT NULL,
            password_hash TEXT NOT NULL,
            full_name TEXT,
            active INTEGER DEFAULT 1,
            created_at TEXT NOT NULL,
            last_login TEXT
        )
    ''')

    # 2. Clubs (also authenticate as principals)
    db.execute('''
        CREATE TABLE clubs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            description TEXT DEFAULT '',
            email TEXT UNIQUE NOT NULL,
            logo TEXT,
            status TEXT NOT NULL DEFAULT 'active' CHECK(status IN ('active', 'inactive')),
            last_login TEXT,
            members INTEGER NOT NULL DEFAULT 0 CHECK(members >= 0),
            password_hash TEXT,
            created_at TEXT NOT NULL
        )
    ''')

    # 3. Spaces
    db.execute('''
        CREATE TABLE spaces (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            capacity INTEGER NOT NULL DEFAULT 0 CHECK(capacity >= 0),
            features TEXT NOT NULL DEFAULT '[]',
            image TEXT,
            created_at TEXT NOT NULL
        )
    ''')

    # 4. Reservations
    db.execute('''
        CREATE TABLE reservations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            space_id INTEGER NOT NULL REFERENCES spaces(id),
            club_id INTEGER NOT NULL REFERENCES clubs(id),
            title TEXT NOT NULL,
            description TEXT DEFAULT '',
            start_time TEXT NOT NULL,
            end_time TEXT NOT NULL,
            is_full_day INTEGER NOT NULL DEFAULT 0,
            status TEXT NOT NULL DEFAULT 'pending'
                CHECK(status IN ('pending', 'approved', 'rejected')),
            created_at TEXT NOT NULL
        )
    ''')

    # 5. Status history (no FK so history survives reservation deletion)
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


def create_indexes(db):
    """Create performance indexes."""

    # Reservation indexes
    db.execute('CREATE INDEX idx_reservations_space ON reservations(space_id)')
    db.execute('CREATE INDEX idx_reservations_club ON reservations(club_id)')
    db.execute('CREATE INDEX idx_reservations_status ON reservations(status)')
    db.execute('CREATE INDEX idx_reservations_start ON reservations(start_time)')

    # History indexes
    db.execute('CREATE INDEX idx_status_history_reservation ON reservation_status_history(reservation_id)')

    # Club indexes
    db.execute('CREATE INDEX idx_clubs_status ON clubs(status)')
