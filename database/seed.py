"""
Database seed data.
Initial data population for fresh database installations.
"""

import json
from werkzeug.security import generate_password_hash
from utils.datetime_helpers import utc_now_iso


# Sentinel space, always present
DEFAULT_SPACE = ('Non-specific', 0, [], '/spaces/default.jpg')

DEMO_SPACES = [
    ('Main Auditorium', 200, ['Stage', 'Sound System', 'Projector'], '/spaces/auditorium.jpg'),
    ('Conference Room A', 50, ['Whiteboard', 'Projector', 'Video Conferencing'], '/spaces/conference-a.jpg'),
    ('Conference Room B', 30, ['Whiteboard', 'TV Screen'], '/spaces/conference-b.jpg'),
    ('Student Lounge', 100, ['Casual Seating', 'Kitchenette'], '/spaces/lounge.jpg'),
    ('Outdoor Courtyard', 150, ['Open Air', 'Power Outlets'], '/spaces/courtyard.jpg'),
]

DEMO_CLUBS = [
    ('Computer Science Club', 'A club for students interested in computer science and programming',
     'cs-club@example.com', '/clubs/cs-club.jpg', 45),
    ('Debate Society', 'Fostering critical thinking through competitive debate',
     'debate@example.com', '/clubs/debate.jpg', 30),
    ('Photography Club', 'Exploring the art of photography together',
     'photo-club@example.com', '/clubs/photography.jpg', 25),
    ('Chess Club', 'For chess enthusiasts of all skill levels',
     'chess@example.com', '/clubs/chess.jpg', 20),
    ('Environmental Action', 'Working together for a sustainable campus and community',
     'eco-action@example.com', '/clubs/environmental.jpg', 35),
]

DEMO_CLUB_PASSWORD = 'password123'


def seed_database(db):
    """Insert initial seed data."""
    now = utc_now_iso()

    # 1. Default administrator
    db.execute('''
        INSERT INTO users (username, email, password_hash, full_name, active, created_at)
        VALUES (?, ?, ?, ?, 1, ?)
    ''', ('admin', 'admin@example.com', generate_password_hash('admin123'), 'Administrator', now))

    # 2. Spaces (sentinel first)
    for name, capacity, features, image in [DEFAULT_SPACE] + DEMO_SPACES:
        db.execute('''
            INSERT INTO spaces (name, capacity, features, image, created_at)
            VALUES (?, ?, ?, ?, ?)
        ''', (name, capacity, json.dumps(features), image, now))

    # 3. Clubs
    password_hash = generate_password_hash(DEMO_CLUB_PASSWORD)
    for name, description, email, logo, members in DEMO_CLUBS:
        db.execute('''
            INSERT INTO clubs (name, description, email, logo, status, members, password_hash, created_at)
            VALUES (?, ?, ?, ?, 'active', ?, ?, ?)
        ''', (name, description, email, logo, members, password_hash, now))
