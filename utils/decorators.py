"""
Route decorators for authentication and authorization.
Provides role-based access control for routes.
"""

from functools import wraps
from flask import abort
from flask_login import login_required, current_user


def role_required(*roles: str):
    """
    Decorator to require one of the given principal roles for a route.

    Usage:
        @bp.route('/reservations/<int:reservation_id>/status', methods=['PATCH'])
        @login_required
        @role_required('admin')
        def update_status(reservation_id):
            ...

    Args:
        roles: Allowed roles ('admin', 'club')

    Returns:
        Decorator function
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if getattr(current_user, 'role', None) not in roles:
                abort(403)
            return func(*args, **kwargs)
        return wrapper
    return decorator


def can_access_club(club_id) -> bool:
    """True when the current principal is an admin or the club itself."""
    if current_user.role == 'admin':
        return True
    return current_user.role == 'club' and str(current_user.id) == str(club_id)


# Re-export login_required for convenience
__all__ = ['login_required', 'role_required', 'can_access_club']
