"""
Authentication routes: login, logout, current principal.
Administrators sign in with their username, clubs with their email.
"""

from flask import Blueprint, current_app
from flask_login import login_user, logout_user, login_required, current_user
from flask_wtf.csrf import generate_csrf

from blueprints.auth.forms import LoginForm
from models.club import get_club_by_email, update_club_last_login
from models.user import (
    Principal, ROLE_ADMIN, ROLE_CLUB,
    get_user_by_username, update_last_login, check_password
)
from utils.api_response import api_success, api_error
from utils.messages import MESSAGES

auth_bp = Blueprint('auth', __name__)


def _authenticate(identifier: str, password: str):
    """
    Resolve credentials to a Principal.

    Returns:
        Principal, or None when no account matches the credentials
    """
    user = get_user_by_username(identifier)
    if user and check_password(user, password):
        return Principal(ROLE_ADMIN, user)

    club = get_club_by_email(identifier)
    if club and check_password(club, password):
        return Principal(ROLE_CLUB, club)

    return None


@auth_bp.route('/login', methods=['POST'])
def login():
    """
    Sign in with form fields or a JSON body.

    Request:
        {"identifier": "cs-club@example.com", "password": "...", "remember_me": false}
    """
    form = LoginForm()

    if not form.validate_on_submit():
        return api_error(MESSAGES['missing_fields'], 400, fields=sorted(form.errors))

    identifier = form.identifier.data.strip()
    principal = _authenticate(identifier, form.password.data)

    if principal is None:
        current_app.logger.info('Failed login for %s', identifier)
        return api_error(MESSAGES['invalid_credentials'], 401)

    if not principal.is_active:
        return api_error(MESSAGES['account_inactive'], 403)

    login_user(principal, remember=form.remember_me.data)

    if principal.is_admin:
        update_last_login(principal.id)
    else:
        update_club_last_login(principal.id)

    return api_success(
        user=principal.to_dict(),
        message=MESSAGES['login_success'].format(name=principal.name)
    )


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    """Sign out current principal."""
    logout_user()
    return api_success(message=MESSAGES['logout_success'])


@auth_bp.route('/me')
@login_required
def me():
    """Return the signed-in principal."""
    return api_success(user=current_user.to_dict())


@auth_bp.route('/csrf-token')
def csrf_token():
    """CSRF token for JSON clients (send back as the X-CSRFToken header)."""
    return api_success(csrf_token=generate_csrf())
