"""
Club API routes.
Club accounts are created and managed by administrators.
"""

from flask import request
from flask_login import login_required

from blueprints.auth.forms import ResetPasswordForm
from models.club import (
    CLUB_STATUSES, EDITABLE_FIELDS, public_club, get_all_clubs, get_club_by_id,
    create_club, update_club, set_club_password
)
from models.exceptions import NotFoundError, ValidationError
from utils.api_response import api_success, api_error
from utils.decorators import role_required
from utils.messages import MESSAGES


def register_routes(bp):
    """Register club API routes on the blueprint."""

    @bp.route('/clubs', methods=['GET'])
    @login_required
    def list_clubs():
        """
        List clubs.

        Query params:
            status: 'active' or 'inactive' (optional)
        """
        status = request.args.get('status') or None
        if status is not None and status not in CLUB_STATUSES:
            raise ValidationError(MESSAGES['invalid_club_status'], fields=['status'])

        clubs = [public_club(club) for club in get_all_clubs(status=status)]
        return api_success(clubs=clubs, count=len(clubs))

    @bp.route('/clubs/<int:club_id>', methods=['GET'])
    @login_required
    def club_detail(club_id):
        """Get a single club."""
        club = get_club_by_id(club_id)
        if not club:
            raise NotFoundError(MESSAGES['club_not_found'])
        return api_success(club=public_club(club))

    @bp.route('/clubs', methods=['POST'])
    @login_required
    @role_required('admin')
    def create_club_route():
        """
        Create a club account.

        Request JSON:
            {"name": "...", "email": "...", "password": "...", "description": "...",
             "logo": "...", "members": 20, "status": "active"}
        """
        data = request.get_json(silent=True) or {}
        club = create_club(
            name=data.get('name'),
            email=data.get('email'),
            password=data.get('password'),
            description=data.get('description') or '',
            logo=data.get('logo'),
            status=data.get('status') or 'active',
            members=data.get('members', 0)
        )
        return api_success(club=club, message=MESSAGES['club_created'], status=201)

    @bp.route('/clubs/<int:club_id>', methods=['PUT'])
    @login_required
    @role_required('admin')
    def update_club_route(club_id):
        """Update club fields (name, description, email, logo, status, members)."""
        data = request.get_json(silent=True) or {}
        fields = {key: value for key, value in data.items() if key in EDITABLE_FIELDS}
        club = update_club(club_id, **fields)
        return api_success(club=club, message=MESSAGES['club_updated'])

    @bp.route('/clubs/<int:club_id>/password', methods=['POST'])
    @login_required
    @role_required('admin')
    def reset_club_password(club_id):
        """
        Set a new password for a club.

        Request JSON:
            {"password": "at-least-8-chars"}
        """
        form = ResetPasswordForm()
        if not form.validate_on_submit():
            errors = form.errors.get('password') or [MESSAGES['missing_fields']]
            return api_error(errors[0], 400, fields=['password'])

        set_club_password(club_id, form.password.data)
        return api_success(message=MESSAGES['password_updated'])
