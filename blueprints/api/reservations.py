"""
Reservation API routes: list, create, edit, delete, status and history.
"""

from flask import abort, current_app, request
from flask_login import login_required, current_user

from models.club import get_club_by_id
from models.exceptions import NotFoundError
from models.reservation import (
    STATUS_REJECTED,
    create_reservation, get_reservation_by_id, get_reservations,
    update_reservation_details, delete_reservation, delete_reservations_by_status,
    set_reservation_status, get_status_history, validate_status, format_reservation
)
from models.space import get_space_by_id
from utils.api_response import api_success, api_error
from utils.datetime_helpers import get_timezone
from utils.decorators import role_required, can_access_club
from utils.helpers import parse_int, parse_bool
from utils.messages import MESSAGES


def _actor() -> str:
    """Name recorded in the status history for the current principal."""
    return current_user.username if current_user.is_admin else current_user.name


def _load_owned_reservation(reservation_id: int) -> dict:
    """Fetch a reservation the current principal may modify, or abort."""
    reservation = get_reservation_by_id(reservation_id)
    if not can_access_club(reservation['club_id']):
        abort(403)
    return reservation


def register_routes(bp):
    """Register reservation API routes on the blueprint."""

    # ============================================================================
    # COLLECTION
    # ============================================================================

    @bp.route('/reservations', methods=['GET'])
    @login_required
    def list_reservations():
        """
        List reservations.

        Query params:
            clubId: Filter by club (ignored for club principals, who only see their own)
            spaceId: Filter by space
            status: Filter by status (pending, approved, rejected)
        """
        status = request.args.get('status') or None
        if status is not None:
            validate_status(status)

        if current_user.is_admin:
            club_id = parse_int(request.args.get('clubId'))
        else:
            club_id = current_user.id

        reservations = get_reservations(
            club_id=club_id,
            space_id=parse_int(request.args.get('spaceId')),
            status=status
        )
        return api_success(reservations=reservations, count=len(reservations))

    @bp.route('/reservations', methods=['POST'])
    @login_required
    def create_reservation_route():
        """
        Submit a reservation request. It always starts as pending.

        Request JSON:
            {"spaceId": 2, "clubId": 1, "title": "...", "description": "...",
             "startTime": "2024-06-10T14:00:00Z", "endTime": "...", "isFullDay": false}
        """
        data = request.get_json(silent=True) or {}

        club_id = parse_int(data.get('clubId'))
        if not current_user.is_admin:
            if club_id is not None and club_id != current_user.id:
                abort(403)
            club_id = current_user.id

        reservation = create_reservation(
            space_id=parse_int(data.get('spaceId')),
            club_id=club_id,
            title=data.get('title'),
            start_time=data.get('startTime'),
            end_time=data.get('endTime'),
            description=data.get('description') or '',
            is_full_day=parse_bool(data.get('isFullDay')),
            created_by=_actor()
        )
        return api_success(
            reservation=reservation,
            message=MESSAGES['reservation_created'],
            status=201
        )

    @bp.route('/reservations/delete-rejected', methods=['DELETE'])
    @login_required
    @role_required('admin')
    def delete_rejected_reservations():
        """Delete every rejected reservation."""
        deleted = delete_reservations_by_status(STATUS_REJECTED)
        current_app.logger.info('%s deleted %s rejected reservations', _actor(), deleted)
        return api_success(message=MESSAGES['rejected_deleted'], count=deleted)

    # ============================================================================
    # SINGLE RESERVATION
    # ============================================================================

    @bp.route('/reservations/<int:reservation_id>', methods=['GET'])
    @login_required
    def reservation_detail(reservation_id):
        """Get a reservation with its display labels."""
        reservation = get_reservation_by_id(reservation_id)
        formatted = format_reservation(
            reservation,
            get_space_by_id(reservation['space_id']),
            get_club_by_id(reservation['club_id']),
            get_timezone()
        )
        return api_success(reservation=reservation, display=formatted.to_dict())

    @bp.route('/reservations/<int:reservation_id>', methods=['PATCH'])
    @login_required
    def update_reservation_route(reservation_id):
        """Edit title and/or description of a reservation."""
        _load_owned_reservation(reservation_id)
        data = request.get_json(silent=True) or {}

        reservation = update_reservation_details(
            reservation_id,
            title=data.get('title'),
            description=data.get('description')
        )
        return api_success(reservation=reservation, message=MESSAGES['reservation_updated'])

    @bp.route('/reservations/<int:reservation_id>', methods=['DELETE'])
    @login_required
    def delete_reservation_route(reservation_id):
        """Cancel (delete) a reservation."""
        _load_owned_reservation(reservation_id)
        delete_reservation(reservation_id)
        return api_success(message=MESSAGES['reservation_deleted'])

    @bp.route('/reservations/<int:reservation_id>/status', methods=['PATCH'])
    @login_required
    @role_required('admin')
    def update_reservation_status(reservation_id):
        """
        Set the status of a reservation.

        Request JSON:
            {"status": "approved", "notes": "optional"}
        """
        data = request.get_json(silent=True) or {}
        status = data.get('status')
        if not status:
            return api_error(MESSAGES['missing_fields'], 400, fields=['status'])

        reservation = set_reservation_status(
            reservation_id,
            status,
            changed_by=_actor(),
            notes=data.get('notes') or ''
        )
        return api_success(
            reservation=reservation,
            message=MESSAGES['reservation_status_updated'].format(status=status)
        )

    @bp.route('/reservations/<int:reservation_id>/history', methods=['GET'])
    @login_required
    def reservation_history(reservation_id):
        """
        Get reservation status history.

        Administrators can still read the trail of a deleted reservation.
        """
        if current_user.is_admin:
            history = get_status_history(reservation_id)
            if not history:
                raise NotFoundError(MESSAGES['reservation_not_found'])
        else:
            _load_owned_reservation(reservation_id)
            history = get_status_history(reservation_id)

        return api_success(history=history)
