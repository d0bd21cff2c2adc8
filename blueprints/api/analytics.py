"""
Analytics API endpoints.
Admin dashboard analytics and per-club reservation stats.
"""

from flask import abort, current_app
from flask_login import login_required

from models.club import get_all_clubs, get_club_by_id
from models.exceptions import NotFoundError
from models.insights import get_analytics_summary, count_by_status
from models.reservation import get_reservations
from models.space import get_all_spaces
from utils.api_response import api_success
from utils.datetime_helpers import get_today, get_timezone
from utils.decorators import role_required, can_access_club
from utils.messages import MESSAGES


def register_routes(bp):
    """Register analytics API routes on the blueprint."""

    @bp.route('/analytics', methods=['GET'])
    @login_required
    @role_required('admin')
    def analytics_dashboard():
        """
        Get the admin analytics dashboard.

        Response JSON:
        {
            "success": true,
            "summary": {
                "totalReservations": 12,
                "activeClubsCount": 5,
                "spaceUtilization": 14,
                "peakHours": {"time": "14:00-16:00", "percentage": 42}
            },
            "details": {
                "reservationsByStatus": {...},
                "spaceUtilization": [...],
                "clubActivity": [...],
                "monthlyStats": [...],
                "timeSlotPopularity": [...],
                "dayOfWeekAnalysis": [...]
            }
        }
        """
        reservations = get_reservations()
        current_app.logger.debug('Building analytics over %s reservations', len(reservations))

        analytics = get_analytics_summary(
            reservations,
            get_all_spaces(),
            get_all_clubs(),
            today=get_today(),
            tz=get_timezone(),
            utilization_target=current_app.config.get('SPACE_UTILIZATION_TARGET', 50)
        )
        return api_success(**analytics)

    @bp.route('/clubs/<int:club_id>/stats', methods=['GET'])
    @login_required
    def club_stats(club_id):
        """Reservation counts by status for one club (the club itself or an admin)."""
        if not can_access_club(club_id):
            abort(403)

        club = get_club_by_id(club_id)
        if not club:
            raise NotFoundError(MESSAGES['club_not_found'])

        reservations = get_reservations(club_id=club_id)
        by_status = count_by_status(reservations)

        return api_success(
            club_id=club_id,
            club_name=club['name'],
            total=len(reservations),
            **by_status
        )
