"""
Calendar API endpoint.
Formatted reservations grouped by day for a month or week window.
"""

from datetime import datetime

from flask import request
from flask_login import login_required

from models.club import get_all_clubs
from models.reservation import build_calendar, get_reservations, validate_status
from models.space import get_all_spaces
from utils.api_response import api_success, api_error
from utils.datetime_helpers import get_today, get_timezone
from utils.helpers import parse_int
from utils.messages import MESSAGES

CALENDAR_VIEWS = ('month', 'week')


def register_routes(bp):
    """Register calendar API routes on the blueprint."""

    @bp.route('/calendar', methods=['GET'])
    @login_required
    def calendar_feed():
        """
        Get the calendar for the period containing a date.

        Query params:
            date: Anchor date YYYY-MM-DD (default: today)
            view: 'month' (default) or 'week'
            spaceId, clubId, status: Optional filters

        Response JSON:
        {
            "success": true,
            "calendar": {
                "view": "month",
                "start": "2024-06-01",
                "end": "2024-06-30",
                "days": {"2024-06-10": [{...formatted reservation...}]}
            }
        }
        """
        date_str = request.args.get('date')
        if date_str:
            try:
                anchor = datetime.strptime(date_str, '%Y-%m-%d').date()
            except ValueError:
                return api_error(MESSAGES['invalid_date'], 400)
        else:
            anchor = get_today()

        view = request.args.get('view', 'month')
        if view not in CALENDAR_VIEWS:
            return api_error(MESSAGES['invalid_view'], 400)

        status = request.args.get('status') or None
        if status is not None:
            validate_status(status)

        reservations = get_reservations(
            club_id=parse_int(request.args.get('clubId')),
            space_id=parse_int(request.args.get('spaceId')),
            status=status
        )

        calendar = build_calendar(
            reservations,
            get_all_spaces(),
            get_all_clubs(),
            anchor,
            view=view,
            tz=get_timezone()
        )
        return api_success(calendar=calendar)
