"""
Analytics dashboard summary.
Assembles every analytic from one snapshot into the dashboard payload.
"""

from datetime import date

from .status import count_by_status, count_active_clubs
from .usage import (
    DEFAULT_UTILIZATION_TARGET,
    get_space_utilization,
    get_overall_space_utilization,
    get_club_activity,
)
from .patterns import (
    get_monthly_stats,
    get_time_slot_popularity,
    get_day_of_week_analysis,
    get_peak_hours,
)


def get_analytics_summary(
    reservations: list,
    spaces: list,
    clubs: list,
    today: date = None,
    tz=None,
    utilization_target: int = DEFAULT_UTILIZATION_TARGET
) -> dict:
    """
    Build the admin analytics payload from a snapshot.

    Args:
        reservations: All reservation dicts
        spaces: All space dicts
        clubs: All club dicts
        today: Reference date for the monthly window
        tz: Timezone used to read start times
        utilization_target: Bookings that count as a fully used space

    Returns:
        dict: {'summary': {...}, 'details': {...}}
    """
    space_utilization = get_space_utilization(reservations, spaces, utilization_target)
    time_slots = get_time_slot_popularity(reservations, tz)

    return {
        'summary': {
            'totalReservations': len(reservations),
            'activeClubsCount': count_active_clubs(clubs),
            'spaceUtilization': get_overall_space_utilization(space_utilization),
            'peakHours': get_peak_hours(time_slots),
        },
        'details': {
            'reservationsByStatus': count_by_status(reservations),
            'spaceUtilization': space_utilization,
            'clubActivity': get_club_activity(reservations, clubs),
            'monthlyStats': get_monthly_stats(reservations, today, tz),
            'timeSlotPopularity': time_slots,
            'dayOfWeekAnalysis': get_day_of_week_analysis(reservations, tz),
        }
    }
