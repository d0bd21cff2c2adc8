"""
Insights analytics module.
Pure functions over an in-memory snapshot of reservations, spaces and clubs;
fetching the snapshot is the caller's job.

Submodules:
    - status: Counts by reservation status
    - usage: Space utilization and club activity
    - patterns: Monthly, time-slot and day-of-week distributions
    - summary: Dashboard payload assembling all of the above
"""

from models.insights.status import (
    count_by_status,
    count_active_clubs,
)

from models.insights.usage import (
    DEFAULT_UTILIZATION_TARGET,
    utilization_percentage,
    get_space_utilization,
    get_overall_space_utilization,
    get_club_activity,
)

from models.insights.patterns import (
    get_monthly_stats,
    get_time_slot_popularity,
    get_day_of_week_analysis,
    get_peak_hours,
)

from models.insights.summary import get_analytics_summary

__all__ = [
    # Status
    'count_by_status',
    'count_active_clubs',
    # Usage
    'DEFAULT_UTILIZATION_TARGET',
    'utilization_percentage',
    'get_space_utilization',
    'get_overall_space_utilization',
    'get_club_activity',
    # Patterns
    'get_monthly_stats',
    'get_time_slot_popularity',
    'get_day_of_week_analysis',
    'get_peak_hours',
    # Summary
    'get_analytics_summary',
]
