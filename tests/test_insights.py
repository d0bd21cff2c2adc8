"""
Tests for insights analytics functions.
All analytics run over in-memory snapshots, so no app is needed.
"""

from datetime import date
from zoneinfo import ZoneInfo

import pytest

from models.insights import (
    count_by_status,
    count_active_clubs,
    utilization_percentage,
    get_space_utilization,
    get_overall_space_utilization,
    get_club_activity,
    get_monthly_stats,
    get_time_slot_popularity,
    get_peak_hours,
    get_day_of_week_analysis,
    get_analytics_summary,
)

UTC = ZoneInfo('UTC')


def _res(start, status='pending', space_id=2, club_id=1, **extra):
    reservation = {
        'id': extra.pop('id', None),
        'status': status,
        'space_id': space_id,
        'club_id': club_id,
        'start_time': start,
        'end_time': start,
    }
    reservation.update(extra)
    return reservation


class TestCountByStatus:
    """Tests for count_by_status."""

    def test_counts_known_statuses(self):
        reservations = [_res('2024-06-10T10:00:00Z', s) for s in
                        ('approved', 'approved', 'pending', 'rejected')]
        assert count_by_status(reservations) == {'approved': 2, 'pending': 1, 'rejected': 1}

    def test_unknown_statuses_excluded(self):
        reservations = [_res('2024-06-10T10:00:00Z', 'approved'),
                        _res('2024-06-10T10:00:00Z', 'cancelled')]
        counts = count_by_status(reservations)

        assert counts == {'approved': 1, 'pending': 0, 'rejected': 0}
        assert sum(counts.values()) < len(reservations)

    def test_empty(self):
        assert count_by_status([]) == {'approved': 0, 'pending': 0, 'rejected': 0}


class TestCountActiveClubs:
    """Tests for count_active_clubs."""

    def test_inactive_clubs_not_counted(self):
        clubs = [{'status': 'active'}, {'status': 'inactive'}, {}]
        assert count_active_clubs(clubs) == 2


class TestSpaceUtilization:
    """Tests for utilization_percentage and get_space_utilization."""

    @pytest.mark.parametrize('count, expected', [
        (0, 0),
        (25, 50),
        (50, 100),
        (100, 100),
        (1, 2),
    ])
    def test_utilization_percentage(self, count, expected):
        assert utilization_percentage(count) == expected

    def test_sorted_busiest_first(self):
        spaces = [{'id': 1, 'name': 'Quiet'}, {'id': 2, 'name': 'Busy'}, {'id': 3, 'name': 'Empty'}]
        reservations = ([_res('2024-06-10T10:00:00Z', space_id=2)] * 25
                        + [_res('2024-06-10T10:00:00Z', space_id=1)] * 5)

        result = get_space_utilization(reservations, spaces)

        assert [s['name'] for s in result] == ['Busy', 'Quiet', 'Empty']
        assert result[0] == {'name': 'Busy', 'utilization': 50, 'reservations': 25}
        assert result[2]['utilization'] == 0

    def test_ids_match_across_types(self):
        """String and integer ids refer to the same space."""
        spaces = [{'id': 2, 'name': 'Hall'}]
        reservations = [_res('2024-06-10T10:00:00Z', space_id='2')]
        assert get_space_utilization(reservations, spaces)[0]['reservations'] == 1

    def test_overall_is_mean(self):
        utilization = [{'utilization': 100}, {'utilization': 50}, {'utilization': 0}]
        assert get_overall_space_utilization(utilization) == 50
        assert get_overall_space_utilization([]) == 0


class TestClubActivity:
    """Tests for get_club_activity."""

    def test_colors_assigned_before_sorting(self):
        clubs = [{'id': i, 'name': f'Club {i}', 'members': i * 10} for i in range(1, 7)]
        reservations = [_res('2024-06-10T10:00:00Z', club_id=6)] * 3

        result = get_club_activity(reservations, clubs)

        assert result[0] == {'name': 'Club 6', 'reservations': 3, 'members': 60, 'color': 'blue'}
        colors = {item['name']: item['color'] for item in result}
        assert colors['Club 1'] == 'blue'
        assert colors['Club 5'] == 'pink'


class TestMonthlyStats:
    """Tests for get_monthly_stats."""

    def test_always_six_months_chronological(self):
        result = get_monthly_stats([], today=date(2024, 6, 15), tz=UTC)
        assert [m['month'] for m in result] == ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun']

    def test_wraps_year_boundary(self):
        result = get_monthly_stats([], today=date(2024, 2, 1), tz=UTC)
        assert [m['month'] for m in result] == ['Sep', 'Oct', 'Nov', 'Dec', 'Jan', 'Feb']

    def test_counts_by_month(self):
        reservations = [
            _res('2024-06-03T10:00:00Z', 'approved'),
            _res('2024-06-04T10:00:00Z', 'rejected'),
            _res('2024-06-05T10:00:00Z', 'pending'),
            _res('2023-06-05T10:00:00Z', 'approved'),
            _res('2024-05-05T10:00:00Z', 'approved'),
        ]

        result = get_monthly_stats(reservations, today=date(2024, 6, 15), tz=UTC)
        june = result[-1]

        assert june == {'month': 'Jun', 'reservations': 4, 'approved': 2, 'rejected': 1}
        assert result[-2]['reservations'] == 1

    def test_malformed_records_skipped(self):
        reservations = [_res('2024-06-03T10:00:00Z'), _res(None)]
        result = get_monthly_stats(reservations, today=date(2024, 6, 15), tz=UTC)
        assert result[-1]['reservations'] == 1


class TestTimeSlots:
    """Tests for get_time_slot_popularity and get_peak_hours."""

    def test_slot_boundaries(self):
        reservations = [
            _res('2024-06-10T07:59:00Z'),
            _res('2024-06-10T08:00:00Z'),
            _res('2024-06-10T19:59:00Z'),
            _res('2024-06-10T20:00:00Z'),
        ]

        slots = get_time_slot_popularity(reservations, UTC)

        assert [s['count'] for s in slots] == [1, 0, 0, 0, 0, 1]
        assert slots[0]['percentage'] == 25
        assert sum(s['count'] for s in slots) == 2
        assert all(s['percentage'] <= 100 for s in slots)

    def test_peak_hours(self):
        reservations = [_res('2024-06-10T14:30:00Z')] * 3 + [_res('2024-06-10T09:00:00Z')]

        peak = get_peak_hours(get_time_slot_popularity(reservations, UTC))

        assert peak == {'time': '14:00-16:00', 'percentage': 75}

    def test_peak_tie_goes_to_earliest(self):
        reservations = [_res('2024-06-10T09:00:00Z'), _res('2024-06-10T15:00:00Z')]
        peak = get_peak_hours(get_time_slot_popularity(reservations, UTC))
        assert peak['time'] == '8:00-10:00'

    def test_no_reservations(self):
        slots = get_time_slot_popularity([], UTC)
        assert all(s['percentage'] == 0 for s in slots)
        assert get_peak_hours([]) == {'time': 'N/A', 'percentage': 0}


class TestDayOfWeek:
    """Tests for get_day_of_week_analysis."""

    def test_monday_first_with_scaled_heights(self):
        reservations = [
            _res('2024-06-10T10:00:00Z'),  # Monday
            _res('2024-06-10T11:00:00Z'),
            _res('2024-06-16T10:00:00Z'),  # Sunday
        ]

        days = get_day_of_week_analysis(reservations, UTC)

        assert [d['day'] for d in days] == ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']
        assert days[0] == {'day': 'Mon', 'count': 2, 'height': 90}
        assert days[6] == {'day': 'Sun', 'count': 1, 'height': 45}
        assert days[1]['height'] == 0

    def test_empty(self):
        assert all(d['height'] == 0 for d in get_day_of_week_analysis([], UTC))


class TestAnalyticsSummary:
    """Tests for get_analytics_summary."""

    def test_payload_shape(self):
        spaces = [{'id': 1, 'name': 'Non-specific'}, {'id': 2, 'name': 'Hall'}]
        clubs = [{'id': 1, 'name': 'Chess', 'members': 20, 'status': 'active'}]
        reservations = [_res('2024-06-10T14:00:00Z', 'approved')]

        result = get_analytics_summary(reservations, spaces, clubs, today=date(2024, 6, 15), tz=UTC)

        assert result['summary'] == {
            'totalReservations': 1,
            'activeClubsCount': 1,
            'spaceUtilization': 1,
            'peakHours': {'time': '14:00-16:00', 'percentage': 100},
        }
        assert set(result['details']) == {
            'reservationsByStatus', 'spaceUtilization', 'clubActivity',
            'monthlyStats', 'timeSlotPopularity', 'dayOfWeekAnalysis',
        }
        assert result['details']['reservationsByStatus']['approved'] == 1
