"""
Booking patterns analytics.
Monthly, time-of-day and day-of-week distributions from an in-memory snapshot.
"""

import logging
from datetime import date

from models.exceptions import MalformedRecordError
from models.reservation_state import STATUS_APPROVED, STATUS_REJECTED
from utils.datetime_helpers import parse_timestamp, to_timezone
from utils.helpers import round_half_up, percentage

logger = logging.getLogger(__name__)

MONTH_NAMES = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
               'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

DAY_NAMES = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']

# (label, first hour, end hour) - half-open [first, end)
TIME_SLOTS = [
    ('8:00-10:00', 8, 10),
    ('10:00-12:00', 10, 12),
    ('12:00-14:00', 12, 14),
    ('14:00-16:00', 14, 16),
    ('16:00-18:00', 16, 18),
    ('18:00-20:00', 18, 20),
]

MONTHS_SHOWN = 6
MAX_BAR_HEIGHT = 90


# =============================================================================
# SNAPSHOT PARSING
# =============================================================================

def _start_of(reservation: dict, tz=None):
    """
    Parsed start_time of a reservation.

    Raises:
        MalformedRecordError: If start_time is missing or invalid
    """
    try:
        return to_timezone(parse_timestamp(reservation.get('start_time')), tz)
    except (ValueError, TypeError) as e:
        raise MalformedRecordError(
            f"Reservation {reservation.get('id')} has an invalid start_time: {e}",
            record_id=reservation.get('id')
        )


def iter_start_times(reservations: list, tz=None):
    """
    Yield (reservation, start datetime) for every well-formed record.

    Malformed records are logged and skipped so one bad row cannot take a
    dashboard down.
    """
    for reservation in reservations:
        try:
            start = _start_of(reservation, tz)
        except MalformedRecordError as e:
            logger.warning('Excluding reservation from analytics: %s', e)
            continue
        yield reservation, start


# =============================================================================
# MONTHLY
# =============================================================================

def get_monthly_stats(reservations: list, today: date = None, tz=None) -> list:
    """
    Reservation counts for the six months ending with the current month.

    Reservations are bucketed by the calendar month of start_time only, so
    the same month of different years is merged. The window wraps across
    the year boundary.

    Args:
        reservations: Reservation dicts
        today: Reference date (default: date.today())
        tz: Timezone used to read start_time

    Returns:
        list of 6 {'month', 'reservations', 'approved', 'rejected'},
        oldest month first
    """
    today = today or date.today()

    months = [
        {'month': name, 'reservations': 0, 'approved': 0, 'rejected': 0}
        for name in MONTH_NAMES
    ]

    for reservation, start in iter_start_times(reservations, tz):
        bucket = months[start.month - 1]
        bucket['reservations'] += 1
        if reservation.get('status') == STATUS_APPROVED:
            bucket['approved'] += 1
        elif reservation.get('status') == STATUS_REJECTED:
            bucket['rejected'] += 1

    current = today.month - 1
    return [months[(current - offset) % 12] for offset in range(MONTHS_SHOWN - 1, -1, -1)]


# =============================================================================
# TIME OF DAY
# =============================================================================

def get_time_slot_popularity(reservations: list, tz=None) -> list:
    """
    Share of reservations starting in each two-hour slot from 08:00 to 20:00.

    A reservation lands in the slot containing its start hour. Starts before
    08:00 or from 20:00 on are not counted anywhere but still count towards
    the total, so percentages can sum to less than 100.

    Args:
        reservations: Reservation dicts
        tz: Timezone used to read start_time

    Returns:
        list of 6 {'time', 'count', 'percentage'}
    """
    slots = [{'time': label, 'count': 0, 'percentage': 0} for label, _, _ in TIME_SLOTS]

    total = 0
    for _, start in iter_start_times(reservations, tz):
        total += 1
        for slot, (_, first_hour, end_hour) in zip(slots, TIME_SLOTS):
            if first_hour <= start.hour < end_hour:
                slot['count'] += 1
                break

    for slot in slots:
        slot['percentage'] = percentage(slot['count'], total)

    return slots


def get_peak_hours(time_slots: list) -> dict:
    """
    The busiest time slot.

    Ties go to the earliest slot.

    Args:
        time_slots: Output of get_time_slot_popularity

    Returns:
        dict: {'time', 'percentage'}; {'time': 'N/A', 'percentage': 0} when empty
    """
    if not time_slots:
        return {'time': 'N/A', 'percentage': 0}

    peak = time_slots[0]
    for slot in time_slots[1:]:
        if slot['count'] > peak['count']:
            peak = slot

    return {'time': peak['time'], 'percentage': peak['percentage']}


# =============================================================================
# DAY OF WEEK
# =============================================================================

def get_day_of_week_analysis(reservations: list, tz=None) -> list:
    """
    Reservations per weekday, Monday first, with bar heights for charting.

    Height is the count scaled so the busiest day reaches 90.

    Args:
        reservations: Reservation dicts
        tz: Timezone used to read start_time

    Returns:
        list of 7 {'day', 'count', 'height'}
    """
    days = [{'day': name, 'count': 0, 'height': 0} for name in DAY_NAMES]

    for _, start in iter_start_times(reservations, tz):
        days[start.weekday()]['count'] += 1

    max_count = max(day['count'] for day in days)
    for day in days:
        day['height'] = round_half_up(day['count'] / max_count * MAX_BAR_HEIGHT) if max_count else 0

    return days
