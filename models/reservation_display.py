"""
Reservation display helpers.

Pure functions that turn a stored reservation (plus its space and club)
into display-ready labels: date, time range, duration and status badge.
Nothing here touches the database or the request context.
"""

import logging
from dataclasses import dataclass, asdict
from datetime import date, datetime, timedelta

from utils.datetime_helpers import parse_timestamp, to_timezone
from utils.helpers import round_half_up
from .exceptions import MalformedRecordError

logger = logging.getLogger(__name__)

FULL_DAY_LABEL = 'Full Day'

MINUTES_IN_DAY = 1440
MINUTES_IN_MONTH = 43200
MINUTES_IN_YEAR = 525600


@dataclass(frozen=True)
class TimeLabel:
    """Date, time-range and duration labels for one reservation."""

    date_label: str
    time_label: str
    duration_label: str
    is_full_day: bool


@dataclass(frozen=True)
class StatusPresentation:
    """Badge label, colour token and explanation for a status."""

    label: str
    color: str
    description: str


@dataclass(frozen=True)
class FormattedReservation:
    """A reservation as the calendar and list views show it."""

    id: int
    title: str
    description: str
    status: str
    space_id: int
    space_name: str
    club_id: int
    club_name: str
    start_time: str
    end_time: str
    is_full_day: bool
    date_label: str
    time_label: str
    duration_label: str
    status_label: str
    status_color: str
    status_description: str

    def to_dict(self) -> dict:
        return asdict(self)


STATUS_PRESENTATIONS = {
    'approved': StatusPresentation(
        label='Approved',
        color='green',
        description='This reservation has been approved and is confirmed.'
    ),
    'pending': StatusPresentation(
        label='Pending',
        color='yellow',
        description='This reservation is awaiting approval from administrators.'
    ),
    'rejected': StatusPresentation(
        label='Rejected',
        color='red',
        description='This reservation has been rejected by administrators.'
    ),
}


# =============================================================================
# TIME PARSING
# =============================================================================

def reservation_times(reservation: dict, tz=None) -> tuple:
    """
    Parse start and end of a reservation, converted to tz when given.

    Raises:
        MalformedRecordError: If either timestamp is missing or invalid
    """
    try:
        start = parse_timestamp(reservation.get('start_time'))
        end = parse_timestamp(reservation.get('end_time'))
    except (ValueError, TypeError) as e:
        raise MalformedRecordError(
            f"Reservation {reservation.get('id')} has an invalid time range: {e}",
            record_id=reservation.get('id')
        )
    return to_timezone(start, tz), to_timezone(end, tz)


# =============================================================================
# FULL-DAY RULE
# =============================================================================

def is_full_day_reservation(reservation: dict, tz=None) -> bool:
    """
    Decide whether a reservation is shown as occupying the whole day.

    Two independent signals, either one is enough:
    1. the is_full_day flag stored with the reservation;
    2. the legacy encoding used before the flag existed: start at 00:00 and
       end at 23:59 on the same calendar day.

    The second check is a migration shim for rows written before the flag
    column; it must stay until those rows are rewritten.

    Args:
        reservation: Reservation dict
        tz: Timezone the clock times are read in (default: stored offset)

    Returns:
        bool
    """
    if reservation.get('is_full_day'):
        return True

    start, end = reservation_times(reservation, tz)
    return (
        start.date() == end.date()
        and (start.hour, start.minute) == (0, 0)
        and (end.hour, end.minute) == (23, 59)
    )


# =============================================================================
# LABELS
# =============================================================================

def format_clock(value: datetime) -> str:
    """Format as 'h:mm AM/PM', e.g. 2:00 PM."""
    hour = value.hour % 12 or 12
    meridiem = 'AM' if value.hour < 12 else 'PM'
    return f'{hour}:{value.minute:02d} {meridiem}'


def format_long_date(value) -> str:
    """Format as 'Monday, June 10, 2024'."""
    return f'{value:%A}, {value:%B} {value.day}, {value.year}'


def _plural(count: int, unit: str) -> str:
    return f'{count} {unit}' if count == 1 else f'{count} {unit}s'


def format_duration(start: datetime, end: datetime) -> str:
    """
    Human-readable distance between two datetimes.

    Order does not matter. Examples: 'less than a minute', '30 minutes',
    '1 hour', '2 hours', '1 day', '3 days', '2 months', '1 year'.
    """
    seconds = abs((end - start).total_seconds())
    minutes = round_half_up(seconds / 60)

    if minutes == 0:
        return 'less than a minute'
    if minutes < 45:
        return _plural(minutes, 'minute')
    if minutes < 90:
        return '1 hour'
    if minutes < MINUTES_IN_DAY:
        return _plural(round_half_up(minutes / 60), 'hour')
    if minutes < 42 * 60:
        return '1 day'
    if minutes < MINUTES_IN_MONTH:
        return _plural(round_half_up(minutes / MINUTES_IN_DAY), 'day')
    if minutes < MINUTES_IN_YEAR:
        return _plural(round_half_up(minutes / MINUTES_IN_MONTH), 'month')
    return _plural(round_half_up(minutes / MINUTES_IN_YEAR), 'year')


def resolve_time_label(reservation: dict, tz=None) -> TimeLabel:
    """
    Build the date, time-range and duration labels for a reservation.

    Full-day reservations (see is_full_day_reservation) get 'Full Day' for
    both the time and the duration label. Others get 'h:mm a - h:mm a' and
    a human-readable duration. The date label is the start date in long
    form.

    Args:
        reservation: Reservation dict with start_time, end_time, is_full_day
        tz: Timezone to render in (default: the timestamps' own offset)

    Returns:
        TimeLabel

    Raises:
        MalformedRecordError: If the stored times cannot be parsed
    """
    start, end = reservation_times(reservation, tz)
    full_day = is_full_day_reservation(reservation, tz)

    if full_day:
        time_label = FULL_DAY_LABEL
        duration_label = FULL_DAY_LABEL
    else:
        time_label = f'{format_clock(start)} - {format_clock(end)}'
        duration_label = format_duration(start, end)

    return TimeLabel(
        date_label=format_long_date(start),
        time_label=time_label,
        duration_label=duration_label,
        is_full_day=full_day
    )


def get_status_presentation(status) -> StatusPresentation:
    """
    Map a status to its badge presentation.

    Known statuses match case-insensitively. Any other value still gets a
    presentation: the value capitalized as label, a neutral colour and a
    generic description. Never raises.
    """
    text = '' if status is None else str(status)
    known = STATUS_PRESENTATIONS.get(text.lower())
    if known:
        return known

    return StatusPresentation(
        label=text[:1].upper() + text[1:],
        color='gray',
        description=f'This reservation is currently {text.lower()}.'
    )


def format_reservation(reservation: dict, space: dict = None, club: dict = None,
                       tz=None) -> FormattedReservation:
    """
    Combine a reservation with its space and club into a display view.

    Args:
        reservation: Reservation dict
        space: Space dict (optional; falls back to reservation['space_name'])
        club: Club dict (optional; falls back to reservation['club_name'])
        tz: Timezone to render in

    Returns:
        FormattedReservation

    Raises:
        MalformedRecordError: If the stored times cannot be parsed
    """
    labels = resolve_time_label(reservation, tz)
    presentation = get_status_presentation(reservation.get('status'))

    space_name = (space or {}).get('name') or reservation.get('space_name') or 'Unknown Space'
    club_name = (club or {}).get('name') or reservation.get('club_name') or 'Unknown Club'

    return FormattedReservation(
        id=reservation.get('id'),
        title=reservation.get('title', ''),
        description=reservation.get('description') or '',
        status=reservation.get('status'),
        space_id=reservation.get('space_id'),
        space_name=space_name,
        club_id=reservation.get('club_id'),
        club_name=club_name,
        start_time=reservation.get('start_time'),
        end_time=reservation.get('end_time'),
        is_full_day=labels.is_full_day,
        date_label=labels.date_label,
        time_label=labels.time_label,
        duration_label=labels.duration_label,
        status_label=presentation.label,
        status_color=presentation.color,
        status_description=presentation.description
    )


# =============================================================================
# CALENDAR
# =============================================================================

def get_calendar_window(anchor: date, view: str = 'month') -> tuple:
    """
    Inclusive date range shown by the calendar around an anchor date.

    Args:
        anchor: Any date inside the period
        view: 'month' (first to last day of the month) or 'week'
              (Sunday to Saturday)

    Returns:
        tuple: (first_date, last_date)

    Raises:
        ValueError: If view is not 'month' or 'week'
    """
    if view == 'month':
        first = anchor.replace(day=1)
        next_month = (first.replace(day=28) + timedelta(days=4)).replace(day=1)
        return first, next_month - timedelta(days=1)
    if view == 'week':
        # date.weekday(): Monday=0 .. Sunday=6
        first = anchor - timedelta(days=(anchor.weekday() + 1) % 7)
        return first, first + timedelta(days=6)
    raise ValueError(f'Unknown calendar view: {view}')


def build_calendar(reservations: list, spaces: list, clubs: list, anchor: date,
                   view: str = 'month', tz=None) -> dict:
    """
    Group formatted reservations by start date for a calendar window.

    Records whose times cannot be parsed are logged and left out.

    Returns:
        dict with start, end (ISO dates) and days: {ISO date: [reservation dicts]}
    """
    first, last = get_calendar_window(anchor, view)
    spaces_by_id = {space['id']: space for space in spaces}
    clubs_by_id = {club['id']: club for club in clubs}

    days = {}
    for reservation in reservations:
        try:
            start, _ = reservation_times(reservation, tz)
            formatted = format_reservation(
                reservation,
                spaces_by_id.get(reservation.get('space_id')),
                clubs_by_id.get(reservation.get('club_id')),
                tz
            )
        except MalformedRecordError as e:
            logger.warning('Skipping reservation in calendar: %s', e)
            continue

        day = start.date()
        if first <= day <= last:
            days.setdefault(day.isoformat(), []).append(formatted.to_dict())

    return {
        'view': view,
        'start': first.isoformat(),
        'end': last.isoformat(),
        'days': days
    }
