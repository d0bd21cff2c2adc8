"""
Space and club usage analytics.
Per-space utilization and per-club activity from an in-memory snapshot.
"""

from collections import Counter

from utils.helpers import round_half_up

# Bookings at which a space counts as fully utilized
DEFAULT_UTILIZATION_TARGET = 50

CLUB_COLORS = ['blue', 'green', 'yellow', 'purple', 'pink']


def _count_by(reservations: list, key: str) -> Counter:
    return Counter(str(reservation.get(key)) for reservation in reservations)


def utilization_percentage(reservation_count: int,
                           target: int = DEFAULT_UTILIZATION_TARGET) -> int:
    """min(round(count / target * 100), 100); 0 for no bookings."""
    if not reservation_count:
        return 0
    return min(round_half_up(reservation_count / target * 100), 100)


def get_space_utilization(reservations: list, spaces: list,
                          target: int = DEFAULT_UTILIZATION_TARGET) -> list:
    """
    Utilization per space, busiest first.

    Utilization is a booking count normalized against a fixed target
    (50 bookings = 100%), capped at 100.

    Args:
        reservations: Reservation dicts
        spaces: Space dicts
        target: Bookings that count as 100% utilization

    Returns:
        list of {'name', 'utilization', 'reservations'} sorted by
        utilization descending (ties keep space order)
    """
    counts = _count_by(reservations, 'space_id')

    utilization = []
    for space in spaces:
        count = counts.get(str(space['id']), 0)
        utilization.append({
            'name': space['name'],
            'utilization': utilization_percentage(count, target),
            'reservations': count
        })

    return sorted(utilization, key=lambda item: item['utilization'], reverse=True)


def get_overall_space_utilization(space_utilization: list) -> int:
    """
    Mean utilization across spaces, rounded.

    Args:
        space_utilization: Output of get_space_utilization

    Returns:
        int: Average percentage, 0 when there are no spaces
    """
    if not space_utilization:
        return 0
    total = sum(item['utilization'] for item in space_utilization)
    return round_half_up(total / len(space_utilization))


def get_club_activity(reservations: list, clubs: list) -> list:
    """
    Reservation count per club, most active first.

    Colours are handed out round-robin from a five-slot palette in the
    order the clubs are given, before sorting.

    Args:
        reservations: Reservation dicts
        clubs: Club dicts

    Returns:
        list of {'name', 'reservations', 'members', 'color'}
    """
    counts = _count_by(reservations, 'club_id')

    activity = []
    for index, club in enumerate(clubs):
        activity.append({
            'name': club['name'],
            'reservations': counts.get(str(club['id']), 0),
            'members': club.get('members') or 0,
            'color': CLUB_COLORS[index % len(CLUB_COLORS)]
        })

    return sorted(activity, key=lambda item: item['reservations'], reverse=True)
