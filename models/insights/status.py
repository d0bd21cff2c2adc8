"""
Status analytics.
Counts of reservations per status from an in-memory snapshot.
"""

from models.reservation_state import RESERVATION_STATUSES


def count_by_status(reservations: list) -> dict:
    """
    Tally reservations by status.

    Only the three known statuses are counted; any other value is left out
    of every bucket, so the sum can be lower than len(reservations).

    Args:
        reservations: Reservation dicts

    Returns:
        dict: {'approved': int, 'pending': int, 'rejected': int}
    """
    counts = {status: 0 for status in RESERVATION_STATUSES}
    for reservation in reservations:
        status = reservation.get('status')
        if status in counts:
            counts[status] += 1
    return counts


def count_active_clubs(clubs: list) -> int:
    """Number of clubs whose account status is active."""
    return sum(1 for club in clubs if (club.get('status') or 'active') == 'active')
