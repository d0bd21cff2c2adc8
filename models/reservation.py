"""
Reservation data access functions.

This module re-exports the lifecycle functions from the split modules:
- reservation_state.py: Status constants, status changes and history
- reservation_crud.py: Create, read, update, delete operations
- reservation_display.py: Pure display labels for reservations
"""

# Status management
from .reservation_state import (
    STATUS_PENDING,
    STATUS_APPROVED,
    STATUS_REJECTED,
    RESERVATION_STATUSES,
    validate_status,
    set_reservation_status,
    get_status_history,
)

# CRUD operations
from .reservation_crud import (
    create_reservation,
    get_reservation_by_id,
    get_reservations,
    count_reservations,
    update_reservation_details,
    delete_reservation,
    delete_reservations_by_status,
)

# Display
from .reservation_display import (
    TimeLabel,
    StatusPresentation,
    FormattedReservation,
    is_full_day_reservation,
    resolve_time_label,
    get_status_presentation,
    format_reservation,
    format_duration,
    get_calendar_window,
    build_calendar,
)

__all__ = [
    'STATUS_PENDING',
    'STATUS_APPROVED',
    'STATUS_REJECTED',
    'RESERVATION_STATUSES',
    'validate_status',
    'set_reservation_status',
    'get_status_history',
    'create_reservation',
    'get_reservation_by_id',
    'get_reservations',
    'count_reservations',
    'update_reservation_details',
    'delete_reservation',
    'delete_reservations_by_status',
    'TimeLabel',
    'StatusPresentation',
    'FormattedReservation',
    'is_full_day_reservation',
    'resolve_time_label',
    'get_status_presentation',
    'format_reservation',
    'format_duration',
    'get_calendar_window',
    'build_calendar',
]
