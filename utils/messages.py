"""
Centralized user-facing messages.
All API text in one place for consistency.
"""

MESSAGES = {
    # Success messages
    'login_success': 'Welcome {name}',
    'logout_success': 'Signed out',
    'reservation_created': 'Reservation request submitted',
    'reservation_updated': 'Reservation updated',
    'reservation_deleted': 'Reservation deleted successfully',
    'reservation_status_updated': 'Reservation {status}',
    'rejected_deleted': 'Rejected reservations deleted successfully',
    'space_created': 'Space created',
    'space_updated': 'Space updated',
    'space_deleted': 'Space deleted',
    'club_created': 'Club created',
    'club_updated': 'Club updated',
    'password_updated': 'Password reset successfully',

    # Error messages
    'invalid_credentials': 'Invalid email or password',
    'account_inactive': 'This account has been deactivated. Contact an administrator.',
    'permission_denied': 'You do not have permission for this action',
    'login_required': 'Please sign in to access this resource',
    'missing_fields': 'Missing required fields',
    'invalid_status': 'Invalid status value',
    'invalid_timestamp': 'Invalid {field}: expected an ISO-8601 timestamp',
    'title_required': 'Title cannot be empty',
    'invalid_text': '{field} must be text',
    'reservation_not_found': 'Reservation not found',
    'space_not_found': 'Space not found',
    'club_not_found': 'Club not found',
    'space_has_reservations': 'Cannot delete space with existing reservations',
    'default_space_protected': 'The {name} space cannot be deleted',
    'default_space_renamed': 'The {name} space cannot be renamed',
    'default_space_name_taken': 'The name {name} is reserved for the default space',
    'invalid_capacity': 'Capacity must be a non-negative integer',
    'invalid_members': 'Members must be a non-negative integer',
    'invalid_club_status': 'Club status must be active or inactive',
    'invalid_email': 'Invalid email format',
    'email_exists': 'A club with this email already exists',
    'invalid_date': 'Invalid date: expected YYYY-MM-DD',
    'invalid_view': 'View must be month or week',
    'server_error': 'Internal server error',
    'not_found': 'Resource not found',
}
