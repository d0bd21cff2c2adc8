"""
API blueprint package.
Split into smaller modules by entity for maintainability:
- reservations.py - Reservation lifecycle and history
- calendar.py - Month/week calendar feed
- analytics.py - Admin dashboard and per-club stats
- spaces.py - Space CRUD
- clubs.py - Club accounts
"""

from flask import Blueprint, current_app, jsonify

# Create the API blueprint
api_bp = Blueprint('api', __name__)


@api_bp.route('/health')
def health_check():
    """
    Health check endpoint (no authentication required).

    Returns:
        JSON with status and version
    """
    return jsonify({
        'status': 'ok',
        'version': current_app.config.get('APP_VERSION', '1.0.0'),
        'app': 'ClubSpace Reservation Portal'
    })


# Import and register routes from submodules
from blueprints.api import reservations
from blueprints.api import calendar
from blueprints.api import analytics
from blueprints.api import spaces
from blueprints.api import clubs

# Register all route functions on the blueprint
reservations.register_routes(api_bp)
calendar.register_routes(api_bp)
analytics.register_routes(api_bp)
spaces.register_routes(api_bp)
clubs.register_routes(api_bp)
