"""
Flask extensions initialization.
Extensions are initialized here and then initialized with the app in app.py.
"""

from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect

# Initialize Flask-Login
login_manager = LoginManager()

# Initialize CSRF Protection
csrf = CSRFProtect()


@login_manager.user_loader
def load_user(user_id):
    """
    Load a principal by its Flask-Login id.

    Args:
        user_id: 'admin:<id>' or 'club:<id>'

    Returns:
        Principal object or None if not found
    """
    from models.user import load_principal

    return load_principal(user_id)


@login_manager.unauthorized_handler
def unauthorized():
    """Anonymous requests to protected endpoints get a JSON 401."""
    from utils.api_response import api_error
    from utils.messages import MESSAGES

    return api_error(MESSAGES['login_required'], 401)
