"""
ClubSpace - Campus Club Space Reservation Portal
Flask application factory and initialization
"""

import os
import click
import logging
from flask import Flask, g
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import configuration
from config import config

# Import extensions
from extensions import login_manager, csrf

# Import database functions
from database import close_db, init_db

from models.exceptions import ClubSpaceError
from utils.api_response import api_error, api_success
from utils.messages import MESSAGES


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    # Determine config
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    config_class = config.get(config_name, config['default'])
    if config_name == 'production':
        config_class.validate()

    app = Flask(__name__)
    app.config.from_object(config_class)

    initialize_extensions(app)
    register_blueprints(app)
    register_error_handlers(app)
    register_cli_commands(app)
    register_teardown_handlers(app)
    configure_logging(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions."""
    login_manager.init_app(app)
    csrf.init_app(app)


def register_blueprints(app):
    """Register Flask blueprints."""
    from blueprints.auth.routes import auth_bp
    from blueprints.api import api_bp

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(api_bp, url_prefix='/api')

    @app.route('/')
    def index():
        """Service banner."""
        return api_success(
            app=app.config.get('APP_NAME', 'ClubSpace'),
            version=app.config.get('APP_VERSION', '1.0.0')
        )


def register_error_handlers(app):
    """Register JSON error handlers."""

    @app.errorhandler(ClubSpaceError)
    def domain_error(error):
        """Render domain exceptions with their own status code."""
        extra = {}
        if getattr(error, 'fields', None):
            extra['fields'] = error.fields
        return api_error(error.detail, error.status_code, **extra)

    @app.errorhandler(400)
    def bad_request_error(error):
        """Handle 400 errors (including CSRF failures)."""
        return api_error(getattr(error, 'description', None) or 'Bad request', 400)

    @app.errorhandler(403)
    def forbidden_error(error):
        """Handle 403 errors."""
        return api_error(MESSAGES['permission_denied'], 403)

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors."""
        return api_error(MESSAGES['not_found'], 404)

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        """Handle 405 errors."""
        return api_error('Method not allowed', 405)

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        app.logger.error('Unhandled error: %s', error, exc_info=True)
        # Rollback database on error
        db = g.get('db')
        if db:
            db.rollback()
        return api_error(MESSAGES['server_error'], 500)


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('init-db')
    def init_db_command():
        """Initialize database with schema and seed data."""
        click.echo('Initializing database...')
        with app.app_context():
            init_db()
        click.echo('Database initialized successfully!')

    @app.cli.command('migrate')
    def migrate_command():
        """Apply pending schema migrations to an existing database."""
        from database.migrations import run_all_migrations

        with app.app_context():
            summary = run_all_migrations()
        click.echo(
            f"Migrations: {summary['applied']} applied, {summary['skipped']} skipped, "
            f"{summary['failed']} failed"
        )
        if summary['failed']:
            raise SystemExit(1)

    @app.cli.command('create-admin')
    @click.argument('username')
    @click.argument('email')
    @click.password_option()
    def create_admin_command(username, email, password):
        """Create a new administrator."""
        import sqlite3
        from models.user import create_user
        from utils.validators import validate_password

        valid, error = validate_password(password)
        if not valid:
            raise click.BadParameter(error, param_hint='password')

        with app.app_context():
            try:
                user_id = create_user(username=username, email=email, password=password)
                click.echo(f'Administrator created successfully! ID: {user_id}')
            except sqlite3.IntegrityError as e:
                click.echo(f'Error creating administrator: {e}', err=True)

    @app.cli.command('create-club')
    @click.argument('name')
    @click.argument('email')
    @click.option('--members', default=0, type=int, help='Number of club members')
    @click.password_option()
    def create_club_command(name, email, members, password):
        """Create a new club account."""
        from models.club import create_club
        from utils.validators import validate_password

        valid, error = validate_password(password)
        if not valid:
            raise click.BadParameter(error, param_hint='password')

        with app.app_context():
            try:
                club = create_club(name=name, email=email, password=password, members=members)
                click.echo(f"Club created successfully! ID: {club['id']}")
            except ClubSpaceError as e:
                click.echo(f'Error creating club: {e.detail}', err=True)


def register_teardown_handlers(app):
    """Register teardown handlers."""

    @app.teardown_appcontext
    def teardown_db(error):
        """Close database connection at end of request."""
        close_db(error)


def configure_logging(app):
    """Configure application logging."""
    if not app.debug and not app.testing:
        # Production logging
        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = logging.FileHandler('logs/clubspace.log')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('ClubSpace startup')
    else:
        # Development logging
        app.logger.setLevel(logging.DEBUG)


# Create application instance for development server
if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', debug=True)
