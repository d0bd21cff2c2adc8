"""
Authentication forms using Flask-WTF.
Accepts HTML form posts and JSON bodies alike.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, BooleanField
from wtforms.validators import DataRequired, Length


def _as_text(value):
    """JSON bodies can carry numbers or objects; validators expect strings."""
    if value is None or isinstance(value, str):
        return value
    return str(value)


class LoginForm(FlaskForm):
    """Login with an administrator username or a club email."""

    identifier = StringField('Username or email', validators=[
        DataRequired(message='Username or email is required'),
        Length(max=255)
    ], filters=[_as_text])

    password = PasswordField('Password', validators=[
        DataRequired(message='Password is required')
    ], filters=[_as_text])

    remember_me = BooleanField('Remember me')


class ResetPasswordForm(FlaskForm):
    """Administrator-issued password reset for a club account."""

    password = PasswordField('New password', validators=[
        DataRequired(message='Password is required'),
        Length(min=8, message='Password must be at least 8 characters')
    ], filters=[_as_text])
