"""
Space API routes.
Everyone signed in can browse spaces; only administrators change them.
"""

from flask import request
from flask_login import login_required

from models.exceptions import NotFoundError, ValidationError
from models.space import (
    get_all_spaces, get_space_by_id, ensure_default_space,
    create_space, update_space, delete_space
)
from utils.api_response import api_success
from utils.decorators import role_required
from utils.helpers import parse_int
from utils.messages import MESSAGES


def _space_id_from_request(space_id, data: dict) -> int:
    """Path id, else 'id' from the JSON body or query string."""
    if space_id is None:
        space_id = parse_int(data.get('id', request.args.get('id')))
    if space_id is None:
        raise ValidationError(MESSAGES['missing_fields'], fields=['id'])
    return space_id


def register_routes(bp):
    """Register space API routes on the blueprint."""

    @bp.route('/spaces', methods=['GET'])
    @login_required
    def list_spaces():
        """List spaces; the default space is recreated if it went missing."""
        ensure_default_space()
        spaces = get_all_spaces()
        return api_success(spaces=spaces, count=len(spaces))

    @bp.route('/spaces/<int:space_id>', methods=['GET'])
    @login_required
    def space_detail(space_id):
        """Get a single space."""
        space = get_space_by_id(space_id)
        if not space:
            raise NotFoundError(MESSAGES['space_not_found'])
        return api_success(space=space)

    @bp.route('/spaces', methods=['POST'])
    @login_required
    @role_required('admin')
    def create_space_route():
        """
        Create a space.

        Request JSON:
            {"name": "Main Hall", "capacity": 200, "features": ["Projector"], "image": "..."}
        """
        data = request.get_json(silent=True) or {}
        space = create_space(
            name=data.get('name'),
            capacity=data.get('capacity'),
            features=data.get('features'),
            image=data.get('image')
        )
        return api_success(space=space, message=MESSAGES['space_created'], status=201)

    @bp.route('/spaces', methods=['PUT'])
    @bp.route('/spaces/<int:space_id>', methods=['PUT'])
    @login_required
    @role_required('admin')
    def update_space_route(space_id=None):
        """Replace name, capacity, features and image of a space."""
        data = request.get_json(silent=True) or {}
        space = update_space(
            _space_id_from_request(space_id, data),
            name=data.get('name'),
            capacity=data.get('capacity'),
            features=data.get('features'),
            image=data.get('image')
        )
        return api_success(space=space, message=MESSAGES['space_updated'])

    @bp.route('/spaces', methods=['DELETE'])
    @bp.route('/spaces/<int:space_id>', methods=['DELETE'])
    @login_required
    @role_required('admin')
    def delete_space_route(space_id=None):
        """Delete a space that has no reservations."""
        data = request.get_json(silent=True) or {}
        delete_space(_space_id_from_request(space_id, data))
        return api_success(message=MESSAGES['space_deleted'])
