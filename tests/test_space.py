"""
Tests for space model functions.
"""

import pytest

from models.exceptions import ValidationError, NotFoundError, ConflictError


class TestSpaceCrud:
    """Tests for space create, read and update."""

    def test_seeded_spaces(self, app):
        """The default space is seeded first, followed by the demo spaces."""
        from models.space import get_all_spaces

        with app.app_context():
            spaces = get_all_spaces()

        assert spaces[0]['name'] == 'Non-specific'
        assert spaces[0]['capacity'] == 0
        assert len(spaces) == 6
        assert spaces[1]['features'] == ['Stage', 'Sound System', 'Projector']

    def test_create_space(self, app):
        """Features are stored as a list and the default image is applied."""
        from models.space import create_space

        with app.app_context():
            space = create_space('Music Room', '40', features=['Piano', ' Amps '])

        assert space['capacity'] == 40
        assert space['features'] == ['Piano', 'Amps']
        assert space['image'] == '/spaces/default.jpg'

    @pytest.mark.parametrize('name, capacity', [
        ('', 10),
        ('Room', -1),
        ('Room', 'many'),
        ('Room', None),
        (7, 10),
        (['Room'], 10),
    ])
    def test_create_space_invalid(self, app, name, capacity):
        from models.space import create_space

        with app.app_context():
            with pytest.raises(ValidationError):
                create_space(name, capacity)

    def test_zero_capacity_allowed(self, app):
        from models.space import create_space

        with app.app_context():
            assert create_space('Hallway', 0)['capacity'] == 0

    def test_update_space(self, app):
        from models.space import update_space

        with app.app_context():
            space = update_space(2, 'Grand Auditorium', 250, features=['Stage'])

        assert space['name'] == 'Grand Auditorium'
        assert space['capacity'] == 250
        assert space['features'] == ['Stage']

    def test_update_missing_space(self, app):
        from models.space import update_space

        with app.app_context():
            with pytest.raises(NotFoundError):
                update_space(999, 'Ghost', 1)

    def test_non_text_image_rejected(self, app):
        from models.space import create_space

        with app.app_context():
            with pytest.raises(ValidationError) as exc:
                create_space('Studio', 10, image={'url': 'x'})

        assert exc.value.fields == ['image']


class TestDefaultSpaceName:
    """Tests for keeping the default space name unique and fixed."""

    def test_default_space_cannot_be_renamed(self, app):
        from models.space import update_space, get_space_by_id

        with app.app_context():
            with pytest.raises(ConflictError):
                update_space(1, 'Lobby', 0)
            assert get_space_by_id(1)['name'] == 'Non-specific'

    def test_default_space_other_fields_editable(self, app):
        from models.space import update_space

        with app.app_context():
            space = update_space(1, 'Non-specific', 5, features=['Anywhere'])

        assert space['capacity'] == 5
        assert space['features'] == ['Anywhere']

    def test_other_space_cannot_take_default_name(self, app):
        from models.space import update_space, get_space_by_id

        with app.app_context():
            with pytest.raises(ConflictError):
                update_space(3, 'non-specific', 30)
            assert get_space_by_id(3)['name'] != 'non-specific'

    def test_create_with_default_name_refused(self, app):
        from models.space import create_space

        with app.app_context():
            with pytest.raises(ConflictError):
                create_space('Non-specific', 0)


class TestDeleteSpace:
    """Tests for delete_space and the protected default space."""

    def test_delete_unused_space(self, app):
        from models.space import delete_space, get_space_by_id

        with app.app_context():
            delete_space(3)
            assert get_space_by_id(3) is None

    def test_delete_space_with_reservations_refused(self, app, make_reservation):
        from models.space import delete_space

        make_reservation(space_id=2)

        with app.app_context():
            with pytest.raises(ConflictError):
                delete_space(2)

    def test_default_space_protected(self, app):
        from models.space import delete_space

        with app.app_context():
            with pytest.raises(ConflictError) as exc:
                delete_space(1)

        assert 'Non-specific' in exc.value.detail

    def test_delete_missing_space(self, app):
        from models.space import delete_space

        with app.app_context():
            with pytest.raises(NotFoundError):
                delete_space(999)

    def test_ensure_default_space_recreates(self, app):
        """The default space comes back if it was removed from the table."""
        from database import get_db
        from models.space import ensure_default_space, get_all_spaces

        with app.app_context():
            db = get_db()
            db.execute("DELETE FROM spaces WHERE name = 'Non-specific'")
            db.commit()

            space = ensure_default_space()
            names = [s['name'] for s in get_all_spaces()]

        assert space['name'] == 'Non-specific'
        assert names.count('Non-specific') == 1

    def test_ensure_default_space_is_idempotent(self, app):
        from models.space import ensure_default_space, get_all_spaces

        with app.app_context():
            first = ensure_default_space()
            second = ensure_default_space()
            assert first['id'] == second['id'] == 1
            assert len(get_all_spaces()) == 6

    def test_reservation_added_after_count_is_a_conflict(self, app, make_reservation, monkeypatch):
        """A booking that lands between the count and the delete is still refused."""
        import models.space
        from models.space import delete_space, get_space_by_id

        make_reservation(space_id=3)
        monkeypatch.setattr(models.space, 'count_reservations', lambda **kwargs: 0)

        with app.app_context():
            with pytest.raises(ConflictError):
                delete_space(3)
            assert get_space_by_id(3) is not None
