from datetime import datetime

import pytest

from quotes_gateway.model import User


class TestUser:
    def test_defaults(self):
        user = User('nickname', 'email', 'auth_key')

        assert user.uid is None
        assert user.login_count == 0
        assert user.last_login_time is None
        assert user.last_login_address is None
        assert user.terms_accepted is False
        assert user.has_accepted_terms is False
        assert user.favorites == []
        assert user.added == []

    def test_favorites_collapse_duplicates_in_order(self):
        user = User('nickname', 'email', 'auth_key', favorites=['3', '1', '3', '2'])

        assert user.favorites == ['3', '1', '2']

    def test_added_keeps_duplicates(self):
        user = User('nickname', 'email', 'auth_key', added=['1', '1'])

        assert user.added == ['1', '1']

    def test_equality_uses_every_attribute(self):
        login = datetime(2024, 5, 1, 12, 30)
        user = User('nickname', 'email', 'auth_key', uid='a', last_login_time=login)
        same = User('nickname', 'email', 'auth_key', uid='a', last_login_time=login)
        changed = User('nickname', 'new email', 'auth_key', uid='a', last_login_time=login)

        assert user == same
        assert user != changed

    def test_favorites_compare_by_membership(self):
        user = User('n', 'e', 'k', favorites=['1', '2'])
        other = User('n', 'e', 'k', favorites=['2', '1'])

        assert user == other

    def test_not_equal_to_other_types(self):
        assert User('n', 'e', 'k') != {'nickname': 'n'}

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(User('n', 'e', 'k'))

    def test_has_accepted_terms(self):
        assert User('n', 'e', 'k', terms_accepted=True).has_accepted_terms is True
