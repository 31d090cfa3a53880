"""Tests for utility functions."""

import pytest

from botcafe.exceptions import BadRequest
from botcafe.utils import coerce_id, equals


class TestCoerceId:
    """Test identifier parsing."""

    def test_integers(self):
        assert coerce_id(7) == 7
        assert coerce_id('42') == 42
        assert coerce_id(' 42 ') == 42

    def test_blank(self):
        for value in (None, '', '   '):
            with pytest.raises(BadRequest, match='is required'):
                coerce_id(value, 'Bot ID')

    def test_invalid(self):
        for value in ('abc', '1.5', '-3', '0', 0, -1, '12abc', '99999999999999999999', 2 ** 63):
            with pytest.raises(BadRequest, match='Invalid'):
                coerce_id(value)

    def test_bool_rejected(self):
        with pytest.raises(BadRequest):
            coerce_id(True)

    def test_message_uses_label(self):
        with pytest.raises(BadRequest, match='Invalid userId'):
            coerce_id('x', 'userId')


class TestEquals:
    """Test filter construction."""

    def test_builds_conjunction(self):
        assert equals(user_id=1, bot_id=2) == {
            'and': [
                {'user_id': {'equals': 1}},
                {'bot_id': {'equals': 2}},
            ]
        }
