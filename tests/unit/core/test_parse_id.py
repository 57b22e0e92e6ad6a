"""Unit tests for URL identity parsing."""

from __future__ import annotations

import pytest

from modules.core.dtos import MAX_ID
from modules.core.views import parse_id

pytestmark = pytest.mark.unit


class TestParseId:
    @pytest.mark.parametrize("value, expected", [("1", 1), ("42", 42), (str(MAX_ID), MAX_ID)])
    def test_valid(self, value, expected):
        assert parse_id(value) == expected

    @pytest.mark.parametrize(
        "value", ["0", "-3", "abc", "", None, "1.5", str(MAX_ID + 1), str(2**64)]
    )
    def test_rejected(self, value):
        assert parse_id(value) is None
