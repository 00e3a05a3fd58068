"""
Unit tests for watcher detection.
"""

import pytest

from rbd_bridge.errors import DecodeError
from rbd_bridge.parsers.watchers import has_watchers


class TestMapEncoding:
    """Tests for the older map-shaped watchers value."""

    def test_empty_map(self):
        assert has_watchers({"watchers": {}}) is False

    def test_non_empty_map(self):
        assert has_watchers({"watchers": {"w1": {}}}) is True


class TestListEncoding:
    """Tests for the newer list-shaped watchers value."""

    def test_empty_list(self):
        assert has_watchers({"watchers": []}) is False

    def test_non_empty_list(self):
        assert has_watchers({"watchers": [{}]}) is True

    def test_real_document(self):
        status = {
            "watchers": [
                {"address": "10.0.0.7:0/1234", "client": 4123, "cookie": 1},
            ]
        }
        assert has_watchers(status) is True


class TestUnparseable:
    """Tests for values that are neither map nor list."""

    def test_missing_key(self):
        with pytest.raises(DecodeError):
            has_watchers({})

    @pytest.mark.parametrize("value", [None, "none", 0, 1, True])
    def test_other_shapes(self, value):
        with pytest.raises(DecodeError):
            has_watchers({"watchers": value})
