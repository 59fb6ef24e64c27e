"""
Tests for the Universe enumeration.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from steamidlab.constants import universe as U
from steamidlab.types import AccountType, Universe


class TestUniverseDefinition:
    """Test the declared universes."""

    def test_members_in_order(self):
        assert [m.name for m in Universe] == [
            "INVALID",
            "PUBLIC",
            "BETA",
            "INTERNAL",
            "DEV",
            "RC",
        ]

    def test_ids_match_constants(self):
        assert Universe.INVALID.id == U.INVALID
        assert Universe.PUBLIC.id == U.PUBLIC
        assert Universe.BETA.id == U.BETA
        assert Universe.INTERNAL.id == U.INTERNAL
        assert Universe.DEV.id == U.DEV
        assert Universe.RC.id == U.RC

    def test_ids_are_unique(self):
        ids = [m.id for m in Universe]
        assert len(ids) == len(set(ids))

    def test_aliases(self):
        assert Universe.BASE is Universe.INVALID
        assert Universe.MIN is Universe.PUBLIC
        assert Universe.MAX is Universe.RC

    def test_aliases_agree_with_constants(self):
        assert Universe.BASE.id == U.BASE
        assert Universe.MIN.id == U.MIN
        assert Universe.MAX.id == U.MAX


class TestUniverseLookups:
    """Test Universe lookups in every direction."""

    @pytest.mark.parametrize("member", list(Universe))
    def test_round_trips(self, member):
        assert Universe.from_id_or_null(member.id) is member
        assert Universe.from_index_or_null(member.index) is member

    @given(id=st.integers().filter(lambda i: i not in range(6)))
    def test_unknown_id_falls_back(self, id):
        assert Universe.from_id_or_null(id) is None
        assert Universe.from_id_or_else(id, Universe.DEV) is Universe.DEV
        assert Universe.from_id_or_base(id) is Universe.BASE

    def test_from_id_or_else_get(self):
        assert Universe.from_id_or_else_get(2, lambda: Universe.RC) is Universe.BETA
        assert Universe.from_id_or_else_get(-5, lambda: Universe.RC) is Universe.RC

    def test_from_index(self):
        assert Universe.from_index_or_base(5) is Universe.RC
        assert Universe.from_index_or_base(6) is Universe.INVALID
        assert Universe.from_index_or_null(-1) is None

    def test_get_id(self):
        assert Universe.get_id_or_base(Universe.INTERNAL) == 3
        assert Universe.get_id_or_base(None) == U.BASE
        assert Universe.get_id_or_null(None) is None
        assert Universe.get_id_or_else(None, 77) == 77
        assert Universe.get_id_or_else_get(None, lambda: 8) == 8

    def test_get_id_rejects_other_enumerations(self):
        assert Universe.get_id_or_else(AccountType.CLAN, -1) == -1


class TestUniverseDisplay:
    """Test Universe display strings."""

    def test_str(self):
        assert str(Universe.PUBLIC) == "Universe::PUBLIC[id=1]"
        assert str(Universe.RC) == "Universe::RC[id=5]"

    def test_str_is_cached(self):
        assert str(Universe.BETA) is str(Universe.BETA)
