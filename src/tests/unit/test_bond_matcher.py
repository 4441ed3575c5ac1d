"""Unit tests for bond number normalization and matching."""

import pytest

from prizebond_checker.matching.bond_matcher import (
    compute_matches, normalize_bond_number, normalize_tokens
)
from prizebond_checker.models.bond_result import BondMatch


class TestNormalizeBondNumber:
    """Test extraction of canonical bond numbers."""

    @pytest.mark.parametrize("token, expected", [
        ("123456", "123456"),
        ("012345", "012345"),
        ("BD123456X", "123456"),
        ("No.654321", "654321"),
        ("111111-222222", "111111"),
        (123456, "123456"),
    ])
    def test_valid(self, token, expected):
        assert normalize_bond_number(token) == expected

    @pytest.mark.parametrize("token", [
        "12345",
        "1234567",
        "12345678901",
        "abc",
        "",
    ])
    def test_dropped(self, token):
        assert normalize_bond_number(token) is None

    def test_idempotent(self):
        once = normalize_bond_number("Bond 098765 issued")

        assert normalize_bond_number(once) == once

    def test_non_ascii_digits_are_ignored(self):
        assert normalize_bond_number("١٢٣٤٥٦") is None

    def test_normalize_tokens_keeps_order_and_duplicates(self):
        tokens = ["333333", "x", "111111", "1234567", "333333", ""]

        assert normalize_tokens(tokens) == ["333333", "111111", "333333"]


class TestComputeMatches:
    """Test matching user bonds against a draw."""

    def test_user_duplicates_are_kept(self):
        result = compute_matches(
            ["123456", "123456", "999999"],
            ["123456", "123456"],
        )

        assert [m.bond_number for m in result.matches] == ["123456", "123456"]
        assert result.match_count == 2
        assert result.total_user_bonds == 3

    def test_matches_follow_user_order(self):
        result = compute_matches(
            ["300000", "100000", "200000"],
            ["100000", "200000", "300000"],
        )

        assert [m.bond_number for m in result.matches] == ["300000", "100000", "200000"]

    def test_prize_label(self):
        result = compute_matches(["111111"], ["111111"])

        assert result.matches == [BondMatch(bond_number="111111", prize="Matched")]

    def test_total_counts_only_valid_user_bonds(self):
        result = compute_matches(["111111", "junk", "12345", "", "222222"], [])

        assert result.matches == []
        assert result.total_user_bonds == 2

    def test_leading_zeros_are_significant(self):
        result = compute_matches(["012345"], ["12345", "123450"])

        assert result.matches == []

    def test_end_to_end_text(self):
        user = ["111111", "222222", "333333"]
        draw = ["Winning", "numbers:", "111111,", "444444"]

        result = compute_matches(user, draw)

        assert result.model_dump(by_alias=True) == {
            "matches": [{"bondNumber": "111111", "prize": "Matched"}],
            "totalUserBonds": 3,
        }
