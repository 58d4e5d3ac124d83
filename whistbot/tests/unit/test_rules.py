"""Rules configuration tests."""

from __future__ import annotations

import pytest

from ...engine.rules import RulesConfig, TableRules, load_rules


def test_default_rules_file() -> None:
    rules = load_rules()
    assert rules.table.seats == 4
    assert rules.table.hand_size == 13
    assert rules.trick_rules.check_turn_order is True


def test_missing_file_falls_back_to_defaults(tmp_path) -> None:
    assert load_rules(tmp_path / "absent.yaml").model_dump() == RulesConfig().model_dump()


def test_custom_rules_file(tmp_path) -> None:
    path = tmp_path / "rules.yaml"
    path.write_text("table:\n  seats: 3\n  hand_size: 17\ntrick_rules:\n  check_turn_order: false\n", encoding="utf-8")
    rules = load_rules(path)
    assert rules.table.seats == 3
    assert rules.table.hand_size == 17
    assert rules.trick_rules.check_turn_order is False


def test_partial_rules_file(tmp_path) -> None:
    path = tmp_path / "rules.yaml"
    path.write_text("trick_rules:\n  check_turn_order: false\n", encoding="utf-8")
    rules = load_rules(path)
    assert rules.table.seats == 4
    assert rules.trick_rules.check_turn_order is False


@pytest.mark.parametrize("seats, hand_size", [(1, 13), (5, 10), (4, 14), (2, 0)])
def test_invalid_table_rejected(seats: int, hand_size: int) -> None:
    with pytest.raises(ValueError):
        TableRules(seats=seats, hand_size=hand_size)


def test_model_validate_round_trip() -> None:
    data = {"table": {"seats": 2, "hand_size": 26}, "trick_rules": {"check_turn_order": True}}
    assert RulesConfig.model_validate(data).model_dump() == data
