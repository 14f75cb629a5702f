import json

import pytest
from pydantic import ValidationError

from cribbage.rules_schema import WINNING_SCORE, BotTuning, RuleSet, load_rules


def test_defaults():
    rules = RuleSet()
    assert rules.winning_score == WINNING_SCORE == 121
    assert rules.computer_name == "Computer"
    assert rules.tuning.sample_size == 8
    assert rules.tuning.crib_weights.five == 2.5
    assert rules.tuning.danger_totals == [5, 21]


def test_winning_score_is_fixed():
    with pytest.raises(ValidationError):
        RuleSet(winning_score=61)


def test_tuning_bounds():
    with pytest.raises(ValidationError):
        BotTuning(sample_size=0)
    with pytest.raises(ValidationError):
        BotTuning(sample_size=47)
    with pytest.raises(ValidationError):
        BotTuning(danger_totals=[5, 31])


def test_blank_computer_name_rejected():
    with pytest.raises(ValidationError):
        RuleSet(computer_name="   ")


def test_load_rules(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"computer_name": "Muggins", "tuning": {"sample_size": 12}}), encoding="utf-8")
    rules = load_rules(path)
    assert rules.computer_name == "Muggins"
    assert rules.tuning.sample_size == 12
    assert rules.tuning.leave_penalty == 2.0
