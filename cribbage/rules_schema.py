"""Validation schema for cribbage rules and bot tuning."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, Field, field_validator

WINNING_SCORE = 121


class CribWeights(BaseModel):
    five: float = Field(2.5, ge=0, description="Bonus for each discarded five.")
    fifteen: float = Field(2.0, ge=0, description="Bonus when the discards sum to fifteen.")
    pair: float = Field(2.0, ge=0, description="Bonus when the discards are a pair.")
    adjacent: float = Field(1.0, ge=0, description="Bonus for discards one rank apart.")
    gap_of_two: float = Field(0.5, ge=0, description="Bonus for discards two ranks apart.")
    same_suit: float = Field(0.5, ge=0, description="Bonus for suited discards.")


class BotTuning(BaseModel):
    sample_size: int = Field(8, ge=1, le=46, description="Starters sampled by the medium bot per discard choice.")
    crib_weights: CribWeights = Field(default_factory=CribWeights)
    leave_penalty: float = Field(2.0, ge=0, description="Penalty for leaving the count on a danger total.")
    no_pair_penalty: float = Field(0.3, ge=0, description="Penalty for a play that does not pair the last card.")
    danger_totals: list[int] = Field(default_factory=lambda: [5, 21])

    @field_validator("danger_totals")
    @classmethod
    def validate_danger_totals(cls, value: list[int]) -> list[int]:
        for total in value:
            if not 1 <= total <= 30:
                raise ValueError(f"Danger total {total} is outside 1..30.")
        return value


class RuleSet(BaseModel):
    winning_score: Literal[121] = WINNING_SCORE
    hand_size: Literal[6] = 6
    crib_discards: Literal[2] = 2
    computer_name: str = "Computer"
    tuning: BotTuning = Field(default_factory=BotTuning)

    @field_validator("computer_name")
    @classmethod
    def ensure_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Computer name must not be empty.")
        return value


def load_rules(path: Union[str, Path]) -> RuleSet:
    """Read a JSON rules file."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return RuleSet.model_validate(payload)
