"""Maps each difficulty tier to its bot strategy."""

from __future__ import annotations

from typing import Dict, Optional

from cribbage.rules_schema import BotTuning
from cribbage.state import AIDifficulty

from .base import BotStrategy
from .exhaustive_bot import ExhaustiveBot
from .random_bot import RandomBot
from .sampling_bot import SamplingBot

BOT_REGISTRY: Dict[AIDifficulty, type[BotStrategy]] = {
    AIDifficulty.EASY: RandomBot,
    AIDifficulty.MEDIUM: SamplingBot,
    AIDifficulty.HARD: ExhaustiveBot,
}


def create_bot(
    difficulty: AIDifficulty,
    *,
    seed: Optional[int] = None,
    tuning: Optional[BotTuning] = None,
) -> BotStrategy:
    return BOT_REGISTRY[difficulty](seed=seed, tuning=tuning)
