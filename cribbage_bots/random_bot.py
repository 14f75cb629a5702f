"""Random baseline bot: the easy opponent."""

from __future__ import annotations

from typing import List, Sequence

from cribbage.cards import Card

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def choose_discards(self, hand: Sequence[Card], is_dealer: bool) -> List[int]:
        return sorted(self._rng.sample(range(len(hand)), 2))
