"""Common bot strategy interfaces."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from cribbage.cards import Card
from cribbage.mechanics import playable_indices
from cribbage.rules_schema import BotTuning


class BotStrategy:
    """Base class for cribbage bot policies."""

    name: str = "BaseBot"

    def __init__(self, seed: Optional[int] = None, tuning: Optional[BotTuning] = None) -> None:
        self._rng = random.Random(seed)
        self.tuning = tuning or BotTuning()

    def choose_discards(self, hand: Sequence[Card], is_dealer: bool) -> List[int]:
        """Return two distinct, sorted indices of cards to send to the crib."""
        raise NotImplementedError

    def choose_play(self, hand: Sequence[Card], pile: Sequence[Card], running_total: int) -> Optional[int]:
        """Return the index of the card to play, or None to declare Go."""
        playable = playable_indices(hand, running_total)
        if not playable:
            return None
        return self.pick_play(hand, playable, pile, running_total)

    def pick_play(
        self,
        hand: Sequence[Card],
        playable: Sequence[int],
        pile: Sequence[Card],
        running_total: int,
    ) -> int:
        """Choose among legal indices. ``playable`` is never empty."""
        return self._rng.choice(list(playable))


def discard_pairs(size: int) -> List[tuple[int, int]]:
    """Every (i, j) discard pair with i < j, in enumeration order."""
    return [(i, j) for i in range(size) for j in range(i + 1, size)]


def kept_cards(hand: Sequence[Card], i: int, j: int) -> List[Card]:
    return [card for index, card in enumerate(hand) if index != i and index != j]
