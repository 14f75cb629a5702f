"""Legal move helpers for the pegging phase."""

from __future__ import annotations

from typing import List, Sequence

from .cards import Card

MAX_RUNNING_TOTAL = 31


def can_play(hand: Sequence[Card], running_total: int) -> bool:
    """Return True if any card in hand can be played without exceeding 31."""
    return any(card.value + running_total <= MAX_RUNNING_TOTAL for card in hand)


def playable_indices(hand: Sequence[Card], running_total: int) -> List[int]:
    """Return the indices of the cards that are legal to play."""
    return [index for index, card in enumerate(hand) if card.value + running_total <= MAX_RUNNING_TOTAL]
