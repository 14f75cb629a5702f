"""Deck creation and dealing utilities for cribbage."""

from __future__ import annotations

from random import Random
from typing import List, Optional

from .cards import Card, Rank, Suit


DECK_SIZE = 52


def build_deck() -> List[Card]:
    """Return the ordered 52-card deck, suit-major."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffled_deck(rng: Optional[Random] = None) -> List[Card]:
    """Return a freshly shuffled deck."""
    cards = build_deck()
    if rng is None:
        rng = Random()
    rng.shuffle(cards)
    return cards


def deal(n: int, deck: List[Card]) -> List[Card]:
    """Remove and return the first ``n`` cards of ``deck``.

    Asking for more cards than remain returns whatever is left.
    """
    count = max(0, min(n, len(deck)))
    dealt = deck[:count]
    del deck[:count]
    return dealt
