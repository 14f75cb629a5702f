"""Pegging pile representation for one sub-round of play."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .cards import Card
from .mechanics import MAX_RUNNING_TOTAL
from .scoring import ScoreEvent, score_play
from .state import Seat


class PileError(RuntimeError):
    """Raised when a play would break the pile's constraints."""


@dataclass
class PlayPile:
    cards: List[Card] = field(default_factory=list)
    running_total: int = 0
    go_declared_by: Optional[Seat] = None
    last_player: Optional[Seat] = None

    def is_empty(self) -> bool:
        return not self.cards

    def add_play(self, seat: Seat, card: Card) -> List[ScoreEvent]:
        """Place a card and return the pegging points it earns."""
        if self.running_total + card.value > MAX_RUNNING_TOTAL:
            raise PileError(f"{card} would take the count past {MAX_RUNNING_TOTAL}.")
        self.cards.append(card)
        self.running_total += card.value
        self.last_player = seat
        return score_play(self.cards, self.running_total)

    def reached_limit(self) -> bool:
        return self.running_total == MAX_RUNNING_TOTAL

    def reset(self) -> None:
        """Start a new count. The last player is kept for last-card attribution."""
        self.cards = []
        self.running_total = 0
        self.go_declared_by = None

    def clear(self) -> None:
        self.reset()
        self.last_player = None
