"""Game state types for cribbage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .cards import Card
from .scoring import ScoreEvent


class IllegalAction(RuntimeError):
    """Base class for actions rejected by the engine."""


class WrongPhase(IllegalAction):
    """Raised when an action is attempted outside its phase."""


class WrongTurn(IllegalAction):
    """Raised when the human acts on the computer's turn."""


class InvalidDiscard(IllegalAction):
    """Raised when the discard selection is malformed."""


class InvalidCardIndex(IllegalAction):
    """Raised when a card index does not point into the hand."""


class CardExceedsLimit(IllegalAction):
    """Raised when a card would take the running total past 31."""


class IllegalGo(IllegalAction):
    """Raised when Go is declared while a legal play exists."""


class AIDifficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Seat(Enum):
    HUMAN = auto()
    COMPUTER = auto()

    def opponent(self) -> "Seat":
        return Seat.COMPUTER if self is Seat.HUMAN else Seat.HUMAN


class GamePhase(Enum):
    DISCARD = auto()
    PLAY = auto()
    COUNT_NON_DEALER = auto()
    COUNT_DEALER = auto()
    COUNT_CRIB = auto()
    GAME_OVER = auto()


COUNTING_PHASES = (GamePhase.COUNT_NON_DEALER, GamePhase.COUNT_DEALER, GamePhase.COUNT_CRIB)


class ActionKind(Enum):
    DISCARD = auto()
    PLAY = auto()
    GO = auto()
    SCORE = auto()


@dataclass
class PlayerState:
    name: str
    hand: List[Card] = field(default_factory=list)
    play_hand: List[Card] = field(default_factory=list)
    score: int = 0
    is_dealer: bool = False


@dataclass(frozen=True)
class Action:
    """One discrete step taken during an engine call, for presentation."""

    actor: str
    kind: ActionKind
    card: Optional[Card] = None
    score_events: Tuple[ScoreEvent, ...] = ()
    message: str = ""

    @property
    def points(self) -> int:
        return sum(event.points for event in self.score_events)


@dataclass(frozen=True)
class ScoreBreakdown:
    owner: str
    hand: Tuple[Card, ...]
    starter: Card
    items: Tuple[ScoreEvent, ...]
    total: int
    is_crib: bool = False


@dataclass
class GameStats:
    """In-memory tallies for the human player over one game."""

    hand_scores: List[int] = field(default_factory=list)
    crib_scores: List[int] = field(default_factory=list)
    highest_hand_score: int = 0

    def record_hand(self, score: int) -> None:
        self.hand_scores.append(score)
        self.highest_hand_score = max(self.highest_hand_score, score)

    def record_crib(self, score: int) -> None:
        self.crib_scores.append(score)
