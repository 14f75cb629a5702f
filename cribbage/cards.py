"""Card-related data structures and helpers for cribbage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List


class Suit(Enum):
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return self.name.lower()


class Rank(Enum):
    ACE = auto()
    TWO = auto()
    THREE = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()
    SEVEN = auto()
    EIGHT = auto()
    NINE = auto()
    TEN = auto()
    JACK = auto()
    QUEEN = auto()
    KING = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Position in rank order, Ace low. Used for runs.
RANK_ORDER: dict[Rank, int] = {rank: index for index, rank in enumerate(Rank, start=1)}

# Counting value used for fifteens and the pegging total.
CARD_VALUES: dict[Rank, int] = {rank: min(order, 10) for rank, order in RANK_ORDER.items()}

RANK_SYMBOLS: dict[Rank, str] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

_RANK_BY_SYMBOL = {symbol: rank for rank, symbol in RANK_SYMBOLS.items()}
_RANK_BY_SYMBOL["T"] = Rank.TEN
_SUIT_BY_INITIAL = {suit.name[0]: suit for suit in Suit}
_SUIT_BY_INITIAL.update({symbol: suit for suit, symbol in SUIT_SYMBOLS.items()})


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    rank: Rank
    suit: Suit

    @property
    def order(self) -> int:
        return RANK_ORDER[self.rank]

    @property
    def value(self) -> int:
        return CARD_VALUES[self.rank]

    def __str__(self) -> str:
        return card_label(self)


def card_label(card: Card) -> str:
    return f"{RANK_SYMBOLS[card.rank]}{SUIT_SYMBOLS[card.suit]}"


def serialize_card(card: Card) -> dict[str, str]:
    return {"rank": card.rank.name.lower(), "suit": card.suit.name.lower()}


def parse_card(text: str) -> Card:
    """Parse a short card code such as ``"5H"``, ``"10S"``, ``"TD"`` or ``"J♠"``."""
    code = text.strip().upper()
    if len(code) < 2:
        raise ValueError(f"Unknown card: {text!r}")
    rank = _RANK_BY_SYMBOL.get(code[:-1])
    suit = _SUIT_BY_INITIAL.get(code[-1])
    if rank is None or suit is None:
        raise ValueError(f"Unknown card: {text!r}")
    return Card(rank, suit)


def parse_cards(text: str) -> List[Card]:
    """Parse whitespace separated card codes."""
    return [parse_card(token) for token in text.split()]
