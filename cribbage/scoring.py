"""Hand, crib and pegging scoring for cribbage."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import lru_cache
from typing import List, Sequence, Tuple

from .cards import RANK_SYMBOLS, Card, Rank

FIFTEEN = 15
THIRTY_ONE = 31

# Points for two, three and four cards of one rank.
SET_POINTS = {2: 2, 3: 6, 4: 12}


@dataclass(frozen=True)
class ScoreEvent:
    """A single scoring item. ``player`` stays empty until the points are attributed."""

    kind: str
    points: int
    reason: str
    player: str = ""

    def attributed_to(self, player: str) -> "ScoreEvent":
        return replace(self, player=player)


@dataclass(frozen=True)
class HandScore:
    total: int
    events: Tuple[ScoreEvent, ...]


def total_points(events: Sequence[ScoreEvent]) -> int:
    return sum(event.points for event in events)


@lru_cache(maxsize=None)
def _subset_masks(size: int) -> Tuple[int, ...]:
    """Bitmasks selecting every subset of two or more cards."""
    return tuple(mask for mask in range(1 << size) if bin(mask).count("1") >= 2)


def count_fifteens(cards: Sequence[Card]) -> int:
    values = [card.value for card in cards]
    count = 0
    for mask in _subset_masks(len(values)):
        subtotal = 0
        for bit, value in enumerate(values):
            if mask >> bit & 1:
                subtotal += value
        if subtotal == FIFTEEN:
            count += 1
    return count


def find_runs(cards: Sequence[Card]) -> List[Tuple[int, int]]:
    """Return ``(length, multiplicity)`` for every run of three or more.

    Longer runs are searched first and the ranks they use are zeroed so a
    run of four is never also counted as two runs of three.
    """
    frequency = [0] * 14
    for card in cards:
        frequency[card.order] += 1
    present = [order for order in range(1, 14) if frequency[order]]

    runs: List[Tuple[int, int]] = []
    for length in (5, 4, 3):
        if len(present) < length:
            continue
        for start in range(len(present) - length + 1):
            window = present[start : start + length]
            # present is sorted and unique, so a span of length - 1 means consecutive
            if window[-1] - window[0] != length - 1:
                continue
            multiplicity = 1
            for order in window:
                multiplicity *= frequency[order]
            if multiplicity > 0:
                runs.append((length, multiplicity))
            for order in window:
                frequency[order] = 0
    return runs


def _set_reason(rank: Rank, count: int, points: int) -> str:
    symbol = RANK_SYMBOLS[rank]
    if count == 2:
        return f"Pair of {symbol}s for {points}"
    if count == 3:
        return f"Three {symbol}s for {points}"
    return f"Four {symbol}s for {points}"


def score_hand(hand: Sequence[Card], starter: Card, is_crib: bool = False) -> HandScore:
    """Score a four card hand (or crib) together with the starter.

    In a crib only a five card flush counts.
    """
    combined = list(hand)
    combined.append(starter)
    events: List[ScoreEvent] = []

    fifteens = count_fifteens(combined)
    if fifteens:
        points = fifteens * 2
        label = "fifteen" if fifteens == 1 else "fifteens"
        events.append(ScoreEvent("fifteen", points, f"{fifteens} {label} for {points}"))

    rank_counts: dict[Rank, int] = {}
    for card in combined:
        rank_counts[card.rank] = rank_counts.get(card.rank, 0) + 1
    for rank in Rank:
        count = rank_counts.get(rank, 0)
        if count >= 2:
            points = SET_POINTS[count]
            events.append(ScoreEvent("pair", points, _set_reason(rank, count, points)))

    for length, multiplicity in find_runs(combined):
        points = length * multiplicity
        if multiplicity > 1:
            reason = f"{multiplicity}x run of {length} for {points}"
        else:
            reason = f"Run of {length} for {points}"
        events.append(ScoreEvent("run", points, reason))

    if len(hand) >= 4:
        suit = hand[0].suit
        if all(card.suit is suit for card in hand):
            if starter.suit is suit:
                events.append(ScoreEvent("flush", 5, "Flush for 5"))
            elif not is_crib:
                events.append(ScoreEvent("flush", 4, "Flush for 4"))

    if any(card.rank is Rank.JACK and card.suit is starter.suit for card in hand):
        events.append(ScoreEvent("nobs", 1, "Nobs for 1"))

    return HandScore(total=total_points(events), events=tuple(events))


def score_play(pile: Sequence[Card], running_total: int) -> List[ScoreEvent]:
    """Score the card just added to the pegging pile."""
    events: List[ScoreEvent] = []

    if running_total == FIFTEEN:
        events.append(ScoreEvent("fifteen", 2, "Fifteen for 2"))
    elif running_total == THIRTY_ONE:
        events.append(ScoreEvent("thirty_one", 2, "Thirty-one for 2"))

    if len(pile) >= 2:
        last_rank = pile[-1].rank
        matches = 0
        for card in reversed(pile[:-1]):
            if card.rank is not last_rank:
                break
            matches += 1
        if matches == 1:
            events.append(ScoreEvent("pair", 2, "Pair for 2"))
        elif matches == 2:
            events.append(ScoreEvent("pair", 6, "Three of a kind for 6"))
        elif matches >= 3:
            events.append(ScoreEvent("pair", 12, "Four of a kind for 12"))

    for length in range(len(pile), 2, -1):
        orders = sorted(card.order for card in pile[-length:])
        if all(nxt == cur + 1 for cur, nxt in zip(orders, orders[1:])):
            events.append(ScoreEvent("run", length, f"Run of {length} for {length}"))
            break

    return events
