"""Exhaustive evaluation bot: the hard opponent."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from cribbage.cards import Card
from cribbage.deck import build_deck
from cribbage.mechanics import MAX_RUNNING_TOTAL
from cribbage.scoring import FIFTEEN, score_play, score_hand, total_points

from .base import BotStrategy, discard_pairs, kept_cards

logger = logging.getLogger(__name__)


class ExhaustiveBot(BotStrategy):
    """Averages every retained hand over all unseen starters and pegs defensively."""

    name = "Exhaustive"

    def estimate_crib_value(self, discarded: Sequence[Card]) -> float:
        """Rough worth of two cards sent to a crib."""
        if len(discarded) != 2:
            return 0.0
        weights = self.tuning.crib_weights
        first, second = discarded
        value = 0.0
        for card in discarded:
            if card.value == 5:
                value += weights.five
        if first.value + second.value == FIFTEEN:
            value += weights.fifteen
        if first.rank is second.rank:
            value += weights.pair
        gap = abs(first.order - second.order)
        if gap == 1:
            value += weights.adjacent
        elif gap == 2:
            value += weights.gap_of_two
        if first.suit is second.suit:
            value += weights.same_suit
        return value

    def choose_discards(self, hand: Sequence[Card], is_dealer: bool) -> List[int]:
        held = set(hand)
        unseen = [card for card in build_deck() if card not in held]

        best_avg = float("-inf")
        best = (0, 1)
        for i, j in discard_pairs(len(hand)):
            kept = kept_cards(hand, i, j)
            total = sum(score_hand(kept, starter).total for starter in unseen)
            avg = total / len(unseen) if unseen else 0.0
            crib_value = self.estimate_crib_value((hand[i], hand[j]))
            avg += crib_value if is_dealer else -crib_value
            # strict comparison keeps the first pair in enumeration order on ties
            if avg > best_avg:
                best_avg = avg
                best = (i, j)

        logger.debug("%s discards %s (adjusted average %.2f)", self.name, best, best_avg)
        return sorted(best)

    def rate_play(self, card: Card, pile: Sequence[Card], running_total: int) -> Tuple[int, float]:
        """Return (immediate pegging points, defensive penalty) for playing ``card``."""
        new_total = running_total + card.value
        points = total_points(score_play(list(pile) + [card], new_total))

        penalty = 0.0
        if new_total in self.tuning.danger_totals:
            penalty += self.tuning.leave_penalty
        pairs_last = bool(pile) and pile[-1].rank is card.rank
        if not pairs_last and new_total < MAX_RUNNING_TOTAL:
            penalty += self.tuning.no_pair_penalty
        return points, penalty

    def pick_play(
        self,
        hand: Sequence[Card],
        playable: Sequence[int],
        pile: Sequence[Card],
        running_total: int,
    ) -> int:
        scored = []
        for index in playable:
            points, penalty = self.rate_play(hand[index], pile, running_total)
            scored.append((index, points - penalty))

        self._rng.shuffle(scored)
        scored.sort(key=lambda item: item[1], reverse=True)
        return scored[0][0]
