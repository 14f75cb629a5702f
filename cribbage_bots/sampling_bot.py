"""Sampling heuristic bot: the medium opponent."""

from __future__ import annotations

import logging
from typing import List, Sequence

from cribbage.cards import Card
from cribbage.deck import build_deck
from cribbage.scoring import FIFTEEN, THIRTY_ONE, score_hand

from .base import BotStrategy, discard_pairs, kept_cards

logger = logging.getLogger(__name__)


class SamplingBot(BotStrategy):
    """Scores every discard against a small random sample of starters."""

    name = "Sampling"

    def choose_discards(self, hand: Sequence[Card], is_dealer: bool) -> List[int]:
        held = set(hand)
        unseen = [card for card in build_deck() if card not in held]
        sample = self._rng.sample(unseen, min(self.tuning.sample_size, len(unseen)))

        best_avg = -1.0
        best = (0, 1)
        for i, j in discard_pairs(len(hand)):
            kept = kept_cards(hand, i, j)
            total = sum(score_hand(kept, starter).total for starter in sample)
            avg = total / len(sample)
            if avg > best_avg:
                best_avg = avg
                best = (i, j)

        logger.debug("%s discards %s (sampled average %.2f)", self.name, best, best_avg)
        return sorted(best)

    def pick_play(
        self,
        hand: Sequence[Card],
        playable: Sequence[int],
        pile: Sequence[Card],
        running_total: int,
    ) -> int:
        for target in (THIRTY_ONE, FIFTEEN):
            for index in playable:
                if running_total + hand[index].value == target:
                    return index

        if pile:
            last_rank = pile[-1].rank
            for index in playable:
                if hand[index].rank is last_rank:
                    return index

        danger = self.tuning.danger_totals
        safe = [index for index in playable if running_total + hand[index].value not in danger]
        if safe:
            return self._rng.choice(safe)
        return self._rng.choice(list(playable))
