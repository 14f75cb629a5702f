"""High-level game orchestration for cribbage."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random
from typing import List, Optional, Sequence

from cribbage_bots import BotStrategy, create_bot

from .cards import Card, Rank
from .deck import deal, shuffled_deck
from .mechanics import can_play
from .pegging import PlayPile
from .rules_schema import RuleSet
from .scoring import ScoreEvent, score_hand, total_points
from .state import (
    COUNTING_PHASES,
    Action,
    ActionKind,
    AIDifficulty,
    CardExceedsLimit,
    GamePhase,
    GameStats,
    IllegalAction,
    IllegalGo,
    InvalidCardIndex,
    InvalidDiscard,
    PlayerState,
    ScoreBreakdown,
    Seat,
    WrongPhase,
    WrongTurn,
)

logger = logging.getLogger(__name__)


@dataclass
class GameEngine:
    """Manage one game of cribbage between a human seat and a bot.

    Every public action clears ``action_log`` and refills it with what
    happened during the call, including any turns the bot took in response.
    Malformed or out-of-turn actions change nothing and return False.
    """

    player_name: str = "Player"
    difficulty: AIDifficulty = AIDifficulty.EASY
    seed: Optional[int] = None
    rules: RuleSet = field(default_factory=RuleSet)
    bot: Optional[BotStrategy] = None

    phase: GamePhase = field(init=False, default=GamePhase.DISCARD)
    round_number: int = field(init=False, default=1)
    human: PlayerState = field(init=False)
    computer: PlayerState = field(init=False)
    deck: List[Card] = field(init=False, default_factory=list)
    starter: Optional[Card] = field(init=False, default=None)
    crib: List[Card] = field(init=False, default_factory=list)
    pile: PlayPile = field(init=False, default_factory=PlayPile)
    current_turn: Seat = field(init=False, default=Seat.HUMAN)
    action_log: List[Action] = field(init=False, default_factory=list)
    score_breakdown: Optional[ScoreBreakdown] = field(init=False, default=None)
    winner: Optional[str] = field(init=False, default=None)
    stats: GameStats = field(init=False, default_factory=GameStats)
    rng: Random = field(init=False)

    def __post_init__(self) -> None:
        self.rng = Random(self.seed)
        if self.bot is None:
            self.bot = create_bot(self.difficulty, seed=self.rng.getrandbits(32), tuning=self.rules.tuning)
        self.human = PlayerState(name=self.player_name)
        self.computer = PlayerState(name=self.rules.computer_name, is_dealer=True)
        self._deal_round()

    # Accessors ---------------------------------------------------------

    @property
    def dealer(self) -> PlayerState:
        return self.human if self.human.is_dealer else self.computer

    @property
    def non_dealer(self) -> PlayerState:
        return self.computer if self.human.is_dealer else self.human

    @property
    def is_human_dealer(self) -> bool:
        return self.human.is_dealer

    @property
    def play_pile(self) -> List[Card]:
        return list(self.pile.cards)

    @property
    def running_total(self) -> int:
        return self.pile.running_total

    @property
    def your_turn(self) -> bool:
        if self.phase is GamePhase.PLAY:
            return self.current_turn is Seat.HUMAN
        return self.phase is not GamePhase.GAME_OVER

    @property
    def human_can_play(self) -> bool:
        return can_play(self.human.play_hand, self.pile.running_total)

    @property
    def opponent_hand_count(self) -> int:
        if self.phase is GamePhase.PLAY:
            return len(self.computer.play_hand)
        return len(self.computer.hand)

    @property
    def last_action(self) -> Optional[Action]:
        return self.action_log[-1] if self.action_log else None

    def player(self, seat: Seat) -> PlayerState:
        return self.human if seat is Seat.HUMAN else self.computer

    def dealer_seat(self) -> Seat:
        return Seat.HUMAN if self.human.is_dealer else Seat.COMPUTER

    # Lifecycle ---------------------------------------------------------

    def restart(self) -> None:
        """Reset scores and deal a fresh game with the same players."""
        self.human.score = 0
        self.computer.score = 0
        self.human.is_dealer = False
        self.computer.is_dealer = True
        self.round_number = 1
        self.winner = None
        self.stats = GameStats()
        self.score_breakdown = None
        self.action_log = []
        self._deal_round()

    def _deal_round(self) -> None:
        self.deck = shuffled_deck(self.rng)
        self.human.hand = deal(self.rules.hand_size, self.deck)
        self.computer.hand = deal(self.rules.hand_size, self.deck)
        self.human.play_hand = []
        self.computer.play_hand = []
        self.crib = []
        self.starter = None
        self.pile.clear()
        self.phase = GamePhase.DISCARD
        logger.debug("Round %d dealt; %s deals", self.round_number, self.dealer.name)

        assert self.bot is not None
        indices = self.bot.choose_discards(list(self.computer.hand), self.computer.is_dealer)
        self._move_to_crib(self.computer, indices)
        self._log(self.computer.name, ActionKind.DISCARD, message=f"{self.computer.name} discards to the crib")

    def _move_to_crib(self, player: PlayerState, indices: Sequence[int]) -> None:
        for index in sorted(indices, reverse=True):
            self.crib.append(player.hand.pop(index))

    # Scoring -----------------------------------------------------------

    def _log(
        self,
        actor: str,
        kind: ActionKind,
        *,
        card: Optional[Card] = None,
        events: Sequence[ScoreEvent] = (),
        message: str = "",
    ) -> None:
        self.action_log.append(Action(actor=actor, kind=kind, card=card, score_events=tuple(events), message=message))

    def _award(self, seat: Seat, points: int) -> bool:
        """Add points and return True if that ends the game."""
        player = self.player(seat)
        player.score += points
        if player.score >= self.rules.winning_score:
            self.winner = player.name
            self.phase = GamePhase.GAME_OVER
            logger.info("%s wins %d-%d", player.name, self.human.score, self.computer.score)
            return True
        return False

    def _award_bonus(self, seat: Seat, kind: str, points: int, reason: str, message: str) -> bool:
        name = self.player(seat).name
        event = ScoreEvent(kind, points, reason, player=name)
        self._log(name, ActionKind.SCORE, events=[event], message=message)
        return self._award(seat, points)

    # Discard -----------------------------------------------------------

    def discard(self, indices: Sequence[int]) -> bool:
        """Human sends two cards to the crib."""
        self.action_log = []
        try:
            self._check_discard(indices)
        except IllegalAction as exc:
            logger.debug("Rejected discard %r: %s", indices, exc)
            return False

        self._move_to_crib(self.human, indices)
        self._log(self.human.name, ActionKind.DISCARD, message=f"{self.human.name} discards to the crib")

        cut = deal(1, self.deck)
        self.starter = cut[0] if cut else None
        if self.starter is not None and self.starter.rank is Rank.JACK:
            dealer = self.dealer.name
            if self._award_bonus(
                self.dealer_seat(),
                "his_heels",
                2,
                "His Heels (Jack starter)",
                f"{dealer} scores 2 for His Heels!",
            ):
                return True

        self.human.play_hand = list(self.human.hand)
        self.computer.play_hand = list(self.computer.hand)
        self.pile.clear()
        self.phase = GamePhase.PLAY
        self.current_turn = self.dealer_seat().opponent()
        self._run_turns()
        return True

    def _check_discard(self, indices: Sequence[int]) -> None:
        if self.phase is not GamePhase.DISCARD:
            raise WrongPhase(f"Cannot discard during {self.phase.name.lower()}.")
        if len(indices) != self.rules.crib_discards or len(set(indices)) != len(indices):
            raise InvalidDiscard("Exactly two distinct cards must be discarded.")
        for index in indices:
            if not 0 <= index < len(self.human.hand):
                raise InvalidCardIndex(f"Index {index} is outside the hand.")

    # Pegging -----------------------------------------------------------

    def play_card(self, index: int) -> bool:
        """Human plays one card during pegging."""
        self.action_log = []
        try:
            self._check_play(index)
        except IllegalAction as exc:
            logger.debug("Rejected play %r: %s", index, exc)
            return False

        self._place_card(Seat.HUMAN, index)
        self._run_turns()
        return True

    def say_go(self) -> bool:
        """Human declares Go because no card fits under 31."""
        self.action_log = []
        try:
            self._check_turn()
            if can_play(self.human.play_hand, self.pile.running_total):
                raise IllegalGo("A legal play is available.")
        except IllegalAction as exc:
            logger.debug("Rejected Go: %s", exc)
            return False

        self._declare_go(Seat.HUMAN)
        self._run_turns()
        return True

    def _check_turn(self) -> None:
        if self.phase is not GamePhase.PLAY:
            raise WrongPhase(f"Cannot peg during {self.phase.name.lower()}.")
        if self.current_turn is not Seat.HUMAN:
            raise WrongTurn("It is not the human's turn.")

    def _check_play(self, index: int) -> None:
        self._check_turn()
        hand = self.human.play_hand
        if not 0 <= index < len(hand):
            raise InvalidCardIndex(f"Index {index} is outside the hand.")
        if not can_play([hand[index]], self.pile.running_total):
            raise CardExceedsLimit(f"{hand[index]} would take the count past 31.")

    def _place_card(self, seat: Seat, index: int) -> None:
        player = self.player(seat)
        card = player.play_hand[index]
        events = [event.attributed_to(player.name) for event in self.pile.add_play(seat, card)]
        del player.play_hand[index]
        self._log(player.name, ActionKind.PLAY, card=card, events=events, message=f"{player.name} plays {card}")

        if self.pile.reached_limit():
            self.pile.reset()

        points = total_points(events)
        if points and self._award(seat, points):
            return

        if not self.human.play_hand and not self.computer.play_hand:
            self._end_play()
            return
        self.current_turn = seat.opponent()

    def _declare_go(self, seat: Seat) -> None:
        name = self.player(seat).name
        self._log(name, ActionKind.GO, message=f"{name} says Go!")

        first_go = self.pile.go_declared_by
        if first_go is None or first_go is seat:
            self.pile.go_declared_by = seat
            self.current_turn = seat.opponent()
            return

        # Both players are stuck: the last card placed earns the point.
        scorer = self.pile.last_player or seat.opponent()
        self.pile.reset()
        scorer_name = self.player(scorer).name
        if self._award_bonus(scorer, "go", 1, "Go (last card)", f"{scorer_name} scores 1 for Go"):
            return
        if not self.human.play_hand and not self.computer.play_hand:
            self._end_play()
            return
        self.current_turn = first_go

    def _run_turns(self) -> None:
        """Play the bot's turns until the human has a decision or play ends."""
        assert self.bot is not None
        while self.phase is GamePhase.PLAY:
            if self.current_turn is Seat.HUMAN:
                if self.human.play_hand:
                    return
                self._declare_go(Seat.HUMAN)
                continue

            index = None
            if self.computer.play_hand:
                index = self.bot.choose_play(
                    list(self.computer.play_hand), list(self.pile.cards), self.pile.running_total
                )
            if index is None:
                self._declare_go(Seat.COMPUTER)
                continue

            self._place_card(Seat.COMPUTER, index)
            if (
                self.phase is GamePhase.PLAY
                and self.current_turn is Seat.HUMAN
                and self.human.play_hand
                and not self.human_can_play
            ):
                self._declare_go(Seat.HUMAN)

    def _end_play(self) -> None:
        if self.pile.running_total > 0:
            # 31 resets the pile before we get here, so this is a short count.
            seat = self.pile.last_player
            if seat is None:
                seat = self.dealer_seat().opponent()
            name = self.player(seat).name
            if self._award_bonus(seat, "last_card", 1, "Last card for 1", f"{name} scores 1 for last card"):
                return

        self.pile.reset()
        self.phase = GamePhase.COUNT_NON_DEALER

    # Counting ----------------------------------------------------------

    def acknowledge(self) -> bool:
        """Advance one counting step: non-dealer hand, dealer hand, then crib."""
        self.action_log = []
        if self.phase not in COUNTING_PHASES or self.starter is None:
            logger.debug("Rejected acknowledge during %s", self.phase.name.lower())
            return False

        if self.phase is GamePhase.COUNT_NON_DEALER:
            seat = self.dealer_seat().opponent()
            cards, is_crib, next_phase = self.player(seat).hand, False, GamePhase.COUNT_DEALER
        elif self.phase is GamePhase.COUNT_DEALER:
            seat = self.dealer_seat()
            cards, is_crib, next_phase = self.player(seat).hand, False, GamePhase.COUNT_CRIB
        else:
            seat = self.dealer_seat()
            cards, is_crib, next_phase = self.crib, True, GamePhase.DISCARD

        owner = self.player(seat).name
        result = score_hand(cards, self.starter, is_crib=is_crib)
        items = tuple(event.attributed_to(owner) for event in result.events)
        self.score_breakdown = ScoreBreakdown(
            owner=owner,
            hand=tuple(cards),
            starter=self.starter,
            items=items,
            total=result.total,
            is_crib=is_crib,
        )
        where = "crib" if is_crib else "hand"
        self._log(owner, ActionKind.SCORE, events=items, message=f"{owner} scores {result.total} in {where}")

        if seat is Seat.HUMAN:
            if is_crib:
                self.stats.record_crib(result.total)
            else:
                self.stats.record_hand(result.total)

        if self._award(seat, result.total):
            return True

        if next_phase is GamePhase.DISCARD:
            self.human.is_dealer = not self.human.is_dealer
            self.computer.is_dealer = not self.computer.is_dealer
            self.round_number += 1
            logger.info("Round %d: %d-%d", self.round_number, self.human.score, self.computer.score)
            self._deal_round()
        else:
            self.phase = next_phase
        return True


def new_game(player_name: str, ai_difficulty: AIDifficulty, *, seed: Optional[int] = None) -> GameEngine:
    """Create a game with the first round already dealt."""
    return GameEngine(player_name=player_name, difficulty=ai_difficulty, seed=seed)
