"""Convenience service layer for UI consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .cards import Card, card_label, serialize_card
from .game import GameEngine, new_game
from .mechanics import playable_indices
from .scoring import ScoreEvent
from .state import Action, AIDifficulty, GamePhase, ScoreBreakdown, Seat


@dataclass
class BreakdownView:
    owner: str
    is_crib: bool
    hand: list[dict]
    hand_labels: list[str]
    starter: dict
    items: list[dict]
    total: int


@dataclass
class ActionView:
    actor: str
    action: str
    card: Optional[dict]
    label: Optional[str]
    points: int
    score_events: list[dict]
    message: str


@dataclass
class GameView:
    phase: str
    round_number: int
    difficulty: str
    player_names: list[str]
    scores: list[int]
    dealer: str
    your_turn: bool
    current_turn: Optional[str]
    hand: list[dict]
    hand_labels: list[str]
    legal_play_indices: list[int]
    can_say_go: bool
    opponent_hand_count: int
    crib_size: int
    starter: Optional[dict]
    starter_label: Optional[str]
    play_pile: list[dict]
    pile_labels: list[str]
    running_total: int
    winner: Optional[str]
    breakdown: Optional[BreakdownView]
    actions: list[ActionView]


class GameService:
    """Facade around GameEngine for UI consumers."""

    def __init__(self, engine: Optional[GameEngine] = None) -> None:
        self.engine = engine

    # Session lifecycle -------------------------------------------------

    def new_game(self, player_name: str, difficulty: AIDifficulty, *, seed: Optional[int] = None) -> GameView:
        self.engine = new_game(player_name, difficulty, seed=seed)
        return self.get_view()

    def has_active_game(self) -> bool:
        return self.engine is not None

    # Actions -----------------------------------------------------------

    def discard(self, indices: Sequence[int]) -> GameView:
        self._require_engine().discard(list(indices))
        return self.get_view()

    def play_card(self, index: int) -> GameView:
        self._require_engine().play_card(index)
        return self.get_view()

    def say_go(self) -> GameView:
        self._require_engine().say_go()
        return self.get_view()

    def acknowledge(self) -> GameView:
        self._require_engine().acknowledge()
        return self.get_view()

    # Views -------------------------------------------------------------

    def get_view(self) -> GameView:
        engine = self._require_engine()
        visible = self._visible_hand_cards(engine)

        legal: list[int] = []
        can_say_go = False
        current_turn = None
        if engine.phase is GamePhase.PLAY:
            current_turn = engine.current_turn.name.lower()
            if engine.current_turn is Seat.HUMAN:
                legal = playable_indices(visible, engine.running_total)
                can_say_go = not legal

        return GameView(
            phase=engine.phase.name.lower(),
            round_number=engine.round_number,
            difficulty=engine.difficulty.value,
            player_names=[engine.human.name, engine.computer.name],
            scores=[engine.human.score, engine.computer.score],
            dealer=engine.dealer.name,
            your_turn=engine.your_turn,
            current_turn=current_turn,
            hand=[serialize_card(card) for card in visible],
            hand_labels=[card_label(card) for card in visible],
            legal_play_indices=legal,
            can_say_go=can_say_go,
            opponent_hand_count=engine.opponent_hand_count,
            crib_size=len(engine.crib),
            starter=serialize_card(engine.starter) if engine.starter else None,
            starter_label=card_label(engine.starter) if engine.starter else None,
            play_pile=[serialize_card(card) for card in engine.play_pile],
            pile_labels=[card_label(card) for card in engine.play_pile],
            running_total=engine.running_total,
            winner=engine.winner,
            breakdown=self._breakdown_view(engine.score_breakdown),
            actions=[self._action_view(action) for action in engine.action_log],
        )

    # Helpers -----------------------------------------------------------

    def _visible_hand_cards(self, engine: GameEngine) -> list[Card]:
        if engine.phase is GamePhase.PLAY:
            return list(engine.human.play_hand)
        return list(engine.human.hand)

    def _breakdown_view(self, breakdown: Optional[ScoreBreakdown]) -> Optional[BreakdownView]:
        if breakdown is None:
            return None
        return BreakdownView(
            owner=breakdown.owner,
            is_crib=breakdown.is_crib,
            hand=[serialize_card(card) for card in breakdown.hand],
            hand_labels=[card_label(card) for card in breakdown.hand],
            starter=serialize_card(breakdown.starter),
            items=[_event_payload(event) for event in breakdown.items],
            total=breakdown.total,
        )

    def _action_view(self, action: Action) -> ActionView:
        return ActionView(
            actor=action.actor,
            action=action.kind.name.lower(),
            card=serialize_card(action.card) if action.card else None,
            label=card_label(action.card) if action.card else None,
            points=action.points,
            score_events=[_event_payload(event) for event in action.score_events],
            message=action.message,
        )

    def _require_engine(self) -> GameEngine:
        if self.engine is None:
            raise RuntimeError("No active game.")
        return self.engine


def _event_payload(event: ScoreEvent) -> dict:
    return {"player": event.player, "kind": event.kind, "points": event.points, "reason": event.reason}
