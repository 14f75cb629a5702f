"""Simple bot arena: a bot takes the human seat and plays whole games."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Iterable, Optional

from cribbage.game import GameEngine
from cribbage.state import COUNTING_PHASES, AIDifficulty, GamePhase, Seat

from .base import BotStrategy
from .factory import create_bot

logger = logging.getLogger(__name__)

MAX_STEPS = 10_000


def _take_turn(engine: GameEngine, bot: BotStrategy) -> bool:
    if engine.phase is GamePhase.DISCARD:
        indices = bot.choose_discards(list(engine.human.hand), engine.human.is_dealer)
        return engine.discard(indices)
    if engine.phase is GamePhase.PLAY:
        if engine.current_turn is not Seat.HUMAN:
            raise RuntimeError("Engine returned control on the computer's turn.")
        index = bot.choose_play(list(engine.human.play_hand), engine.play_pile, engine.running_total)
        if index is None:
            return engine.say_go()
        return engine.play_card(index)
    if engine.phase in COUNTING_PHASES:
        return engine.acknowledge()
    return False


def play_game(engine: GameEngine, bot: BotStrategy, *, max_steps: int = MAX_STEPS) -> GameEngine:
    """Drive the human seat with ``bot`` until the game is over."""
    for _ in range(max_steps):
        if engine.phase is GamePhase.GAME_OVER:
            return engine
        if not _take_turn(engine, bot):
            raise RuntimeError(f"Bot {bot.name} made an illegal move during {engine.phase.name.lower()}.")
    raise RuntimeError(f"Game did not finish within {max_steps} steps.")


def run_match(
    challenger: AIDifficulty,
    opponent: AIDifficulty,
    *,
    n_games: int = 10,
    seed: Optional[int] = None,
) -> dict:
    wins: Dict[str, int] = {"challenger": 0, "opponent": 0}
    history = []
    for idx in range(n_games):
        game_seed = None if seed is None else seed + idx
        bot = create_bot(challenger, seed=game_seed)
        engine = GameEngine(player_name="Challenger", difficulty=opponent, seed=game_seed)
        play_game(engine, bot)
        key = "challenger" if engine.winner == engine.human.name else "opponent"
        wins[key] += 1
        history.append(
            {
                "scores": (engine.human.score, engine.computer.score),
                "rounds": engine.round_number,
                "winner": key,
            }
        )
        logger.debug("Game %d: %s wins after %d rounds", idx + 1, key, engine.round_number)
    return {"wins": wins, "history": history}


def main(argv: Iterable[str] | None = None) -> None:
    choices = [difficulty.value for difficulty in AIDifficulty]
    parser = argparse.ArgumentParser(description="Run a cribbage bot match.")
    parser.add_argument("--challenger", default="medium", choices=choices)
    parser.add_argument("--opponent", default="easy", choices=choices)
    parser.add_argument("--n", type=int, default=10, help="Number of games to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())
    results = run_match(
        AIDifficulty(args.challenger),
        AIDifficulty(args.opponent),
        n_games=args.n,
        seed=args.seed,
    )

    print(f"Wins after {args.n} games: {results['wins']}")
    average_rounds = sum(entry["rounds"] for entry in results["history"]) / max(1, len(results["history"]))
    print(f"Average rounds per game: {average_rounds:.1f}")


if __name__ == "__main__":
    main()
