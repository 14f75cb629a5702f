from cribbage.cards import parse_card, parse_cards
from cribbage.game import GameEngine
from cribbage.state import ActionKind, GamePhase, Seat
from cribbage_bots.base import BotStrategy


class FirstCardBot(BotStrategy):
    name = "FirstCard"

    def choose_discards(self, hand, is_dealer):
        return [0, 1]

    def pick_play(self, hand, playable, pile, running_total):
        return playable[0]


def pegging_engine(human_cards, computer_cards, *, human_dealer=False):
    engine = GameEngine(player_name="Test", seed=1, bot=FirstCardBot())
    engine.human.is_dealer = human_dealer
    engine.computer.is_dealer = not human_dealer
    engine.human.hand = parse_cards(human_cards)
    engine.computer.hand = parse_cards(computer_cards)
    engine.human.play_hand = list(engine.human.hand)
    engine.computer.play_hand = list(engine.computer.hand)
    engine.starter = parse_card("2S")
    engine.pile.clear()
    engine.phase = GamePhase.PLAY
    engine.current_turn = Seat.HUMAN
    return engine


def kinds(engine):
    return [(action.kind, action.actor) for action in engine.action_log]


def test_go_pair_scores_last_card_and_first_go_leads():
    engine = pegging_engine("KH QH 9S", "KD QD 5C")
    assert not engine.say_go()

    assert engine.play_card(0)
    assert engine.computer.score == 2
    assert engine.running_total == 20
    assert engine.current_turn is Seat.HUMAN

    assert engine.play_card(0)
    assert kinds(engine) == [(ActionKind.PLAY, "Test"), (ActionKind.GO, "Computer")]
    assert engine.running_total == 30
    assert not engine.human_can_play

    assert not engine.play_card(0)
    assert engine.running_total == 30
    assert len(engine.human.play_hand) == 1

    assert engine.say_go()
    assert kinds(engine) == [
        (ActionKind.GO, "Test"),
        (ActionKind.SCORE, "Test"),
        (ActionKind.PLAY, "Computer"),
    ]
    assert engine.human.score == 1
    assert engine.play_pile == parse_cards("QD")
    assert engine.running_total == 10

    assert engine.play_card(0)
    assert engine.phase is GamePhase.COUNT_NON_DEALER
    assert engine.computer.score == 3
    assert engine.running_total == 0
    assert engine.play_pile == []
    last_card = engine.action_log[-1]
    assert last_card.kind is ActionKind.SCORE
    assert last_card.score_events[0].kind == "last_card"


def test_human_go_is_declared_when_stuck_after_computer_card():
    engine = pegging_engine("KH 9S QS", "KD AC")
    assert engine.play_card(0)
    assert engine.play_card(0)
    assert kinds(engine) == [
        (ActionKind.PLAY, "Test"),
        (ActionKind.PLAY, "Computer"),
        (ActionKind.GO, "Test"),
        (ActionKind.GO, "Computer"),
        (ActionKind.SCORE, "Computer"),
    ]
    assert engine.computer.score == 3
    assert engine.running_total == 0
    assert engine.current_turn is Seat.HUMAN

    assert engine.play_card(0)
    assert engine.human.score == 1
    assert engine.phase is GamePhase.COUNT_NON_DEALER


def test_empty_hand_declares_go_automatically():
    engine = pegging_engine("9H 8S", "KD QD 3C")
    assert engine.play_card(0)
    assert engine.play_card(0)
    assert [action.kind for action in engine.action_log] == [
        ActionKind.PLAY,
        ActionKind.PLAY,
        ActionKind.GO,
        ActionKind.GO,
        ActionKind.SCORE,
        ActionKind.GO,
        ActionKind.PLAY,
        ActionKind.SCORE,
    ]
    assert engine.computer.score == 2
    assert engine.human.score == 0
    assert engine.phase is GamePhase.COUNT_NON_DEALER


def test_thirty_one_resets_the_count():
    engine = pegging_engine("KH QS AH", "KD 7C 2C")
    assert engine.play_card(0)
    assert engine.play_card(0)
    assert kinds(engine)[-1] == (ActionKind.GO, "Computer")

    assert engine.play_card(0)
    thirty_one = engine.action_log[0]
    assert thirty_one.card == parse_card("AH")
    assert [event.kind for event in thirty_one.score_events] == ["thirty_one"]
    assert all(event.player == "Test" for event in thirty_one.score_events)
    assert engine.human.score == 2
    assert engine.computer.score == 3
    assert engine.phase is GamePhase.COUNT_NON_DEALER


def test_pegging_win_stops_the_game():
    engine = pegging_engine("5H KS", "5D 9C")
    engine.computer.score = 120
    assert engine.play_card(0)
    assert engine.phase is GamePhase.GAME_OVER
    assert engine.winner == "Computer"
    assert engine.computer.score == 122
    assert engine.action_log[-1].kind is ActionKind.PLAY
    assert not engine.play_card(0)
    assert engine.human.play_hand == parse_cards("KS")


def test_actions_out_of_turn_are_ignored():
    engine = pegging_engine("KH QH 9S", "KD QD 5C")
    engine.current_turn = Seat.COMPUTER
    assert not engine.play_card(0)
    assert not engine.say_go()
    assert not engine.play_card(7)
    assert len(engine.human.play_hand) == 3
    assert engine.play_pile == []


def test_computer_leads_when_human_deals():
    engine = GameEngine(player_name="Test", seed=13, bot=FirstCardBot())
    engine.human.is_dealer, engine.computer.is_dealer = True, False
    assert engine.discard([0, 1])
    assert engine.phase is GamePhase.PLAY
    assert engine.current_turn is Seat.HUMAN
    assert len(engine.play_pile) == 1
    assert len(engine.computer.play_hand) == 3
    assert engine.action_log[-1].kind is ActionKind.PLAY
    assert engine.action_log[-1].actor == "Computer"
    # the kept hand is still there for counting
    assert len(engine.computer.hand) == 4
