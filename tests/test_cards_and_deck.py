import random

import pytest

from cribbage.cards import Card, Rank, Suit, card_label, parse_card, parse_cards, serialize_card
from cribbage.deck import DECK_SIZE, build_deck, deal, shuffled_deck


def test_build_deck_has_52_unique_cards():
    deck = build_deck()
    assert len(deck) == DECK_SIZE
    assert len(set(deck)) == DECK_SIZE


def test_rank_order_and_value():
    assert Card(Rank.ACE, Suit.CLUBS).order == 1
    assert Card(Rank.ACE, Suit.CLUBS).value == 1
    assert Card(Rank.NINE, Suit.CLUBS).value == 9
    assert Card(Rank.KING, Suit.CLUBS).order == 13
    for rank in (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING):
        assert Card(rank, Suit.HEARTS).value == 10


def test_shuffled_deck_is_a_permutation():
    deck = shuffled_deck(random.Random(3))
    assert sorted(map(card_label, deck)) == sorted(map(card_label, build_deck()))


def test_deal_mutates_deck_in_place():
    deck = build_deck()
    first = deck[:6]
    dealt = deal(6, deck)
    assert dealt == first
    assert len(deck) == DECK_SIZE - 6
    assert not set(dealt) & set(deck)


def test_deal_clamps_to_remaining_cards():
    deck = build_deck()[:3]
    dealt = deal(5, deck)
    assert len(dealt) == 3
    assert deck == []
    assert deal(1, deck) == []


def test_parse_card_codes():
    assert parse_card("5H") == Card(Rank.FIVE, Suit.HEARTS)
    assert parse_card("10s") == Card(Rank.TEN, Suit.SPADES)
    assert parse_card("TD") == Card(Rank.TEN, Suit.DIAMONDS)
    assert parse_card("J♣") == Card(Rank.JACK, Suit.CLUBS)
    assert parse_cards("AH KC") == [Card(Rank.ACE, Suit.HEARTS), Card(Rank.KING, Suit.CLUBS)]


@pytest.mark.parametrize("text", ["", "Z", "1H", "5X", "11S"])
def test_parse_card_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_card(text)


def test_labels_and_serialization():
    card = Card(Rank.QUEEN, Suit.DIAMONDS)
    assert card_label(card) == "Q♦"
    assert str(card) == "Q♦"
    assert serialize_card(card) == {"rank": "queen", "suit": "diamonds"}
