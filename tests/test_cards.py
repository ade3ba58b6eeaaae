"""Tests for the card model (holdem/cards.py)."""

import pytest

from holdem.cards import Card, Suit, Value, full_deck
from holdem.errors import InvalidCardError


class TestValue:
    """Test value ordinals and parsing."""

    def test_values_are_ordered(self):
        assert Value.DEUCE < Value.TREY < Value.TEN < Value.KING < Value.ACE
        assert len(Value) == 13

    @pytest.mark.parametrize(
        "value,ordinal,straight_ordinal",
        [
            (Value.DEUCE, 0, 1),
            (Value.FIVE, 3, 4),
            (Value.TEN, 8, 9),
            (Value.ACE, 12, 13),
        ],
    )
    def test_ordinals(self, value, ordinal, straight_ordinal):
        assert value.ordinal == ordinal
        assert value.straight_ordinal == straight_ordinal

    def test_ace_low_straight_ordinal(self):
        """Both ends of the straight universe map back to the Ace."""
        assert Value.from_straight_ordinal(0) == Value.ACE
        assert Value.from_straight_ordinal(13) == Value.ACE
        assert Value.from_straight_ordinal(4) == Value.FIVE

    @pytest.mark.parametrize("symbol", list("23456789TJQKA"))
    def test_parse_round_trip(self, symbol):
        assert str(Value.parse(symbol)) == symbol

    @pytest.mark.parametrize("symbol", ["1", "t", "a", "10", "", "X"])
    def test_parse_invalid(self, symbol):
        with pytest.raises(InvalidCardError):
            Value.parse(symbol)


class TestSuit:
    """Test suit parsing."""

    @pytest.mark.parametrize(
        "symbol,suit",
        [("s", Suit.SPADES), ("h", Suit.HEARTS), ("d", Suit.DIAMONDS), ("c", Suit.CLUBS)],
    )
    def test_parse(self, symbol, suit):
        assert Suit.parse(symbol) == suit
        assert str(suit) == symbol

    @pytest.mark.parametrize("symbol", ["S", "x", "", "sh"])
    def test_parse_invalid(self, symbol):
        with pytest.raises(InvalidCardError):
            Suit.parse(symbol)


class TestCard:
    """Test card parsing and ordering."""

    def test_parse(self):
        card = Card.parse("Td")
        assert card.value == Value.TEN
        assert card.suit == Suit.DIAMONDS

    @pytest.mark.parametrize("token", ["As", "Kh", "2c", "Td", "9s"])
    def test_round_trip(self, token):
        assert str(Card.parse(token)) == token

    @pytest.mark.parametrize("token", ["A", "Asd", "", "as", "AS", "1s", "A♠", "Ａs"])
    def test_parse_invalid(self, token):
        with pytest.raises(InvalidCardError):
            Card.parse(token)

    def test_invalid_card_is_a_value_error(self):
        with pytest.raises(ValueError):
            Card.parse("Zz")

    def test_cards_are_hashable_and_immutable(self):
        card = Card(Value.ACE, Suit.SPADES)
        assert card == Card.parse("As")
        assert len({card, Card.parse("As")}) == 1
        with pytest.raises(AttributeError):
            card.value = Value.KING

    def test_sort_key(self):
        """Key = value << 2 | suit."""
        assert Card.parse("2s").sort_key == 0
        assert Card.parse("2c").sort_key == 3
        assert Card.parse("As").sort_key == 48
        assert Card.parse("Ac").sort_key == 51


class TestFullDeck:
    """Test the canonical deck listing."""

    def test_contains_all_unique_cards(self, deck):
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_canonical_order(self, deck):
        assert [card.sort_key for card in deck] == list(range(52))
        assert str(deck[0]) == "2s"
        assert str(deck[-1]) == "Ac"

    def test_full_deck_returns_new_list(self):
        first = full_deck()
        first.pop()
        assert len(full_deck()) == 52
