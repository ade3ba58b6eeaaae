"""Card, Value and Suit definitions."""

from dataclasses import dataclass
from enum import IntEnum

from holdem.errors import InvalidCardError

VALUE_SYMBOLS = "23456789TJQKA"
SUIT_SYMBOLS = "shdc"


class Value(IntEnum):
    """Card values, Deuce lowest and Ace highest."""

    DEUCE = 0
    TREY = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    def __str__(self) -> str:
        return VALUE_SYMBOLS[self.value]

    @property
    def ordinal(self) -> int:
        """Plain 0-12 ordinal used for ranking and kickers."""
        return int(self)

    @property
    def straight_ordinal(self) -> int:
        """1-13 ordinal for straight detection (Ace may be remapped to 0)."""
        return int(self) + 1

    @classmethod
    def from_straight_ordinal(cls, ordinal: int) -> "Value":
        """Inverse of ``straight_ordinal``; both 0 and 13 map to Ace."""
        if ordinal == 0:
            return cls.ACE
        return cls(ordinal - 1)

    @classmethod
    def parse(cls, symbol: str) -> "Value":
        """Parse a single rank character like 'A' or '7'."""
        index = VALUE_SYMBOLS.find(symbol) if len(symbol) == 1 else -1
        if index < 0:
            raise InvalidCardError(f"Invalid value: {symbol!r}")
        return cls(index)


class Suit(IntEnum):
    """Card suits. The order only matters for sorting."""

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    def __str__(self) -> str:
        return SUIT_SYMBOLS[self.value]

    @classmethod
    def parse(cls, symbol: str) -> "Suit":
        """Parse a single suit character: 's', 'h', 'd' or 'c'."""
        index = SUIT_SYMBOLS.find(symbol) if len(symbol) == 1 else -1
        if index < 0:
            raise InvalidCardError(f"Invalid suit: {symbol!r}")
        return cls(index)


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card."""

    value: Value
    suit: Suit

    def __str__(self) -> str:
        return f"{self.value}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.value.name}, {self.suit.name})"

    @property
    def sort_key(self) -> int:
        """Canonical byte key for deterministic ordering.

        Key = (value << 2) | suit. Never used for hand strength.
        """
        return (self.value << 2) | self.suit

    @classmethod
    def parse(cls, token: str) -> "Card":
        """Parse card from a token like 'As', 'Kh', '2c', 'Td'."""
        if len(token) != 2 or not token.isascii():
            raise InvalidCardError(f"Invalid card string: {token!r}")
        return cls(value=Value.parse(token[0]), suit=Suit.parse(token[1]))


def full_deck() -> list[Card]:
    """All 52 cards in canonical order (value-major, suit-minor)."""
    return [Card(value, suit) for value in Value for suit in Suit]
