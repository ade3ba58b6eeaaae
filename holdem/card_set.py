"""Fixed-size collections of distinct cards."""

from typing import ClassVar, Iterable, Iterator

from holdem.cards import Card, Suit, Value
from holdem.errors import DuplicateCardError, InvalidCardError


def find_duplicate(cards: Iterable[Card]) -> Card | None:
    """Return the first card seen twice, or None."""
    seen: set[Card] = set()
    for card in cards:
        if card in seen:
            return card
        seen.add(card)
    return None


class CardSet:
    """An immutable set of exactly ``size`` distinct cards.

    Construction order is kept for iteration, but equality and hashing use
    the canonically sorted cards so that order never matters.

    Subclasses pin ``size``; the base class accepts any number of cards.
    """

    size: ClassVar[int | None] = None

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card]) -> None:
        cards = tuple(cards)
        if self.size is not None and len(cards) != self.size:
            raise InvalidCardError(
                f"{type(self).__name__} needs {self.size} cards, got {len(cards)}"
            )
        duplicate = find_duplicate(cards)
        if duplicate is not None:
            raise DuplicateCardError(duplicate)
        self._cards = cards

    @classmethod
    def unchecked(cls, cards: Iterable[Card]):
        """Build without the duplicate check.

        Only for callers that already guarantee distinct cards, such as a
        dealer drawing from a single deck.
        """
        instance = cls.__new__(cls)
        instance._cards = tuple(cards)
        return instance

    @classmethod
    def parse(cls, text: str):
        """Parse from tokens like 'As Kc' or a concatenated run like 'AsKc'."""
        tokens = text.split()
        if cls.size is not None and len(tokens) == 1 and len(tokens[0]) == cls.size * 2:
            run = tokens[0]
            tokens = [run[i : i + 2] for i in range(0, len(run), 2)]
        return cls(Card.parse(token) for token in tokens)

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    def sorted(self) -> tuple[Card, ...]:
        """Cards in canonical order."""
        return tuple(sorted(self._cards, key=lambda c: c.sort_key))

    def contains_value(self, value: Value) -> bool:
        return any(card.value == value for card in self._cards)

    def contains_suit(self, suit: Suit) -> bool:
        return any(card.suit == suit for card in self._cards)

    def contains_card(self, card: Card) -> bool:
        return card in self._cards

    def values(self) -> list[Value]:
        return [card.value for card in self._cards]

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardSet):
            return NotImplemented
        return self.sorted() == other.sorted()

    def __hash__(self) -> int:
        return hash(self.sorted())

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class Hole(CardSet):
    """A player's two private cards."""

    size = 2
    __slots__ = ()

    def is_pocket_pair(self) -> bool:
        return self._cards[0].value == self._cards[1].value

    def is_suited(self) -> bool:
        return self._cards[0].suit == self._cards[1].suit


class Flop(CardSet):
    """The first three community cards."""

    size = 3
    __slots__ = ()


class FullBoard(CardSet):
    """All five community cards."""

    size = 5
    __slots__ = ()


class ShowdownCards(CardSet):
    """Hole cards plus a full board."""

    size = 7
    __slots__ = ()


def combine(*groups: Iterable[Card]) -> CardSet:
    """Join card groups into one set, rejecting cards shared between them.

    Seven cards come back as ``ShowdownCards``; other sizes as a plain
    ``CardSet``.
    """
    cards = [card for group in groups for card in group]
    if len(cards) == ShowdownCards.size:
        return ShowdownCards(cards)
    return CardSet(cards)
