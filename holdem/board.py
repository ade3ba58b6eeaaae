"""Community card progression: preflop, flop, turn, river."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from holdem.card_set import Flop, find_duplicate
from holdem.cards import Card
from holdem.errors import DuplicateCardError, IllegalTransitionError, InvalidCardError


class Stage(Enum):
    """Board stage, valued by the number of community cards."""

    PREFLOP = 0
    FLOP = 3
    TURN = 4
    RIVER = 5

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable community cards.

    A turn card needs a flop and a river card needs a turn card. Every card
    must differ from the others. Transitions return a new board.
    """

    flop: Flop | None = None
    turn_card: Card | None = None
    river_card: Card | None = None

    def __post_init__(self) -> None:
        if self.turn_card is not None and self.flop is None:
            raise IllegalTransitionError("Turn card dealt before the flop")
        if self.river_card is not None and self.turn_card is None:
            raise IllegalTransitionError("River card dealt before the turn")
        duplicate = find_duplicate(self.to_list())
        if duplicate is not None:
            raise DuplicateCardError(duplicate)

    @classmethod
    def preflop(cls) -> "Board":
        return cls()

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Board":
        """Build a board from 0, 3, 4 or 5 cards in dealing order."""
        cards = list(cards)
        try:
            Stage(len(cards))
        except ValueError:
            raise InvalidCardError(f"A board cannot hold {len(cards)} cards") from None

        if not cards:
            return cls()
        board = cls(Flop(cards[:3]))
        for card, deal in zip(cards[3:], (cls.turn, cls.river)):
            board = deal(board, card)
        return board

    @classmethod
    def parse(cls, text: str) -> "Board":
        """Parse whitespace-separated tokens like 'Ah Kd 7c 2s'."""
        return cls.from_cards(Card.parse(token) for token in text.split())

    @property
    def stage(self) -> Stage:
        return Stage(len(self))

    def deal_flop(self, flop: Flop) -> "Board":
        self._require(Stage.PREFLOP)
        return Board(flop)

    def turn(self, card: Card) -> "Board":
        self._require(Stage.FLOP)
        return Board(self.flop, card)

    def river(self, card: Card) -> "Board":
        self._require(Stage.TURN)
        return Board(self.flop, self.turn_card, card)

    def _require(self, stage: Stage) -> None:
        if self.stage != stage:
            raise IllegalTransitionError(f"Board is at the {self.stage}, expected the {stage}")

    def to_list(self) -> list[Card]:
        """All board cards in dealing order."""
        cards = list(self.flop) if self.flop is not None else []
        cards.extend(c for c in (self.turn_card, self.river_card) if c is not None)
        return cards

    def contains_card(self, card: Card) -> bool:
        return card in self.to_list()

    def __contains__(self, card: object) -> bool:
        return card in self.to_list()

    def __iter__(self) -> Iterator[Card]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self.to_list())

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.to_list())
