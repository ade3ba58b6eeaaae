"""Hand evaluation for Texas Hold'em poker."""

import logging
from collections import Counter
from concurrent.futures import Executor
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Iterable, Sequence

from holdem.card_set import combine
from holdem.cards import Card, Value
from holdem.straights import flush_suit, is_flush, is_straight

logger = logging.getLogger(__name__)


class HandCategory(IntEnum):
    """Poker hand categories from lowest to highest."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    TRIPS = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    QUADS = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Multiplicity shape (counts, highest count first) -> category
_SHAPES = {
    (4, 1): HandCategory.QUADS,
    (3, 2): HandCategory.FULL_HOUSE,
    (3, 1, 1): HandCategory.TRIPS,
    (2, 2, 1): HandCategory.TWO_PAIR,
    (2, 1, 1, 1): HandCategory.ONE_PAIR,
    (1, 1, 1, 1, 1): HandCategory.HIGH_CARD,
}


@dataclass(frozen=True, slots=True, order=True)
class HandValue:
    """Result of ranking a 5-card hand.

    Ordered by category first, then by the kicker tuple. Kickers hold only
    what breaks ties inside the category, e.g. (quad, kicker) for quads or
    all five values for a flush.
    """

    category: HandCategory
    kickers: tuple[Value, ...]

    def __str__(self) -> str:
        kickers = "".join(str(v) for v in self.kickers)
        return f"{self.category} ({kickers})"


def multiplicity(values: Iterable[Value]) -> tuple[tuple[int, Value], ...]:
    """Group values into (count, value) pairs, count then value descending."""
    return tuple(sorted(((count, value) for value, count in Counter(values).items()), reverse=True))


class HandEvaluator:
    """Evaluate poker hands."""

    @staticmethod
    def rank_hand(cards: Sequence[Card]) -> HandValue:
        """Classify exactly 5 cards."""
        if len(cards) != 5:
            raise ValueError(f"Expected 5 cards, got {len(cards)}")

        flush = is_flush(cards)
        straight_top = is_straight(cards)

        if flush and straight_top is not None:
            if straight_top == Value.ACE:
                return HandValue(HandCategory.ROYAL_FLUSH, (Value.ACE,))
            return HandValue(HandCategory.STRAIGHT_FLUSH, (straight_top,))

        if flush:
            values = tuple(sorted((c.value for c in cards), reverse=True))
            return HandValue(HandCategory.FLUSH, values)

        if straight_top is not None:
            return HandValue(HandCategory.STRAIGHT, (straight_top,))

        groups = multiplicity(c.value for c in cards)
        shape = tuple(count for count, _ in groups)
        try:
            category = _SHAPES[shape]
        except KeyError as exc:
            raise ValueError(f"Not a valid poker hand: {shape}") from exc
        return HandValue(category, tuple(value for _, value in groups))

    @staticmethod
    def best_hand(cards: Sequence[Card], executor: Executor | None = None) -> HandValue:
        """Best 5-card hand out of 5 to 7 cards.

        Every 5-card subset is ranked independently; with an executor the
        subsets are mapped through it. The maximum is taken either way.
        """
        cards = tuple(cards)
        if not 5 <= len(cards) <= 7:
            raise ValueError(f"Expected 5 to 7 cards, got {len(cards)}")

        subsets = combinations(cards, 5)
        if executor is None:
            return max(map(HandEvaluator.rank_hand, subsets))
        return max(executor.map(HandEvaluator.rank_hand, subsets))

    @staticmethod
    def compare(
        board: Iterable[Card],
        hole_a: Iterable[Card],
        hole_b: Iterable[Card],
        executor: Executor | None = None,
    ) -> tuple[HandValue, bool | None]:
        """Showdown between two holdings on the same board.

        Returns:
            (winning value, True if A wins / False if B wins / None on a chop)
        """
        board = tuple(board)
        value_a = HandEvaluator.best_hand(combine(hole_a, board), executor)
        value_b = HandEvaluator.best_hand(combine(hole_b, board), executor)
        logger.debug("Showdown: %s vs %s", value_a, value_b)

        if value_a > value_b:
            return value_a, True
        if value_b > value_a:
            return value_b, False
        return value_a, None

    @staticmethod
    def is_unbeatable(board: Iterable[Card], hole: Iterable[Card]) -> bool:
        """Fast check for a few hands that provably cannot be beaten.

        Covers a royal flush, quads with the best possible kicker when no
        higher quads and no straight flush can exist, and an Ace-high
        straight on an unpaired board without three cards of one suit.
        False means "not provable here", not "beatable".
        """
        board = tuple(board)
        value = HandEvaluator.best_hand(combine(hole, board))

        if value.category == HandCategory.ROYAL_FLUSH:
            return True

        no_flush = flush_suit(board) is None
        counts = Counter(card.value for card in board)

        if value.category == HandCategory.QUADS:
            quad, kicker = value.kickers
            best_kicker = Value.KING if quad == Value.ACE else Value.ACE
            higher_quads = any(v > quad and n >= 2 for v, n in counts.items())
            return no_flush and not higher_quads and kicker == best_kicker

        if value.category == HandCategory.STRAIGHT and value.kickers[0] == Value.ACE:
            return no_flush and len(counts) == len(board)

        return False
