"""Symbolic nut detection for a community board.

``find_nuts`` describes every two-card holding that cannot be beaten on a
board without enumerating holdings. The answer is one of a handful of
shapes, each with a constant-time ``contains`` test:

    AnyTwo          every holding plays the board or ties it
    PocketPair      both cards of one value
    HoldingValues   one card of each listed value (one or two values)
    CardPlusAny     one specific card, the other card is irrelevant
    CardPlusValue   one specific card plus any card of a value
    Holes           a short list of exact holdings

Resolution order follows hand strength: straight flushes (only reachable
with three or more board cards of one suit), then quads (reachable on any
paired board), then flushes, then straights, and finally a set of the top
board card.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from holdem.card_set import Hole, combine, find_duplicate
from holdem.cards import Card, Suit, Value
from holdem.errors import DuplicateCardError, IllegalTransitionError, InvalidCardError
from holdem.hand_evaluator import multiplicity
from holdem.straights import RunWindow, best_run, flush_suit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnyTwo:
    """No holding improves on the best hand every holding already makes."""

    def contains(self, hole: Hole) -> bool:
        return True

    def __str__(self) -> str:
        return "any two cards"


@dataclass(frozen=True, slots=True)
class PocketPair:
    value: Value

    def contains(self, hole: Hole) -> bool:
        return hole.is_pocket_pair() and hole[0].value == self.value

    def __str__(self) -> str:
        return f"{self.value}{self.value}"


@dataclass(frozen=True, slots=True)
class HoldingValues:
    """Hole holds a card of every listed value, suits irrelevant."""

    values: tuple[Value, ...]

    def contains(self, hole: Hole) -> bool:
        remaining = hole.values()
        for value in self.values:
            if value not in remaining:
                return False
            remaining.remove(value)
        return True

    def __str__(self) -> str:
        text = "".join(str(v) for v in self.values)
        return text if len(self.values) > 1 else f"{text}x"


@dataclass(frozen=True, slots=True)
class CardPlusAny:
    card: Card

    def contains(self, hole: Hole) -> bool:
        return self.card in hole

    def __str__(self) -> str:
        return f"{self.card} + any"


@dataclass(frozen=True, slots=True)
class CardPlusValue:
    card: Card
    value: Value

    def contains(self, hole: Hole) -> bool:
        if self.card not in hole:
            return False
        other = hole[1] if hole[0] == self.card else hole[0]
        return other.value == self.value

    def __str__(self) -> str:
        return f"{self.card} + {self.value}"


@dataclass(frozen=True, slots=True)
class Holes:
    """Exact holdings; the nut finder emits a single one."""

    holes: tuple[Hole, ...]

    def contains(self, hole: Hole) -> bool:
        return hole in self.holes

    def __str__(self) -> str:
        return " or ".join(str(hole) for hole in self.holes)


Nuts = AnyTwo | PocketPair | HoldingValues | CardPlusAny | CardPlusValue | Holes


def find_nuts(board: Iterable[Card]) -> Nuts:
    """Describe every unbeatable holding on a flop, turn or river board."""
    cards = list(board)
    if not cards:
        raise IllegalTransitionError("Nut search needs at least the flop")
    if len(cards) not in (3, 4, 5):
        raise InvalidCardError(f"Nut search needs 3 to 5 board cards, got {len(cards)}")
    duplicate = find_duplicate(cards)
    if duplicate is not None:
        raise DuplicateCardError(duplicate)

    suit = flush_suit(cards)
    suited = [card.value for card in cards if card.suit == suit]

    if suit is not None:
        window = best_run(suited)
        if window is not None:
            nuts = _straight_flush_nuts(window, suit)
            logger.debug("Straight flush nuts on %s: %s", " ".join(map(str, cards)), nuts)
            return nuts

    groups = multiplicity(card.value for card in cards)
    if groups[0][0] >= 2:
        nuts = _paired_nuts(cards)
    elif suit is not None:
        nuts = _flush_nuts(suited, suit)
    else:
        nuts = _straight_nuts([card.value for card in cards])

    logger.debug("Nuts on %s: %s", " ".join(map(str, cards)), nuts)
    return nuts


def is_nuts(board: Iterable[Card], hole: Hole) -> bool:
    """True iff no other holding beats ``hole`` on ``board``."""
    board = list(board)
    combine(hole, board)
    return find_nuts(board).contains(hole)


def _straight_flush_nuts(window: RunWindow, suit: Suit) -> Nuts:
    # The highest completable window wins outright; lower windows never tie it.
    needed = tuple(Card(value, suit) for value in window.missing)
    if not needed:
        return AnyTwo()
    if len(needed) == 1:
        return CardPlusAny(needed[0])
    return Holes((Hole(needed),))


def _best_kicker(value: Value) -> Value:
    return Value.KING if value == Value.ACE else Value.ACE


def _paired_nuts(cards: Sequence[Card]) -> Nuts:
    """Quads of the highest paired value are always reachable here."""
    quad = max(value for count, value in multiplicity(card.value for card in cards) if count >= 2)
    count = sum(1 for card in cards if card.value == quad)
    kicker = _best_kicker(quad)
    kicker_on_board = any(card.value == kicker for card in cards)

    if count == 4:
        return AnyTwo() if kicker_on_board else HoldingValues((kicker,))

    if count == 3:
        fourth = next(Card(quad, s) for s in Suit if Card(quad, s) not in cards)
        return CardPlusAny(fourth) if kicker_on_board else CardPlusValue(fourth, kicker)

    return PocketPair(quad)


def _flush_nuts(suited: Sequence[Value], suit: Suit) -> Nuts:
    """Nut flush on an unpaired board with at least three suited cards."""
    missing = [value for value in reversed(Value) if value not in suited]
    top, second = missing[0], missing[1]
    best_five = sorted([*suited, top, second], reverse=True)[:5]

    if second in best_five:
        return Holes((Hole((Card(top, suit), Card(second, suit))),))
    if top in best_five:
        return CardPlusAny(Card(top, suit))
    return AnyTwo()


def _straight_nuts(values: Sequence[Value]) -> Nuts:
    """Unpaired board without a flush suit."""
    window = best_run(values)
    if window is None:
        return PocketPair(max(values))
    if not window.missing:
        return AnyTwo()
    return HoldingValues(window.missing)
