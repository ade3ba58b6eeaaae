"""Straight and flush detection shared by the ranker and the nut finder."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from holdem.cards import Card, Suit, Value

STRAIGHT_WIDTH = 5
ACE_HIGH = Value.ACE.straight_ordinal  # 13
ACE_LOW = 0


@dataclass(frozen=True, slots=True)
class RunWindow:
    """One 5-wide window of the rank-run scan."""

    top: Value
    missing: tuple[Value, ...]  # Top of the window first


def is_flush(cards: Iterable[Card]) -> bool:
    """True iff every card shares one suit."""
    return len({card.suit for card in cards}) == 1


def _is_run(ordinals: Sequence[int]) -> bool:
    return all(b - a == 1 for a, b in zip(ordinals, ordinals[1:]))


def is_straight(cards: Sequence[Card]) -> Value | None:
    """Return the top value if the cards form one consecutive run.

    The Ace first counts high; if that fails it is retried as the lowest
    card, so A-2-3-4-5 returns Five.
    """
    ordinals = sorted(card.value.straight_ordinal for card in cards)
    if _is_run(ordinals):
        return Value.from_straight_ordinal(ordinals[-1])

    if ACE_HIGH in ordinals:
        wheel = sorted(ACE_LOW if o == ACE_HIGH else o for o in ordinals)
        if _is_run(wheel):
            return Value.from_straight_ordinal(wheel[-1])

    return None


def scan_runs(present: Iterable[Value], width: int = STRAIGHT_WIDTH) -> Iterator[RunWindow]:
    """Scan every ``width``-wide window from Ace-high down to the wheel.

    Each window reports which values are missing from ``present``. An Ace
    fills both ends of the universe (ordinals 0 and 13).
    """
    ordinals = {value.straight_ordinal for value in present}
    if ACE_HIGH in ordinals:
        ordinals.add(ACE_LOW)

    for top in range(ACE_HIGH, width - 2, -1):
        missing = tuple(
            Value.from_straight_ordinal(o)
            for o in range(top, top - width, -1)
            if o not in ordinals
        )
        yield RunWindow(top=Value.from_straight_ordinal(top), missing=missing)


def best_run(present: Iterable[Value], max_missing: int = 2) -> RunWindow | None:
    """Highest window completable with at most ``max_missing`` new values."""
    for window in scan_runs(present):
        if len(window.missing) <= max_missing:
            return window
    return None


def suit_counts(cards: Iterable[Card]) -> Counter[Suit]:
    return Counter(card.suit for card in cards)


def flush_suit(cards: Iterable[Card], minimum: int = 3) -> Suit | None:
    """The suit held by at least ``minimum`` cards, if any."""
    suit, count = max(suit_counts(cards).items(), key=lambda item: item[1], default=(None, 0))
    return suit if count >= minimum else None
