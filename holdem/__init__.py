"""Texas Hold'em card model, hand ranking and nut detection."""

from holdem.board import Board, Stage
from holdem.card_set import CardSet, Flop, FullBoard, Hole, ShowdownCards
from holdem.cards import Card, Suit, Value
from holdem.errors import CardError, DuplicateCardError, IllegalTransitionError, InvalidCardError
from holdem.hand_evaluator import HandCategory, HandEvaluator, HandValue
from holdem.nuts import find_nuts, is_nuts

__all__ = [
    "Board",
    "Card",
    "CardError",
    "CardSet",
    "DuplicateCardError",
    "Flop",
    "FullBoard",
    "HandCategory",
    "HandEvaluator",
    "HandValue",
    "Hole",
    "IllegalTransitionError",
    "InvalidCardError",
    "ShowdownCards",
    "Stage",
    "Suit",
    "Value",
    "find_nuts",
    "is_nuts",
]
