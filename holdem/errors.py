"""Exceptions raised while building cards, card sets and boards."""


class CardError(ValueError):
    """Base class for invalid card data."""


class InvalidCardError(CardError):
    """Malformed card token, unknown rank/suit character or wrong card count."""


class DuplicateCardError(CardError):
    """The same card appears twice where cards must be distinct."""

    def __init__(self, card: object) -> None:
        super().__init__(f"Duplicate card: {card}")
        self.card = card


class IllegalTransitionError(CardError):
    """A board stage transition was attempted out of order."""
