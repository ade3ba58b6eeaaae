"""Shared pytest fixtures."""

import pytest

from holdem.cards import full_deck
from tests.helpers.card_utils import make_cards


@pytest.fixture
def deck():
    """The 52 cards in canonical order."""
    return full_deck()


@pytest.fixture
def royal_board():
    """Royal flush on the board."""
    return make_cards("Ah Kh Qh Jh Th")


@pytest.fixture(params=["2c 7d 9h", "As Ks Qs", "2h 2d 2c", "5h 6h 7h 8h", "Ks Kd 7c 7h 2s"])
def board_text(request):
    """Parametrize over representative board textures."""
    return request.param
