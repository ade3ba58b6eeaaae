"""Display utilities for cards in the terminal."""

from enum import Enum
from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from holdem.board import Board
from holdem.cards import Card, Suit, full_deck
from holdem.hand_evaluator import HandValue
from holdem.nuts import Nuts


class DisplayMode(Enum):
    """How cards are written out."""

    ASCII = "ascii"
    UNICODE = "unicode"
    COLORED_UNICODE = "colored-unicode"
    COLORED_EMOJI = "colored-emoji"

    @property
    def is_unicode(self) -> bool:
        return self in (DisplayMode.UNICODE, DisplayMode.COLORED_UNICODE)


SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

SUIT_COLORS = {
    Suit.HEARTS: "bright_red",
    Suit.DIAMONDS: "bright_red",
}

EMOJI_SELECTOR = "\ufe0f"


def render_suit(suit: Suit, mode: DisplayMode) -> str:
    """Render a suit; colored modes use rich markup."""
    if mode == DisplayMode.ASCII:
        return str(suit)
    symbol = SUIT_SYMBOLS[suit]
    if mode == DisplayMode.COLORED_EMOJI:
        return symbol + EMOJI_SELECTOR
    color = SUIT_COLORS.get(suit)
    if mode == DisplayMode.COLORED_UNICODE and color:
        return f"[{color}]{symbol}[/{color}]"
    return symbol


def render_card(card: Card, mode: DisplayMode = DisplayMode.ASCII) -> str:
    """Render a single card. ASCII output parses back with ``Card.parse``."""
    separator = " " if mode.is_unicode else ""
    return f"{card.value}{separator}{render_suit(card.suit, mode)}"


def render_cards(cards: Iterable[Card], mode: DisplayMode = DisplayMode.ASCII) -> str:
    """Render cards side by side."""
    delimiter = " " if mode == DisplayMode.ASCII else "  "
    return delimiter.join(render_card(card, mode) for card in cards)


def render_deck(mode: DisplayMode = DisplayMode.ASCII, cards_per_row: int = 4) -> str:
    """Lay out the 52-card deck in rows."""
    deck = full_deck()
    rows = [deck[i : i + cards_per_row] for i in range(0, len(deck), cards_per_row)]
    return "\n".join(render_cards(row, mode) for row in rows)


def render_board(board: Board, mode: DisplayMode = DisplayMode.ASCII) -> str:
    """Render community cards with placeholders for undealt cards."""
    rendered = [render_card(card, mode) for card in board]
    rendered.extend("[dim]--[/dim]" for _ in range(5 - len(rendered)))
    return ("  " if mode != DisplayMode.ASCII else " ").join(rendered)


def render_nuts_panel(board: Board, nuts: Nuts, mode: DisplayMode) -> Panel:
    """Render the nut holdings for a board."""
    lines = [
        f"[dim]Board:[/dim] {render_board(board, mode)}",
        f"[dim]Stage:[/dim] {board.stage}",
        f"[bold yellow]Nuts:[/bold yellow] {nuts}",
        f"[dim]Shape:[/dim] {type(nuts).__name__}",
    ]
    return Panel("\n".join(lines), title="[blue]Nut Finder[/blue]", border_style="blue")


def render_showdown(
    board: Board,
    holes: list[tuple[str, Iterable[Card], HandValue]],
    winner: str | None,
    mode: DisplayMode,
) -> Table:
    """Render a head-to-head showdown as a table."""
    table = Table(title=f"Board: {render_board(board, mode)}")
    table.add_column("Player", style="cyan")
    table.add_column("Hole", style="white")
    table.add_column("Best Hand", style="green")

    for name, hole, value in holes:
        label = f"[bold]{name}[/bold]" if name == winner else name
        table.add_row(label, render_cards(hole, mode), str(value))

    return table


def render_header(title: str) -> Panel:
    return Panel(Text(title, justify="center", style="bold yellow"), border_style="blue")
