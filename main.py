"""Texas Hold'em hand ranking and nut finder."""

from concurrent.futures import Executor, ThreadPoolExecutor
from contextlib import nullcontext
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from config.settings import Config, load_config
from holdem.board import Board, Stage
from holdem.card_set import CardSet, Hole, combine
from holdem.errors import CardError, IllegalTransitionError
from holdem.hand_evaluator import HandEvaluator
from holdem.nuts import find_nuts
from ui.display import (
    DisplayMode,
    render_cards,
    render_deck,
    render_header,
    render_nuts_panel,
    render_showdown,
)
from utils.logging import setup_logging

app = typer.Typer(
    name="holdem",
    help="Texas Hold'em hand ranking, showdowns and nut detection.",
)
console = Console()

ConfigOption = typer.Option(None, "--config", "-c", help="YAML configuration file")
ModeOption = typer.Option(
    None, "--mode", "-m", help="Display mode (ascii, unicode, colored-unicode, colored-emoji)"
)


def _setup(config_path: Optional[Path], mode: Optional[str]) -> tuple[Config, DisplayMode]:
    """Load config, configure logging and resolve the display mode."""
    try:
        config = load_config(config_path) if config_path else Config()
        display_mode = DisplayMode(mode or config.display.mode)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    setup_logging(config.logging)
    return config, display_mode


def _executor(config: Config) -> Executor | nullcontext:
    if config.evaluator.workers > 0:
        return ThreadPoolExecutor(max_workers=config.evaluator.workers)
    return nullcontext()


@app.command()
def nuts(
    board: str = typer.Argument(..., help="Board cards, e.g. 'As Ks Qs'"),
    mode: Optional[str] = ModeOption,
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Show every unbeatable holding on a board."""
    _, display_mode = _setup(config_path, mode)
    try:
        parsed = Board.parse(board)
        result = find_nuts(parsed)
    except CardError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print(render_nuts_panel(parsed, result, display_mode))


@app.command()
def showdown(
    board: str = typer.Argument(..., help="Board cards, e.g. 'Ah Kd 7c 2s 9h'"),
    hole_a: str = typer.Argument(..., help="First hole, e.g. 'As Ks'"),
    hole_b: str = typer.Argument(..., help="Second hole, e.g. 'Qc Qd'"),
    mode: Optional[str] = ModeOption,
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Compare two holdings on the same board."""
    config, display_mode = _setup(config_path, mode)
    try:
        parsed = Board.parse(board)
        holes = [Hole.parse(hole_a), Hole.parse(hole_b)]
        if parsed.stage == Stage.PREFLOP:
            raise IllegalTransitionError("Showdown needs at least the flop")
        combine(*holes, parsed)
        with _executor(config) as executor:
            values = [HandEvaluator.best_hand(combine(hole, parsed), executor) for hole in holes]
    except (CardError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    names = ["A", "B"]
    winner_name = None
    if values[0] != values[1]:
        winner_name = names[0] if values[0] > values[1] else names[1]
    rows = [(name, hole, value) for name, hole, value in zip(names, holes, values)]
    console.print(render_showdown(parsed, rows, winner_name, display_mode))

    if winner_name is None:
        console.print("\n[bold yellow]Chop[/bold yellow]")
    else:
        console.print(f"\n[bold green]Winner: {winner_name}[/bold green]")

    for name, hole in zip(names, holes):
        if HandEvaluator.is_unbeatable(parsed, hole):
            console.print(f"[cyan]{name} holds an unbeatable hand[/cyan]")


@app.command()
def rank(
    cards: str = typer.Argument(..., help="Five to seven cards, e.g. 'Ah Kh Qh Jh Th'"),
    mode: Optional[str] = ModeOption,
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Rank the best five-card hand out of five to seven cards."""
    config, display_mode = _setup(config_path, mode)
    try:
        parsed = CardSet.parse(cards)
        with _executor(config) as executor:
            value = HandEvaluator.best_hand(parsed, executor)
    except (CardError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print(f"{render_cards(parsed, display_mode)}: [bold green]{value}[/bold green]")


@app.command()
def deck(
    mode: Optional[str] = ModeOption,
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Print the full deck."""
    config, display_mode = _setup(config_path, mode)
    console.print(render_deck(display_mode, config.display.cards_per_row))


@app.command()
def info(config_path: Optional[Path] = ConfigOption) -> None:
    """Show the active configuration."""
    config, _ = _setup(config_path, None)
    console.print(render_header("Configuration"))

    table = Table()
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Display", "Mode", config.display.mode)
    table.add_row("Display", "Cards per row", str(config.display.cards_per_row))
    table.add_row("Evaluator", "Workers", str(config.evaluator.workers))
    table.add_row("Logging", "Level", config.logging.level)
    table.add_row("Logging", "Log file", str(config.logging.log_file))

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
