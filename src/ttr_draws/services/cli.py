"""Typer CLI entry points for the seeded draw diagnostics."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.table import Table

from ..config.settings import DEFAULT_SETTINGS_PATH, ConfigError, DrawSettings, load_settings
from ..core.drivers import iter_discard_sweep, render_sweep_row, render_ticket_draw, ticket_draw
from ..core.engine import MAX_PLAYERS, MIN_PLAYERS, SETUP_SCHEME, GameSetup
from ..core.pool import PoolIndexError, PoolLookupError
from ..core.sampler import DEFAULT_SCHEME, UniformScheme
from ..core.schemas import dump_report, setup_report, sweep_report, ticket_report
from ..core.trains import DeckExhaustedError
from ..utils.seed import SeedError, parse_seed

LOGGER = structlog.get_logger(__name__)

app = typer.Typer(help="Reproduce seeded train and ticket draws.", invoke_without_command=False)
sweep_app = typer.Typer(help="Print the 200-row discard sweep for a seed.")
tickets_app = typer.Typer(help="Print the ticket and train draws for a seed.")

INTERNAL_ERRORS = (PoolIndexError, PoolLookupError, DeckExhaustedError)


def configure_logging(verbose: bool = False) -> None:
    """Send structured logs to stderr so stdout only carries draw output."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _seed(value: str) -> int:
    try:
        return parse_seed(value)
    except SeedError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _settings(config: Path, **overrides: object) -> DrawSettings:
    try:
        return load_settings(config).with_overrides(**overrides)
    except ConfigError as exc:
        LOGGER.error("config.invalid", path=str(config), error=str(exc))
        raise typer.Exit(code=1) from exc


@app.command("sweep")
def sweep(
    seed: int = typer.Argument(..., parser=_seed, metavar="SEED", help="Unsigned 32-bit decimal seed"),
    scheme: Optional[UniformScheme] = typer.Option(None, "--scheme", help="How engine output is folded into a range (default: downscale)"),
    rows: Optional[int] = typer.Option(None, "--rows", help="Number of discard rows (default: 200)"),
    json_output: bool = typer.Option(False, "--json", help="Emit a JSON report instead of text"),
    config: Path = typer.Option(DEFAULT_SETTINGS_PATH, help="Path to a JSON settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug events to stderr"),
) -> None:
    """Pick 13 train cards after skipping 0, 1, 2, ... draws."""

    configure_logging(verbose)
    settings = _settings(config, scheme=scheme, sweep_rows=rows)
    scheme = settings.scheme_or(DEFAULT_SCHEME)
    LOGGER.info("sweep.start", seed=seed, scheme=scheme.value, rows=settings.sweep_rows)

    sweep_rows = iter_discard_sweep(
        seed,
        rows=settings.sweep_rows,
        picks=settings.sweep_picks,
        pool_size=settings.sweep_pool,
        scheme=scheme,
    )
    try:
        if json_output:
            typer.echo(dump_report(sweep_report(seed, scheme, list(sweep_rows))))
        else:
            for row in sweep_rows:
                typer.echo(render_sweep_row(row))
    except INTERNAL_ERRORS as exc:  # pragma: no cover - unreachable with validated settings
        LOGGER.error("sweep.failed", seed=seed, error=str(exc))
        raise typer.Exit(code=1) from exc


@app.command("tickets")
def tickets(
    seed: int = typer.Argument(..., parser=_seed, metavar="SEED", help="Unsigned 32-bit decimal seed"),
    scheme: Optional[UniformScheme] = typer.Option(None, "--scheme", help="How engine output is folded into a range (default: downscale)"),
    json_output: bool = typer.Option(False, "--json", help="Emit a JSON report instead of text"),
    config: Path = typer.Option(DEFAULT_SETTINGS_PATH, help="Path to a JSON settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug events to stderr"),
) -> None:
    """Shuffle the ticket piles, then pick three rows of train cards."""

    configure_logging(verbose)
    settings = _settings(config, scheme=scheme)
    scheme = settings.scheme_or(DEFAULT_SCHEME)
    LOGGER.info("tickets.start", seed=seed, scheme=scheme.value)

    try:
        draw = ticket_draw(seed, scheme=scheme)
    except INTERNAL_ERRORS as exc:  # pragma: no cover - fixed pools cannot run dry
        LOGGER.error("tickets.failed", seed=seed, error=str(exc))
        raise typer.Exit(code=1) from exc

    if json_output:
        typer.echo(dump_report(ticket_report(draw)))
        return
    for line in render_ticket_draw(draw):
        typer.echo(line)


def _setup_tables(setup: GameSetup) -> list[Table]:
    face_up = Table(title="Face-up cards", show_header=True, header_style="bold cyan")
    face_up.add_column("Slot", justify="right")
    face_up.add_column("Card", justify="right")
    face_up.add_column("Colour")
    for slot, card in enumerate(setup.face_up.cards):
        face_up.add_row(str(slot), str(card.id), card.colour.value)

    players = Table(title="Players", show_header=True, header_style="bold cyan")
    players.add_column("Seat", justify="right")
    players.add_column("Hand")
    players.add_column("Ticket options")
    for player in setup.players:
        players.add_row(
            str(player.id),
            ", ".join(f"{card.colour.value}({card.id})" for card in player.hand),
            "\n".join(str(ticket) for ticket in player.ticket_options),
        )
    return [face_up, players]


@app.command("setup")
def setup(
    seed: int = typer.Argument(..., parser=_seed, metavar="SEED", help="Unsigned 32-bit decimal seed"),
    players: int = typer.Option(MIN_PLAYERS, "--players", "-p", min=MIN_PLAYERS, max=MAX_PLAYERS, help="Number of players"),
    scheme: Optional[UniformScheme] = typer.Option(None, "--scheme", help="How engine output is folded into a range (default: engine)"),
    json_output: bool = typer.Option(False, "--json", help="Emit a JSON report instead of text"),
    config: Path = typer.Option(DEFAULT_SETTINGS_PATH, help="Path to a JSON settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug events to stderr"),
) -> None:
    """Deal the opening face-up cards, hands and ticket options."""

    configure_logging(verbose)
    settings = _settings(config, scheme=scheme)
    scheme = settings.scheme_or(SETUP_SCHEME)
    LOGGER.info("setup.start", seed=seed, players=players, scheme=scheme.value)

    try:
        game = GameSetup.deal(seed, players, scheme=scheme)
    except INTERNAL_ERRORS as exc:  # pragma: no cover - the deck holds enough cards for five players
        LOGGER.error("setup.failed", seed=seed, error=str(exc))
        raise typer.Exit(code=1) from exc

    if json_output:
        typer.echo(dump_report(setup_report(game)))
        return

    console = Console(highlight=False)
    for table in _setup_tables(game):
        console.print(table)
    console.print(f"Re-deals: {game.face_up.redeals}  Deck: {len(game.deck)} cards")


sweep_app.command()(sweep)
tickets_app.command()(tickets)


if __name__ == "__main__":  # pragma: no cover
    app()
