"""Shared helpers for rendering board data in the terminal."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from pricetracker.application.context import AppContext
from pricetracker.application.price_board import PriceBoard
from pricetracker.domain.model.price_record import PriceRecord

# ColorTag value -> click colour name
_CLICK_COLORS = {
    "blue": "blue",
    "red": "red",
    "orange": "yellow",
    "green": "green",
    "violet": "magenta",
    "yellow": "bright_yellow",
    "pink": "bright_magenta",
    "slate": "white",
}


@contextmanager
def open_board(context: AppContext) -> Iterator[PriceBoard]:
    """Start a board on the context's record store, failing loudly if it is down."""
    with PriceBoard(context.record_store) as board:
        if board.last_error is not None:
            raise click.ClickException(str(board.last_error))
        yield board


def store_label(board: PriceBoard, store_name: str, width: int = 0) -> str:
    color = board.store_color(store_name)
    # pad before styling so ANSI codes do not break alignment
    return click.style(f"{store_name:<{width}}", fg=_CLICK_COLORS.get(color.value))


def record_header() -> None:
    click.echo(f"{'ID':<6} {'Date':<11} {'Product':<24} {'Store':<16} {'Price':>12}")
    click.echo("-" * 74)


def record_line(board: PriceBoard, record: PriceRecord) -> None:
    club = "  CLUB" if record.has_loyalty_price else ""
    store = store_label(board, record.store, 16)
    click.echo(
        f"{record.id:<6} {record.display_date:<11} {record.product:<24} "
        f"{store} {str(record.price):>12}{club}"
    )
