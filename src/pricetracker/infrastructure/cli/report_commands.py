"""CLI commands for the derived views: dashboard, comparison, products."""

from __future__ import annotations

import click

from pricetracker.application.context import AppContext
from pricetracker.infrastructure.cli.output import open_board, record_header, record_line, store_label


@click.command("dashboard")
@click.pass_obj
def report_dashboard(context: AppContext) -> None:
    """Overall statistics and the latest prices."""
    with open_board(context) as board:
        stats = board.stats()

        click.echo(f"{'Records':<14} {stats.count:>10}")
        click.echo(f"{'Average':<14} {'R$ ' + stats.mean:>10}")
        click.echo(f"{'Cheapest':<14} {'R$ ' + stats.min:>10}")
        click.echo(f"{'Most expensive':<14} {'R$ ' + stats.max:>10}")
        click.echo()

        records = board.recent(context.recent_limit)
        if not records:
            click.echo("No prices recorded. Add the first one with 'price add'.")
            return

        click.echo("Recent")
        record_header()
        for record in records:
            record_line(board, record)


@click.command("compare")
@click.option("--product", required=True, help="Exact product name.")
@click.pass_obj
def report_compare(context: AppContext, product: str) -> None:
    """Latest price of a product at each store, cheapest first."""
    with open_board(context) as board:
        comparison = board.compare(product)

        if comparison.cheapest is None:
            click.echo(f"No prices recorded for '{product}'.")
            return

        click.echo(f"{'Store':<20} {'Price':>12} {'Date':>12}")
        click.echo("-" * 46)
        for record in comparison.entries:
            store = store_label(board, record.store, 20)
            click.echo(f"{store} {str(record.price):>12} {record.display_date:>12}")
        click.echo("-" * 46)
        click.echo(f"Best price:     {comparison.cheapest.store} ({comparison.cheapest.price})")
        click.echo(
            f"Most expensive: {comparison.most_expensive.store} "
            f"({comparison.most_expensive.price})"
        )
        click.echo(f"Spread:         {comparison.spread}")
        click.echo(f"Stores:         {comparison.store_count}")


@click.command("products")
@click.pass_obj
def report_products(context: AppContext) -> None:
    """Every product with at least one recorded price."""
    with open_board(context) as board:
        products = board.products()

    if not products:
        click.echo("No products found.")
        return
    for name in products:
        click.echo(name)
