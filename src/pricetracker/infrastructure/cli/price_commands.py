"""CLI commands for price records."""

from __future__ import annotations

import click

from pricetracker.application.add_price import AddPriceHandler
from pricetracker.application.context import AppContext
from pricetracker.application.delete_price import DeletePriceHandler
from pricetracker.application.dto import PriceDraft
from pricetracker.application.edit_price import EditPriceHandler
from pricetracker.domain.exceptions import DomainException
from pricetracker.domain.model.value_objects import PromoFlag
from pricetracker.infrastructure.cli.output import open_board, record_header, record_line


def _promo_flag(club: bool) -> PromoFlag:
    return PromoFlag.WITH_LOYALTY if club else PromoFlag.WITHOUT_LOYALTY


@click.command("add")
@click.option("--product", required=True, help="Product name.")
@click.option("--store", required=True, help="Store name.")
@click.option("--price", "price_text", required=True, help="Price (e.g. 4.50).")
@click.option("--club/--no-club", default=False, help="Price requires the loyalty club.")
@click.pass_obj
def price_add(context: AppContext, product: str, store: str, price_text: str, club: bool) -> None:
    """Record a price seen at a store."""
    handler = AddPriceHandler(
        record_store=context.record_store,
        owner_id=context.owner_id,
        date_format=context.date_format,
    )
    draft = PriceDraft(
        product=product, store=store, price_text=price_text, promo_flag=_promo_flag(club)
    )

    try:
        known_stores = {s.name for s in context.record_store.snapshot().stores}
        record_id = handler.handle(draft)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if store.strip() not in known_stores:
        click.echo(f"Warning: '{store.strip()}' is not in the store list.", err=True)
    click.echo(f"Price #{record_id} saved: {product.strip()} at {store.strip()}")


@click.command("edit")
@click.option("--id", "record_id", required=True, help="Price record ID.")
@click.option("--product", default=None, help="New product name.")
@click.option("--store", default=None, help="New store name.")
@click.option("--price", "price_text", default=None, help="New price.")
@click.option("--club/--no-club", default=None, help="Loyalty club price or not.")
@click.pass_obj
def price_edit(
    context: AppContext,
    record_id: str,
    product: str | None,
    store: str | None,
    price_text: str | None,
    club: bool | None,
) -> None:
    """Edit a price record. Omitted options keep their current value."""
    handler = EditPriceHandler(record_store=context.record_store)

    try:
        current = handler.load(record_id)
        draft = PriceDraft(
            product=current.product if product is None else product,
            store=current.store if store is None else store,
            price_text=current.price_text if price_text is None else price_text,
            promo_flag=current.promo_flag if club is None else _promo_flag(club),
        )
        handler.handle(record_id, draft)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price #{record_id} updated.")


@click.command("delete")
@click.option("--id", "record_id", required=True, help="Price record ID.")
@click.pass_obj
def price_delete(context: AppContext, record_id: str) -> None:
    """Delete a price record."""
    handler = DeletePriceHandler(record_store=context.record_store)

    try:
        handler.handle(record_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price #{record_id} deleted.")


@click.command("list")
@click.option("--search", "term", default="", help="Only products containing this text.")
@click.pass_obj
def price_list(context: AppContext, term: str) -> None:
    """List price records, newest first."""
    with open_board(context) as board:
        records = board.search(term)

        if not records:
            click.echo("No prices recorded." if not term else f"No products match '{term}'.")
            return

        record_header()
        for record in records:
            record_line(board, record)


@click.command("recent")
@click.pass_obj
def price_recent(context: AppContext) -> None:
    """Show the most recently recorded prices."""
    with open_board(context) as board:
        records = board.recent(context.recent_limit)

        if not records:
            click.echo("No prices recorded.")
            return

        record_header()
        for record in records:
            record_line(board, record)
