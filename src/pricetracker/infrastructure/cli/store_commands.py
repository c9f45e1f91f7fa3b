"""CLI commands for stores."""

from __future__ import annotations

import click

from pricetracker.application.context import AppContext
from pricetracker.application.dto import StoreDraft
from pricetracker.application.manage_stores import (
    AddStoreHandler,
    DeleteStoreHandler,
    EditStoreHandler,
    SeedStoresHandler,
)
from pricetracker.application.record_mapping import to_store_draft
from pricetracker.domain.exceptions import DomainException, EntityNotFoundError
from pricetracker.domain.model.value_objects import ColorTag
from pricetracker.infrastructure.cli.output import open_board, store_label

COLOR_CHOICE = click.Choice([c.value for c in ColorTag])


@click.command("add")
@click.option("--name", required=True, help="Store name.")
@click.option("--address", default=None, help="Street address.")
@click.option("--color", default=None, type=COLOR_CHOICE, help="Colour tag (default blue).")
@click.pass_obj
def store_add(context: AppContext, name: str, address: str | None, color: str | None) -> None:
    """Add a store."""
    handler = AddStoreHandler(record_store=context.record_store, owner_id=context.owner_id)
    draft = StoreDraft(
        name=name, address=address, color_tag=ColorTag(color) if color else None
    )

    try:
        store_id = handler.handle(draft)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{store_id} '{name.strip()}' added.")


@click.command("edit")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.option("--name", default=None, help="New name. Past prices keep the old one.")
@click.option("--address", default=None, help="New address (empty to clear).")
@click.option("--color", default=None, type=COLOR_CHOICE, help="New colour tag.")
@click.pass_obj
def store_edit(
    context: AppContext,
    store_id: str,
    name: str | None,
    address: str | None,
    color: str | None,
) -> None:
    """Edit a store. Omitted options keep their current value."""
    handler = EditStoreHandler(record_store=context.record_store)

    try:
        store = context.record_store.get_store(store_id)
        if store is None:
            raise EntityNotFoundError(f"Store '{store_id}' not found")
        current = to_store_draft(store)
        draft = StoreDraft(
            name=current.name if name is None else name,
            address=current.address if address is None else address,
            color_tag=current.color_tag if color is None else ColorTag(color),
        )
        handler.handle(store_id, draft)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{store_id} updated.")


@click.command("delete")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.pass_obj
def store_delete(context: AppContext, store_id: str) -> None:
    """Delete a store. Recorded prices are kept."""
    handler = DeleteStoreHandler(record_store=context.record_store)

    try:
        handler.handle(store_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{store_id} deleted.")


@click.command("list")
@click.pass_obj
def store_list(context: AppContext) -> None:
    """List stores."""
    with open_board(context) as board:
        stores = board.stores()

        if not stores:
            click.echo("No stores found. Run 'store seed' to add the defaults.")
            return

        click.echo(f"{'ID':<6} {'Name':<20} {'Color':<8} Address")
        click.echo("-" * 60)
        for s in stores:
            name = store_label(board, s.name, 20)
            click.echo(f"{s.id:<6} {name} {s.color_tag.value:<8} {s.address or 'not set'}")


@click.command("seed")
@click.pass_obj
def store_seed(context: AppContext) -> None:
    """Add the default supermarkets if no store exists yet."""
    handler = SeedStoresHandler(record_store=context.record_store, owner_id=context.owner_id)

    try:
        created = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not created:
        click.echo("Stores already exist; nothing to seed.")
        return
    click.echo(f"Seeded {len(created)} stores.")
