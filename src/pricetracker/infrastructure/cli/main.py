import click
import pydantic

from pricetracker.domain.exceptions import DomainException
from pricetracker.infrastructure.bootstrap import build_context
from pricetracker.infrastructure.cli.price_commands import (
    price_add,
    price_delete,
    price_edit,
    price_list,
    price_recent,
)
from pricetracker.infrastructure.cli.report_commands import (
    report_compare,
    report_dashboard,
    report_products,
)
from pricetracker.infrastructure.cli.store_commands import (
    store_add,
    store_delete,
    store_edit,
    store_list,
    store_seed,
)
from pricetracker.infrastructure.log_config import configure_logging
from pricetracker.infrastructure.settings import Settings


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """PriceTracker: log prices and compare stores"""
    try:
        settings = Settings()
    except pydantic.ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")

    configure_logging(settings.log_level)

    try:
        ctx.obj = build_context(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def price() -> None:
    """Manage price records."""


@cli.group()
def store() -> None:
    """Manage stores."""


@cli.group()
def report() -> None:
    """Statistics and price comparison."""


# Register subcommands
price.add_command(price_add)
price.add_command(price_delete)
price.add_command(price_edit)
price.add_command(price_list)
price.add_command(price_recent)
store.add_command(store_add)
store.add_command(store_delete)
store.add_command(store_edit)
store.add_command(store_list)
store.add_command(store_seed)
report.add_command(report_compare)
report.add_command(report_dashboard)
report.add_command(report_products)
