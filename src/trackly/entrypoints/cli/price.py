"""``trackly price``: room tier price projection."""

import datetime as dt

import click

from trackly.domain.pricing import price_projection

from .app import DATE, as_date, rejections


@click.command()
@click.argument("tier")
@click.argument("check_in", type=DATE)
@click.argument("check_out", type=DATE)
@click.option("--strict", is_flag=True, help="Fail on an unknown tier instead of pricing it at 0.")
def price(tier: str, check_in: dt.datetime, check_out: dt.datetime, strict: bool) -> None:
    """Project the price of a stay in TIER (e.g. "The Haven")."""
    with rejections():
        total = price_projection(tier, as_date(check_in), as_date(check_out), strict=strict)
    click.echo(total)
