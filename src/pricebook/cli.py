"""Click-based CLI for pricebook.

Thin wrapper around library modules: load a series from CSV, optionally
overlay a live quote, and print lookups or history.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from decimal import Decimal, localcontext

import click
import pandas as pd
from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_config(ctx: click.Context):
    """Load config lazily, caching on first call."""
    if "config" not in ctx.obj:
        from pricebook.core import load_config

        ctx.obj["config"] = load_config(config_path=ctx.obj.get("config_path"))
    return ctx.obj["config"]


def _configure_logging(ctx: click.Context) -> None:
    config = _load_config(ctx)
    level = logging.DEBUG if ctx.obj.get("verbose") else config.logging.numeric_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_series(ctx: click.Context, csv_file: str, date_col: str | None, price_col: str | None):
    """Build a PriceSeries from a CSV file, exiting cleanly on bad data."""
    from pricebook.core import PriceDataError
    from pricebook.prices import load_csv_prices

    config = _load_config(ctx)
    try:
        return load_csv_prices(
            csv_file,
            delimiter=config.csv.delimiter,
            date_col=date_col,
            price_col=price_col,
            date_format=config.csv.date_format,
        )
    except PriceDataError as e:
        console.print(f"[red]Cannot load prices: {e}[/red]")
        raise SystemExit(1)


def _format_price(price: Decimal, places: int) -> str:
    # quantize needs room for every integer digit plus the decimals
    with localcontext() as dctx:
        dctx.prec = max(dctx.prec, price.adjusted() + 1 + places)
        return str(price.quantize(Decimal(1).scaleb(-places)))


def _resolve_live(live_date: datetime | None, live_price: str | None):
    """Build the LatestPrice overlay from CLI options, or None."""
    from pricebook.prices import LatestPrice

    if live_date is None and live_price is None:
        return None
    if live_date is None or live_price is None:
        raise click.UsageError("--live-date and --live-price must be given together")
    try:
        return LatestPrice(date=live_date.date(), price=Decimal(live_price))
    except (ArithmeticError, ValueError):
        raise click.UsageError(f"--live-price is not a valid price: {live_price!r}") from None


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    envvar="PRICEBOOK_CONFIG",
    default=None,
    help="Path to pricebook.yml config file.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.version_option(package_name="pricebook")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """pricebook: as-of price lookups over daily price history."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# query
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--at",
    "-a",
    "at",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Date to resolve (YYYY-MM-DD). Default: today.",
)
@click.option(
    "--live-date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Date of a live quote to overlay (YYYY-MM-DD).",
)
@click.option("--live-price", type=str, default=None, help="Price of the live quote.")
@click.option("--date-col", type=str, default=None, help="Date column name. Auto-detected if omitted.")
@click.option("--price-col", type=str, default=None, help="Price column name. Auto-detected if omitted.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@click.pass_context
def query(
    ctx: click.Context,
    csv_file: str,
    at: datetime | None,
    live_date: datetime | None,
    live_price: str | None,
    date_col: str | None,
    price_col: str | None,
    output_format: str,
) -> None:
    """Resolve the price in effect on a date."""
    _configure_logging(ctx)
    config = _load_config(ctx)

    live = _resolve_live(live_date, live_price)
    series = _load_series(ctx, csv_file, date_col, price_col)
    if live is not None:
        series.set_live(live)

    as_of = at.date() if at else date.today()
    point = series.find(as_of)
    source = None
    if point is not None:
        source = "live" if point is series.live else "history"

    if output_format == "json":
        output = {
            "series": series.label,
            "at": as_of.isoformat(),
            "date": point.date.isoformat() if point else None,
            "price": str(point.price) if point else None,
            "source": source,
        }
        click.echo(json.dumps(output, indent=2))
        return

    if point is None:
        console.print(f"[yellow]{series.label}: no price on {as_of}[/yellow]")
        return

    table = Table(title=f"{series.label} as of {as_of}")
    table.add_column("Date")
    table.add_column("Price", justify="right")
    table.add_column("Source")
    table.add_row(
        str(point.date),
        _format_price(point.price, config.display.price_places),
        source,
    )
    console.print(table)


# ---------------------------------------------------------------------------
# history
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--start",
    "-s",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="First date to show (YYYY-MM-DD).",
)
@click.option(
    "--end",
    "-e",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Last date to show (YYYY-MM-DD).",
)
@click.option("--date-col", type=str, default=None, help="Date column name. Auto-detected if omitted.")
@click.option("--price-col", type=str, default=None, help="Price column name. Auto-detected if omitted.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "csv"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@click.pass_context
def history(
    ctx: click.Context,
    csv_file: str,
    start: datetime | None,
    end: datetime | None,
    date_col: str | None,
    price_col: str | None,
    output_format: str,
) -> None:
    """Show the archived prices of a CSV file, oldest first."""
    _configure_logging(ctx)
    config = _load_config(ctx)

    series = _load_series(ctx, csv_file, date_col, price_col)
    points = series.between(
        start.date() if start else None,
        end.date() if end else None,
    )

    if output_format == "json":
        output = [{"date": p.date.isoformat(), "price": str(p.price)} for p in points]
        click.echo(json.dumps(output, indent=2))
    elif output_format == "csv":
        _output_history_csv(series, points)
    else:
        _output_history_table(series, points, config.display.price_places)


def _output_history_table(series, points, places: int) -> None:
    """Render history as a Rich table, with day-over-day change."""
    if not points:
        console.print(f"[yellow]{series.label}: no prices in range[/yellow]")
        return

    prices = series.to_series()
    window = prices.loc[pd.Timestamp(points[0].date) : pd.Timestamp(points[-1].date)]
    # a zero price has no meaningful change to the next day
    changes = window.astype(float).pct_change().replace([float("inf"), float("-inf")], float("nan"))

    table = Table(title=f"{series.label} ({len(points)} of {len(series)} prices)")
    table.add_column("Date")
    table.add_column("Price", justify="right")
    table.add_column("Change", justify="right")

    for p, change in zip(points, changes):
        table.add_row(
            str(p.date),
            _format_price(p.price, places),
            "" if pd.isna(change) else f"{change:+.2%}",
        )

    console.print(table)


def _output_history_csv(series, points) -> None:
    """Write history as CSV to stdout."""
    import csv
    import io

    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(["date", "price"])
    for p in points:
        writer.writerow([p.date.isoformat(), str(p.price)])
    click.echo(buf.getvalue(), nl=False)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
