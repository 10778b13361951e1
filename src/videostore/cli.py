import json
import logging
import sys

import click

from . import __version__ as VERSION
from .config import refresh_config
from .errors import VideoStoreError
from .loader import load_customer
from .pricing import PriceCategory, quote as price_quote
from .statement import available_formats, format_amount, render_statement

logger = logging.getLogger(__name__)


def _emit_structured_error(message: str, *, code: str, category: str, as_json: bool = False, exit_code: int = 2):
    payload = {
        "ok": False,
        "error": {
            "code": code,
            "category": category,
            "message": message,
        },
    }
    if as_json:
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
    else:
        click.echo(f"videostore error [{category}:{code}]: {message}")
    sys.exit(exit_code)


@click.group(invoke_without_command=True)
@click.pass_context
@click.option("--version", is_flag=True, help="Show the version and exit.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override the configured log level.",
)
def main(ctx, version, log_level):
    """videostore: rental charges, renter points and statements"""
    config = refresh_config()
    ctx.obj = {"config": config}
    logging.basicConfig(level=(log_level or config.log_level).upper())

    if version:
        click.echo(f"videostore version {VERSION}")
        return
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument("rental_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "fmt", default=None, help="Statement format (see 'videostore formats').")
@click.option("--output", type=click.Path(dir_okay=False, writable=True), help="Write the statement to a file")
@click.pass_context
def statement(ctx, rental_file, fmt, output):
    """Render a customer statement from a JSON rental document."""
    fmt = fmt or ctx.obj["config"].default_statement_format
    try:
        customer = load_customer(rental_file)
        rendered = render_statement(customer, fmt)
    except VideoStoreError as exc:
        _emit_structured_error(exc.explanation, code=exc.error_code, category=exc.category)
    except Exception as exc:
        logger.exception("Unhandled error rendering statement from %s", rental_file)
        _emit_structured_error(str(exc), code="INTERNAL", category="SYSTEM")
    logger.info("Rendered %s statement for %s", fmt, customer.name)

    if output:
        with open(output, "w", encoding="utf-8") as handle:
            handle.write(rendered)
        click.echo(f"Statement for {customer.name} written to {output}")
        return
    click.echo(rendered)


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("category")
@click.argument("days", type=int)
@click.option("--json", "json_output", is_flag=True, help="Emit a machine-readable quote")
def quote(category, days, json_output):
    """Price a single rental of CATEGORY for DAYS days."""
    try:
        result = price_quote(PriceCategory.parse(category), days)
    except VideoStoreError as exc:
        _emit_structured_error(exc.explanation, code=exc.error_code, category=exc.category, as_json=json_output)

    if json_output:
        payload = {
            "category": result.category.value,
            "days_rented": result.days_rented,
            "charge": result.charge,
            "points": result.points,
        }
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
        return
    click.echo(f"{result.category.value} for {result.days_rented} day(s): charge {format_amount(result.charge)}, points {result.points}")


@main.command()
def formats():
    """List the available statement formats."""
    for name in available_formats():
        click.echo(name)


if __name__ == "__main__":
    main()
