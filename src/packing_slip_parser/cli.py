#!/usr/bin/env python3
"""
Packing Slip Parser CLI
Parse multi-order packing slip PDFs to JSON, CSV or a console summary.
"""

import logging
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .parser import PackingSlipParser

console = Console()


def configure_logging(verbose: bool = False):
    """Set up root logging for command-line use."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose: bool):
    """Packing Slip Parser - extract orders and items from packing slip PDFs."""
    configure_logging(verbose)


@cli.command()
@click.argument('pdf_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output JSON file path')
def parse(pdf_path: str, output: Optional[str]):
    """Parse a packing slip PDF and print the orders as JSON."""
    try:
        parser = PackingSlipParser()
        result = parser.parse_pdf_to_json(pdf_path, output)
    except Exception as e:
        click.echo(f"Error parsing packing slips: {e}", err=True)
        raise click.Abort()

    if output:
        click.echo(f"Results saved to: {output}")
    else:
        click.echo(result)


@cli.command()
@click.argument('pdf_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output CSV file path')
@click.option('--output-dir', type=click.Path(file_okay=False), default='.',
              show_default=True, help='Directory for the timestamped CSV when --output is not given')
def export(pdf_path: str, output: Optional[str], output_dir: str):
    """Parse a packing slip PDF and export one CSV row per item."""
    try:
        parser = PackingSlipParser()
        csv_path = parser.export_pdf_to_csv(pdf_path, output_path=output, output_dir=output_dir)
    except Exception as e:
        click.echo(f"Error exporting packing slips: {e}", err=True)
        raise click.Abort()

    click.echo(f"CSV export saved to: {csv_path}")


@cli.command()
@click.argument('pdf_path', type=click.Path(exists=True, dir_okay=False))
def summary(pdf_path: str):
    """Show a table of the orders found in a packing slip PDF."""
    try:
        orders = PackingSlipParser().parse_pdf(pdf_path)
    except Exception as e:
        click.echo(f"Error parsing packing slips: {e}", err=True)
        raise click.Abort()

    table = Table(title=f"Orders in {pdf_path}")
    table.add_column("Order Number", style="cyan")
    table.add_column("Order Date")
    table.add_column("Items", justify="right")
    table.add_column("Total Qty", justify="right")
    table.add_column("Total Price", justify="right", style="green")

    for order in orders:
        table.add_row(
            order.order_number or "-",
            order.order_date or "-",
            str(len(order.items)),
            str(order.total_quantity),
            f"${order.total_price}",
        )

    console.print(table)


if __name__ == '__main__':
    cli()
