"""Text rendering of catalog, orders and reports."""

from __future__ import annotations

import click

from shop.application.dto import OrderDTO, OrdersReportDTO, ProductDTO


def display_products(products: list[ProductDTO]) -> None:
    click.echo()
    click.echo("     AVAILABLE PRODUCTS")
    for p in products:
        click.echo(f"  [{p.id}] {p.name} - {p.price}")


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying a single order."""
    click.echo()
    click.echo(f"     ORDER #{dto.id}")
    click.echo(f"     Date: {dto.created_at}")

    if dto.is_empty:
        click.echo("  The order is empty")
        return

    click.echo()
    click.echo(f"  {'Product':<22} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*58}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<22} {item.quantity:>5} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*58}")
    click.echo(f"  {'ORDER TOTAL':<28} {dto.total:>29}")


def display_orders_report(report: OrdersReportDTO) -> None:
    if report.is_empty:
        click.echo("\nThere are no orders yet!")
        return

    click.echo()
    click.echo("     ALL ORDERS")
    for summary in report.orders:
        click.echo(f"\n  Order #{summary.id} | {summary.created_at}")
        click.echo(f"      Items: {summary.item_count} | Total: {summary.total}")

    click.echo()
    click.echo(f"  GRAND TOTAL OF ALL ORDERS: {report.grand_total}")
