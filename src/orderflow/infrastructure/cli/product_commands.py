"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from orderflow.application.add_product import AddProductHandler
from orderflow.application.list_products import ListProductsHandler
from orderflow.application.show_products import DeleteProductHandler, GetProductHandler
from orderflow.application.update_product import UpdateProductHandler
from orderflow.domain.exceptions import DomainException
from orderflow.domain.model.product import ProductPatch
from orderflow.domain.model.value_objects import Money
from orderflow.infrastructure.bootstrap import product_repository
from orderflow.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in stock.")
@click.option("--category", default="", help="Category.")
@click.option("--description", default="", help="Description.")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    price: str,
    stock: int,
    category: str,
    description: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.execute(
            name=name,
            price=price,
            in_stock=stock,
            description=description,
            category=category,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository(settings)).execute()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 74)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<20} {str(p.price):>10} {p.in_stock:>7}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option("--category", default=None, help="New category.")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: str,
    name: str | None,
    price: str | None,
    stock: int | None,
    category: str | None,
    description: str | None,
) -> None:
    """Update some fields of a product; the rest stay as they are."""
    handler = UpdateProductHandler(product_repo=product_repository(settings))

    try:
        patch = ProductPatch(
            name=name,
            description=description,
            price=Money.of(price) if price is not None else None,
            category=category,
            in_stock=stock,
        )
        product = handler.execute(product_id, patch)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product is None:
        raise click.ClickException(f"Product {product_id} not found")
    click.echo(f"Product {product.id} updated.")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID to display.")
@click.pass_obj
def product_show(settings: Settings, product_id: str) -> None:
    """Show details of a product."""
    product = GetProductHandler(product_repo=product_repository(settings)).execute(product_id)
    if product is None:
        raise click.ClickException(f"Product {product_id} not found")

    click.echo(f"Product: {product.id}")
    click.echo(f"Name:     {product.name}")
    if product.description:
        click.echo(f"About:    {product.description}")
    if product.category:
        click.echo(f"Category: {product.category}")
    click.echo(f"Price:    {product.price}")
    click.echo(f"In stock: {product.in_stock}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID to delete.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str) -> None:
    """Remove a product from the catalog."""
    if not DeleteProductHandler(product_repo=product_repository(settings)).execute(product_id):
        raise click.ClickException(f"Product {product_id} not found")
    click.echo(f"Product {product_id} deleted.")
