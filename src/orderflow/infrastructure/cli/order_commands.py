"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orderflow.application.cancel_order import CancelOrderHandler
from orderflow.application.create_order import CreateOrderHandler
from orderflow.application.dto import OrderDTO, OrderItemSpec
from orderflow.application.show_orders import (
    GetAllOrdersHandler,
    GetOrderHandler,
    GetOrdersByCustomerHandler,
)
from orderflow.application.update_order_status import UpdateOrderStatusHandler
from orderflow.domain.exceptions import DomainException
from orderflow.domain.model.order import OrderStatus
from orderflow.infrastructure.bootstrap import order_repository, product_availability
from orderflow.infrastructure.config import Settings


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'p1:3,p2:5:9.99' into OrderItemSpec list (price is optional)."""
    specs: list[OrderItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = [p.strip() for p in entry.split(":")]
        if len(parts) not in (2, 3) or not parts[0]:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ProductId:Qty[:UnitPrice]'."
            )
        try:
            qty = int(parts[1])
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{parts[1]}' for product '{parts[0]}'."
            )
        price = parts[2] if len(parts) == 3 else None
        specs.append(OrderItemSpec(product_id=parts[0], quantity=qty, unit_price=price))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*48}")
    for item in dto.items:
        name = item.product_name or item.product_id
        click.echo(
            f"  {name:<20} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*48}")
    click.echo(f"  {'Order Total':<27} {dto.total:>21}")


@click.command("create")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty[:UnitPrice],...'.")
@click.pass_obj
def order_create(settings: Settings, customer: str, items: str) -> None:
    """Place a new order (reserves stock)."""
    specs = _parse_items(items)

    with product_availability(settings) as availability:
        handler = CreateOrderHandler(
            order_repo=order_repository(settings),
            product_availability=availability,
        )
        try:
            order = handler.execute(customer_id=customer, item_specs=specs)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo("Order created.")
    _display_order(OrderDTO.from_order(order))


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: str) -> None:
    """Show details of an existing order."""
    order = GetOrderHandler(order_repo=order_repository(settings)).execute(order_id)
    if order is None:
        raise click.ClickException(f"Order {order_id} not found")
    _display_order(OrderDTO.from_order(order))


@click.command("list")
@click.option("--customer", default=None, help="Only orders of this customer.")
@click.pass_obj
def order_list(settings: Settings, customer: str | None) -> None:
    """List orders."""
    repo = order_repository(settings)
    if customer is not None:
        orders = GetOrdersByCustomerHandler(order_repo=repo).execute(customer)
    else:
        orders = GetAllOrdersHandler(order_repo=repo).execute()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<34} {'Customer':<16} {'Status':<10} {'Total':>10}")
    click.echo("-" * 73)
    for o in orders:
        click.echo(
            f"{o.id:<34} {o.customer_id:<16} {o.status.value:<10} {str(o.total_amount):>10}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option(
    "--to",
    "status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    help="New status.",
)
@click.pass_obj
def order_status(settings: Settings, order_id: str, status: str) -> None:
    """Change the status of an order (use 'cancel' to cancel)."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository(settings))

    try:
        order = handler.execute(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if order is None:
        raise click.ClickException(f"Order {order_id} not found")
    click.echo(f"Order {order.id} is now {order.status.value}.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(settings: Settings, order_id: str) -> None:
    """Cancel an order (gives reserved stock back)."""
    with product_availability(settings) as availability:
        handler = CancelOrderHandler(
            order_repo=order_repository(settings),
            product_availability=availability,
        )
        try:
            order = handler.execute(order_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    if order is None:
        raise click.ClickException(f"Order {order_id} not found")
    click.echo(f"Order {order.id} cancelled.")
