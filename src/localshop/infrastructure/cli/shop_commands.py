"""CLI commands for the shop client (catalog, cart, checkout)."""

from __future__ import annotations

import click

from localshop.client.api_client import ShopApiClient
from localshop.client.controller import ShopController
from localshop.client.storage import default_storage
from localshop.domain.exceptions import DomainException
from localshop.infrastructure.cli.view import ClickShopUI, show_cart
from localshop.utils.settings import API_URL


def _controller(ctx: click.Context) -> ShopController:
    """Build a controller with the cart restored and the catalog loaded."""
    ui = ClickShopUI(quiet=True)
    controller = ShopController(
        api=ShopApiClient(base_url=ctx.obj["api_url"]),
        storage=default_storage(),
        ui=ui,
    )
    controller.load_catalog()
    ui.quiet = False
    return controller


@click.group("shop")
@click.option(
    "--api-url",
    default=API_URL,
    show_default=True,
    help="Base URL of the shop service API.",
)
@click.pass_context
def shop(ctx: click.Context, api_url: str) -> None:
    """Browse the catalog, manage the cart and check out."""
    ctx.ensure_object(dict)
    ctx.obj["api_url"] = api_url


@shop.command("list")
@click.option("--category", default=None, help="Only show this category ('All' for every one).")
@click.option("--search", default=None, help="Case-insensitive text to look for.")
@click.pass_context
def shop_list(ctx: click.Context, category: str | None, search: str | None) -> None:
    """List products, optionally filtered."""
    controller = _controller(ctx)
    controller.apply_filters(category=category, query=search)


@shop.command("view")
@click.argument("product_id", type=int)
@click.pass_context
def shop_view(ctx: click.Context, product_id: int) -> None:
    """Show one product in detail."""
    controller = _controller(ctx)
    if controller.show_product(product_id) is None:
        raise click.ClickException("Product not found")


@shop.command("add")
@click.argument("product_id", type=int)
@click.option("--qty", default="1", help="Quantity to add.")
@click.pass_context
def shop_add(ctx: click.Context, product_id: int, qty: str) -> None:
    """Add a product to the cart."""
    controller = _controller(ctx)
    controller.state.cart_open = True
    controller.add_to_cart(product_id, qty)


@shop.command("qty")
@click.argument("product_id", type=int)
@click.argument("quantity")
@click.pass_context
def shop_qty(ctx: click.Context, product_id: int, quantity: str) -> None:
    """Change the quantity of a cart line (minimum 1)."""
    controller = _controller(ctx)
    controller.state.cart_open = True
    controller.set_quantity(product_id, quantity)


@shop.command("remove")
@click.argument("product_id", type=int)
@click.pass_context
def shop_remove(ctx: click.Context, product_id: int) -> None:
    """Remove a product from the cart."""
    controller = _controller(ctx)
    controller.state.cart_open = True
    controller.remove_from_cart(product_id)


@shop.command("cart")
@click.pass_context
def shop_cart(ctx: click.Context) -> None:
    """Show the cart."""
    controller = _controller(ctx)
    controller.toggle_cart(True)


@shop.command("checkout")
@click.pass_context
def shop_checkout(ctx: click.Context) -> None:
    """Place an order for everything in the cart."""
    controller = _controller(ctx)
    if not controller.state.cart.is_empty:
        show_cart(controller.state)
    controller.checkout()


@shop.command("ping")
@click.pass_context
def shop_ping(ctx: click.Context) -> None:
    """Check that the shop service is up."""
    api = ShopApiClient(base_url=ctx.obj["api_url"])
    try:
        status = api.ping()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"ok={status.get('ok')}  time={status.get('time')}")
