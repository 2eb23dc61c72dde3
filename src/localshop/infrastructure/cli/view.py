"""Terminal rendering of the shop state.

Views only read the ShopState they are handed; they never keep state of
their own.
"""

from __future__ import annotations

import click

from localshop.client.state import ShopState
from localshop.client.ui import ShopUI
from localshop.domain.model.catalog import categories
from localshop.domain.model.value_objects import format_price


class ClickShopUI(ShopUI):
    """ShopUI on top of click.

    ``quiet`` suppresses the automatic redraws so a command can decide
    what to print.
    """

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet

    def alert(self, message: str) -> None:
        click.echo(message)

    def prompt(self, message: str) -> str | None:
        try:
            return click.prompt(message, default="", show_default=False)
        except click.Abort:
            return None

    def render_products(self, state: ShopState) -> None:
        if not self.quiet:
            show_products(state)

    def render_cart(self, state: ShopState) -> None:
        if not self.quiet and state.cart_open:
            show_cart(state)

    def render_product(self, state: ShopState) -> None:
        if not self.quiet:
            show_product(state)


def show_products(state: ShopState) -> None:
    if state.degraded:
        click.echo("(service unavailable - showing demo listing)")

    marked = [
        f"[{c}]" if c == state.active_category else c
        for c in categories(state.products)
    ]
    click.echo("Categories: " + "  ".join(marked))
    if state.search_query:
        click.echo(f"Search: {state.search_query!r}")
    click.echo()

    if not state.filtered:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<14} {'Price':>12}")
    click.echo("-" * 59)
    for p in state.filtered:
        click.echo(f"{str(p.id):<6} {p.name:<24} {p.category:<14} {format_price(p.price):>12}")


def show_product(state: ShopState) -> None:
    p = state.active_product
    if p is None:
        return
    click.echo(f"#{p.id}  {p.name}")
    click.echo(f"Category: {p.category}")
    click.echo(f"Price:    {format_price(p.price)}")
    click.echo(f"Image:    {p.image}")
    click.echo()
    click.echo(p.description)


def show_cart(state: ShopState) -> None:
    cart = state.cart
    click.echo(f"Cart ({cart.total_count} item(s))")

    if cart.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<24} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*63}")
    for line in cart.lines:
        click.echo(
            f"  {line.product_id:<6} {line.name:<24} {line.quantity.value:>5} "
            f"{format_price(line.price):>12} {format_price(line.line_total):>12}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Cart Total':<37} {format_price(cart.total_price):>25}")
