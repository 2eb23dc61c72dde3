"""What the controller needs from a user interface.

Notices block until acknowledged; prompts return None when the user
cancels rather than answering.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from localshop.client.state import ShopState


class ShopUI(ABC):

    @abstractmethod
    def alert(self, message: str) -> None:
        """Show a notice to the user."""

    @abstractmethod
    def prompt(self, message: str) -> str | None:
        """Ask for a line of text; None means the prompt was dismissed."""

    @abstractmethod
    def render_products(self, state: ShopState) -> None:
        """Redraw the product listing from ``state.filtered``."""

    @abstractmethod
    def render_cart(self, state: ShopState) -> None:
        """Redraw the cart from ``state.cart``."""

    def render_product(self, state: ShopState) -> None:
        """Redraw the quick view of ``state.active_product``."""
