"""Tests for the shop controller: catalog, filters, cart and checkout."""

import json

import pytest

from localshop.client import api_client
from localshop.client.api_client import ShopApiClient
from localshop.client.controller import SAMPLE_PRODUCTS, ShopController
from localshop.client.state import ShopState
from localshop.client.storage import CART_KEY, PENDING_ORDER_KEY
from localshop.domain.exceptions import CheckoutRejectedError, ServiceUnreachableError
from localshop.domain.model.product import Product
from tests.fakes import FakeShopApi, FakeStorage, RecordingUI

MUG = Product(id=1, name="Red Mug", description="Holds tea", price=1200,
              category="Kitchen", image="mug.jpg")
PEN = Product(id=2, name="Blue Pen", description="Writes smoothly", price=150,
              category="Stationery", image="pen.jpg")
BOOK = Product(id=5, name="Notebook", description="Dotted pages", price=100,
               category="Stationery", image="book.jpg")


def _setup(answers=None, storage=None, api=None):
    api = api or FakeShopApi([MUG, PEN, BOOK])
    storage = storage if storage is not None else FakeStorage()
    ui = RecordingUI(answers)
    controller = ShopController(api=api, storage=storage, ui=ui)
    controller.load_catalog()
    return controller, api, storage, ui


def _stored_cart(storage):
    return json.loads(storage.items[CART_KEY])


class TestCatalog:

    def test_load_fills_products_and_view(self):
        controller, *_ = _setup()
        assert controller.state.products == [MUG, PEN, BOOK]
        assert controller.state.filtered == [MUG, PEN, BOOK]
        assert controller.state.degraded is False

    def test_unreachable_service_falls_back_to_sample(self):
        controller, _, _, ui = _setup(api=FakeShopApi(unreachable=True))
        assert controller.state.products == SAMPLE_PRODUCTS
        assert controller.state.filtered == SAMPLE_PRODUCTS
        assert controller.state.degraded is True
        assert ui.alerts == []

    def test_search_across_all_categories(self):
        controller, *_ = _setup()
        assert controller.apply_filters(category="All", query="mug") == [MUG]

    def test_category_without_query(self):
        controller, *_ = _setup()
        assert controller.apply_filters(category="Stationery", query="") == [PEN, BOOK]

    def test_omitted_criteria_are_kept(self):
        controller, *_ = _setup()
        controller.apply_filters(category="Stationery")
        assert controller.apply_filters(query="  DOTTED ") == [BOOK]
        assert controller.state.active_category == "Stationery"
        assert controller.state.search_query == "dotted"

    def test_reload_reapplies_criteria(self):
        controller, api, _, _ = _setup()
        controller.apply_filters(category="Kitchen")
        api.products.append(Product(id=9, name="Kettle", category="Kitchen"))
        controller.load_catalog()
        assert [p.id for p in controller.state.filtered] == [1, 9]

    def test_every_filter_change_renders(self):
        controller, _, _, ui = _setup()
        before = ui.product_renders
        controller.apply_filters(category="Kitchen")
        controller.apply_filters(query="x")
        assert ui.product_renders == before + 2

    def test_show_product(self):
        controller, *_ = _setup()
        assert controller.show_product(2) == PEN
        assert controller.state.active_product == PEN
        assert controller.show_product(42) is None


class TestCart:

    def test_adds_merge(self):
        controller, _, storage, _ = _setup()
        controller.add_to_cart(5, 2)
        controller.add_to_cart(5, 3)
        assert _stored_cart(storage) == [{
            "productId": 5, "name": "Notebook", "price": 100,
            "image": "book.jpg", "quantity": 5,
        }]

    def test_unknown_product(self):
        controller, _, storage, ui = _setup()
        controller.add_to_cart(42)
        assert ui.alerts == ["Product not found"]
        assert controller.state.cart.is_empty
        assert CART_KEY not in storage.items

    def test_set_quantity_clamps_to_one(self):
        controller, _, storage, _ = _setup()
        controller.add_to_cart(5, 4)
        controller.set_quantity(5, 0)
        assert controller.state.cart.find(5).quantity.value == 1
        controller.set_quantity(5, "lots")
        assert _stored_cart(storage)[0]["quantity"] == 1

    def test_set_quantity(self):
        controller, *_ = _setup()
        controller.add_to_cart(5)
        controller.set_quantity(5, "6")
        assert controller.state.cart.total_count == 6

    def test_remove(self):
        controller, _, storage, _ = _setup()
        controller.add_to_cart(5)
        controller.remove_from_cart(5)
        assert controller.state.cart.is_empty
        assert _stored_cart(storage) == []

    def test_each_mutation_renders_cart(self):
        controller, _, _, ui = _setup()
        controller.add_to_cart(1)
        controller.set_quantity(1, 2)
        controller.remove_from_cart(1)
        assert ui.cart_renders == 3

    def test_cart_survives_restart(self):
        storage = FakeStorage()
        controller, *_ = _setup(storage=storage)
        controller.add_to_cart(1, 2)

        restarted, *_ = _setup(storage=storage)
        assert restarted.state.cart.total_count == 2
        assert restarted.state.cart.total_price == 2400

    @pytest.mark.parametrize("raw", ["not json", '{"a": 1}', '[{"quantity": 1}]', '[{"productId": 1, "quantity": 0}]'])
    def test_unreadable_cart_starts_empty(self, raw):
        controller, *_ = _setup(storage=FakeStorage({CART_KEY: raw}))
        assert controller.state.cart.is_empty


class TestCheckout:

    def test_empty_cart_makes_no_call(self):
        controller, api, storage, ui = _setup()
        assert controller.checkout() is None
        assert api.submitted == []
        assert ui.alerts == ["Cart is empty."]
        assert ui.prompts == []
        assert storage.items == {}

    def test_success_clears_cart(self):
        controller, api, storage, ui = _setup(answers=["Ali", "0300"])
        controller.add_to_cart(1, 2)
        controller.add_to_cart(2)
        controller.state.cart_open = True

        assert controller.checkout() == 1
        assert api.submitted == [{
            "items": [
                {"productId": 1, "name": "Red Mug", "price": 1200, "image": "mug.jpg", "quantity": 2},
                {"productId": 2, "name": "Blue Pen", "price": 150, "image": "pen.jpg", "quantity": 1},
            ],
            "total": 2550,
            "customer": {"name": "Ali", "phone": "0300"},
        }]
        assert ui.alerts == ["Order placed! Order ID: 1"]
        assert controller.state.cart.is_empty
        assert _stored_cart(storage) == []
        assert controller.state.cart_open is False

    def test_empty_answers_are_valid(self):
        controller, api, _, _ = _setup(answers=["", ""])
        controller.add_to_cart(1)
        assert controller.checkout() == 1
        assert api.submitted[0]["customer"] == {"name": "", "phone": ""}

    @pytest.mark.parametrize("answers", [[None], ["Ali", None]])
    def test_cancelled_prompt_aborts(self, answers):
        controller, api, storage, _ = _setup(answers=answers)
        controller.add_to_cart(1)
        saved = dict(storage.items)

        assert controller.checkout() is None
        assert api.submitted == []
        assert storage.items == saved
        assert controller.state.cart.total_count == 1

    def test_rejected_keeps_cart(self):
        controller, api, storage, ui = _setup(answers=["Ali", "0300"])
        api.checkout_error = CheckoutRejectedError("Failed to save order")
        controller.add_to_cart(1)

        assert controller.checkout() is None
        assert ui.alerts == ["Checkout failed: Failed to save order"]
        assert controller.state.cart.total_count == 1
        assert PENDING_ORDER_KEY not in storage.items

    def test_unreadable_confirmation_keeps_cart(self, monkeypatch):
        class NotJson:
            status_code = 200
            ok = True

            def json(self):
                raise ValueError("not json")

        monkeypatch.setattr(api_client.requests, "post", lambda url, json=None: NotJson())
        storage = FakeStorage()
        ui = RecordingUI(["Ali", "0300"])
        controller = ShopController(
            api=ShopApiClient(base_url="http://shop.test/api"),
            storage=storage,
            ui=ui,
            state=ShopState(products=[MUG]),
        )
        controller.add_to_cart(1, 2)

        assert controller.checkout() is None
        assert "Could not reach server" in ui.alerts[-1]
        assert controller.state.cart.total_count == 2
        assert json.loads(storage.items[PENDING_ORDER_KEY])["total"] == 2400

    def test_unreachable_stashes_pending_order(self):
        controller, api, storage, ui = _setup(answers=["Ali", "0300"])
        api.checkout_error = ServiceUnreachableError("connection refused")
        controller.add_to_cart(1)

        assert controller.checkout() is None
        assert len(api.submitted) == 1
        assert json.loads(storage.items[PENDING_ORDER_KEY]) == api.submitted[0]
        assert controller.state.cart.total_count == 1
        assert "Could not reach server" in ui.alerts[0]
