"""FastAPI dependencies resolving the repositories wired in ``create_app``."""

from fastapi import Request

from localshop.domain.repository.order_repository import OrderRepository
from localshop.domain.repository.product_repository import ProductRepository


def get_product_repository(request: Request) -> ProductRepository:
    return request.app.state.product_repository


def get_order_repository(request: Request) -> OrderRepository:
    return request.app.state.order_repository
