"""HTTP surface of the shop service.

``create_app`` wires the JSON repositories into a FastAPI application and
maps domain exceptions onto ``{"error": ...}`` responses.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from localshop.domain.exceptions import (
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from localshop.domain.repository.order_repository import OrderRepository
from localshop.domain.repository.product_repository import ProductRepository
from localshop.infrastructure.bootstrap import order_repository, product_repository
from localshop.infrastructure.http.routers import checkout, health, products


def _error_handler(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    return handler


def create_app(
    data_dir: Path | None = None,
    product_repo: ProductRepository | None = None,
    order_repo: OrderRepository | None = None,
) -> FastAPI:
    app = FastAPI(title="LocalShop", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.product_repository = product_repo or product_repository(data_dir)
    app.state.order_repository = order_repo or order_repository(data_dir)

    app.add_exception_handler(EntityNotFoundError, _error_handler(404))
    app.add_exception_handler(ValidationError, _error_handler(400))
    app.add_exception_handler(PersistenceError, _error_handler(500))

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(checkout.router)

    return app
