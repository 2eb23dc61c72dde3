from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from localshop.application.submit_order import SubmitOrderHandler
from localshop.domain.repository.order_repository import OrderRepository
from localshop.infrastructure.http.dependencies import get_order_repository

router = APIRouter(prefix="/api", tags=["checkout"])


@router.post("/checkout")
async def checkout(
    request: Request,
    repo: OrderRepository = Depends(get_order_repository),
):
    """
    Creates an order from the posted cart.

    The body is read as raw JSON so that a malformed or non-object body
    is reported as a missing-items error rather than a schema error.
    File access runs in the threadpool, off the event loop.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    receipt = await run_in_threadpool(SubmitOrderHandler(repo).handle, payload)
    return receipt.to_dict()
