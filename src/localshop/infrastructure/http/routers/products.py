from fastapi import APIRouter, Depends

from localshop.application.list_products import ListProductsHandler
from localshop.application.show_product import ShowProductHandler
from localshop.domain.repository.product_repository import ProductRepository
from localshop.infrastructure.http.dependencies import get_product_repository

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
def list_products(repo: ProductRepository = Depends(get_product_repository)):
    """
    Returns the whole catalog; an empty list when the products file
    cannot be read.
    """
    return [p.to_dict() for p in ListProductsHandler(repo).handle()]


@router.get("/{product_id}")
def get_product(
    product_id: str,
    repo: ProductRepository = Depends(get_product_repository),
):
    return ShowProductHandler(repo).handle(product_id).to_dict()
