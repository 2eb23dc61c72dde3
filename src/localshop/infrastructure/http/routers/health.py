from fastapi import APIRouter

from localshop.application.ping import PingHandler

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/ping")
def ping():
    return PingHandler().handle().to_dict()
