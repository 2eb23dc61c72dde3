"""CLI command that runs the shop HTTP service."""

from __future__ import annotations

import click
import uvicorn

from localshop.infrastructure.http.app import create_app
from localshop.utils.logging import get_logger
from localshop.utils.settings import PORT

logger = get_logger(__name__)


@click.command("serve")
@click.option("--host", default="0.0.0.0", show_default=True, help="Interface to bind.")
@click.option("--port", default=PORT, show_default=True, type=int, help="Port to listen on.")
def serve(host: str, port: int) -> None:
    """Run the shop service."""
    logger.info("LocalShop backend running on http://localhost:%d", port)
    uvicorn.run(create_app(), host=host, port=port)
