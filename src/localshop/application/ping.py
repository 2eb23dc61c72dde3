"""Application service: Ping (diagnostic)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from localshop.application.dto import PingDTO
from localshop.domain.model.order import isoformat, utc_now


class PingHandler:

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock

    def handle(self) -> PingDTO:
        return PingDTO(ok=True, time=isoformat(self._clock()))
