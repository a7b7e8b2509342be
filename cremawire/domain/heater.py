from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

_LOGGER = logging.getLogger(__name__)


class Heater(ABC):
    """Something that can be switched on and off and reports when it is hot."""

    @abstractmethod
    def on(self) -> None:
        ...

    @abstractmethod
    def off(self) -> None:
        ...

    @abstractmethod
    def is_hot(self) -> bool:
        ...

    @property
    @abstractmethod
    def is_on(self) -> bool:
        ...


class ElectricHeater(Heater):
    """
    Heater that becomes hot ``warmup_seconds`` after being switched on.

    The readiness check is driven by ``clock`` so callers can substitute a fake
    clock and hold the heater cold. With the default warm-up of zero the heater
    is hot as soon as it is on.

    Attributes:
        warmup_seconds: Time on ``clock`` between ``on()`` and ``is_hot()``.
        clock: Zero-argument callable returning monotonic seconds.
    """

    def __init__(
        self,
        warmup_seconds: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if warmup_seconds < 0:
            raise ValueError("warmup_seconds must be non-negative")
        self.warmup_seconds = warmup_seconds
        self.clock = clock
        self.logger = logger or _LOGGER
        self._heating = False
        self._switched_on_at: Optional[float] = None

    @property
    def is_on(self) -> bool:
        return self._heating

    def on(self) -> None:
        if self._heating:
            return
        self._heating = True
        self._switched_on_at = self.clock()
        self.logger.info("heater_on", extra={"details": {"warmup_seconds": self.warmup_seconds}})

    def off(self) -> None:
        self._heating = False
        self._switched_on_at = None
        self.logger.info("heater_off", extra={"details": {}})

    def is_hot(self) -> bool:
        if not self._heating or self._switched_on_at is None:
            return False
        return self.clock() - self._switched_on_at >= self.warmup_seconds

    def __repr__(self) -> str:
        return f"ElectricHeater(on={self._heating}, warmup_seconds={self.warmup_seconds})"
