from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from cremawire.domain.config import ThermosiphonConfig
from cremawire.domain.heater import Heater

_LOGGER = logging.getLogger(__name__)

PUMPING_LINE = "=> => pumping => =>"
PUMP_START_LINE = "[pump] start"
PUMP_STOP_LINE = "[pump] stop"


class Pump(ABC):
    @abstractmethod
    def pump(self) -> None:
        ...


class Thermosiphon(Pump):
    """
    Pump that only moves water once the heater it is wired to is hot.

    Calling ``pump()`` against a cold heater is silently a no-op. The heater is
    looked up on the wiring for every call and never owned by the pump.
    """

    def __init__(
        self,
        config: ThermosiphonConfig,
        echo: Callable[[str], None] = print,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config = config
        self.echo = echo
        self.logger = logger or _LOGGER
        self.pumped = 0

    @property
    def heater(self) -> Heater:
        return self._config.heater

    def pump(self) -> None:
        if not self.heater.is_hot():
            self.logger.info("pump_skipped_cold", extra={"details": {}})
            return
        self.echo(PUMPING_LINE)
        self.pumped += 1
        self.logger.info("pumped", extra={"details": {"count": self.pumped}})


class LoggingPump(Pump):
    """Wraps another pump and marks the start and stop of every delegated call."""

    def __init__(
        self,
        delegate: Pump,
        echo: Callable[[str], None] = print,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if not callable(getattr(delegate, "pump", None)):
            raise TypeError(f"LoggingPump needs a pump to wrap, got {type(delegate).__name__}")
        self.delegate = delegate
        self.echo = echo
        self.logger = logger or _LOGGER

    def pump(self) -> None:
        self.echo(PUMP_START_LINE)
        self.logger.info("pump_start", extra={"details": {"delegate": type(self.delegate).__name__}})
        self.delegate.pump()
        self.echo(PUMP_STOP_LINE)
        self.logger.info("pump_stop", extra={"details": {"delegate": type(self.delegate).__name__}})
