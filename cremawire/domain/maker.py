from __future__ import annotations

import logging
from typing import Callable, Optional

from cremawire.domain.config import CoffeeMakerConfig
from cremawire.domain.heater import Heater
from cremawire.domain.pump import Pump

_LOGGER = logging.getLogger(__name__)

COFFEE_LINE = " [_]P coffee! [_]P "


class CoffeeMaker:
    """
    Brews by sequencing the heater and pump it is wired to.

    ``brew()`` always runs heater on, pump, completion marker, heater off. A pump
    that refuses to work against a cold heater still lets the brew complete.
    """

    def __init__(
        self,
        config: CoffeeMakerConfig,
        echo: Callable[[str], None] = print,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if config.pump is None:
            raise ValueError("CoffeeMaker requires a wiring with a pump bound")
        self._config = config
        self.echo = echo
        self.logger = logger or _LOGGER

    @property
    def heater(self) -> Heater:
        return self._config.heater

    @property
    def pump(self) -> Pump:
        return self._config.pump

    def brew(self) -> None:
        self.logger.info("brew_started", extra={"details": {"pump": type(self.pump).__name__}})
        self.heater.on()
        self.pump.pump()
        self.echo(COFFEE_LINE)
        self.logger.info("brew_complete", extra={"details": {}})
        self.heater.off()
