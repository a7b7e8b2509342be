from __future__ import annotations

import logging
from typing import Callable, Optional

from cremawire.domain.config import CoffeeWiring
from cremawire.domain.heater import Heater
from cremawire.domain.maker import CoffeeMaker
from cremawire.domain.pump import LoggingPump, Thermosiphon


def wire_thermosiphon(
    heater: Heater,
    echo: Callable[[str], None] = print,
    logger: Optional[logging.Logger] = None,
) -> CoffeeWiring:
    wiring = CoffeeWiring(heater=heater)
    wiring.pump = Thermosiphon(wiring, echo=echo, logger=logger)
    return wiring


def wire_logging_pump(
    base: CoffeeWiring,
    echo: Callable[[str], None] = print,
    logger: Optional[logging.Logger] = None,
) -> CoffeeWiring:
    """Return a new wiring sharing ``base``'s heater with its pump wrapped in a ``LoggingPump``."""
    if base.pump is None:
        raise ValueError("base wiring has no pump to decorate")
    return CoffeeWiring(heater=base.heater, pump=LoggingPump(base.pump, echo=echo, logger=logger))


def create_coffee_maker(
    wiring: CoffeeWiring,
    echo: Callable[[str], None] = print,
    logger: Optional[logging.Logger] = None,
) -> CoffeeMaker:
    return CoffeeMaker(wiring, echo=echo, logger=logger)
