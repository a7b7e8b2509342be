"""
Composition roots for the coffee domain.

``CoffeeApp`` is the one place where the heater, pump and coffee maker are
constructed and bound to a shared wiring. ``LoggingCoffeeApp`` derives a
second application from an existing one, swapping the pump for a
``LoggingPump`` around the very same Thermosiphon and heater, so the
substitution happens in the wiring rather than in ``CoffeeMaker``.
"""
from __future__ import annotations

import time
from typing import Callable, Optional

from cremawire.coffee_app.config import AppSettings, get_settings
from cremawire.coffee_app.logging import create_logger, ring_handler
from cremawire.coffee_app.models import BrewReport
from cremawire.core.timing import measure_duration
from cremawire.domain.config import CoffeeWiring
from cremawire.domain.factory import create_coffee_maker, wire_logging_pump, wire_thermosiphon
from cremawire.domain.heater import ElectricHeater, Heater
from cremawire.domain.maker import CoffeeMaker
from cremawire.domain.pump import LoggingPump, Pump

PLAIN_VARIANT = "plain"
LOGGING_VARIANT = "logging"


def pumped_count(pump: Pump) -> int:
    """Pumping effects performed by the pump at the bottom of a decorator chain."""
    while isinstance(pump, LoggingPump):
        pump = pump.delegate
    return getattr(pump, "pumped", 0)


class CoffeeApp:
    variant = PLAIN_VARIANT

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        echo: Callable[[str], None] = print,
        clock: Callable[[], float] = time.monotonic,
        wiring: Optional[CoffeeWiring] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.echo = echo
        self.logger = create_logger(self.settings.logger_name, self.settings.log_ring_size)
        if wiring is None:
            heater = ElectricHeater(
                warmup_seconds=self.settings.heater_warmup_seconds,
                clock=clock,
                logger=self.logger,
            )
            wiring = wire_thermosiphon(heater, echo=echo, logger=self.logger)
        self.wiring: CoffeeWiring = wiring
        self.maker: CoffeeMaker = create_coffee_maker(self.wiring, echo=echo, logger=self.logger)

    @property
    def heater(self) -> Heater:
        return self.wiring.heater

    @property
    def pump(self) -> Pump:
        return self.wiring.pump

    def brew(self) -> BrewReport:
        """Brew once, timing the run, and report what happened."""
        handler = ring_handler(self.logger)
        mark = handler.mark() if handler else 0
        pumped_before = pumped_count(self.pump)
        duration = measure_duration(self.maker.brew, label=self.settings.timing_label, echo=self.echo)
        events = [e["event"] for e in handler.events_since(mark)] if handler else []
        return BrewReport(
            variant=self.variant,
            duration_ms=duration,
            pumped=pumped_count(self.pump) > pumped_before,
            events=events,
        )


class LoggingCoffeeApp(CoffeeApp):
    variant = LOGGING_VARIANT

    def __init__(self, base: CoffeeApp) -> None:
        self.base = base
        super().__init__(
            settings=base.settings,
            echo=base.echo,
            wiring=wire_logging_pump(base.wiring, echo=base.echo, logger=base.logger),
        )


def create_coffee_app(
    settings: Optional[AppSettings] = None,
    echo: Callable[[str], None] = print,
    clock: Callable[[], float] = time.monotonic,
) -> CoffeeApp:
    return CoffeeApp(settings=settings, echo=echo, clock=clock)


def create_logging_coffee_app(base: Optional[CoffeeApp] = None, **kwargs) -> LoggingCoffeeApp:
    return LoggingCoffeeApp(base or create_coffee_app(**kwargs))


def create_apps(variant: str, settings: Optional[AppSettings] = None, echo: Callable[[str], None] = print) -> list[CoffeeApp]:
    """Build the applications for ``variant``; ``both`` shares a single heater and pump."""
    if variant not in (PLAIN_VARIANT, LOGGING_VARIANT, "both"):
        raise ValueError(f"Unknown variant '{variant}'")
    base = create_coffee_app(settings=settings, echo=echo)
    if variant == PLAIN_VARIANT:
        return [base]
    if variant == LOGGING_VARIANT:
        return [create_logging_coffee_app(base)]
    return [base, create_logging_coffee_app(base)]


__all__ = [
    "CoffeeApp",
    "LoggingCoffeeApp",
    "create_apps",
    "create_coffee_app",
    "create_logging_coffee_app",
]
