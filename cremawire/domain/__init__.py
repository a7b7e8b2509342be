"""
This package defines the coffee domain: the heater and pump capabilities,
their concrete variants, the coffee maker that sequences them, and the
contracts and helpers used to wire them together.
"""
from cremawire.domain.config import CoffeeMakerConfig, CoffeeWiring, HasHeater, HasPump, ThermosiphonConfig
from cremawire.domain.factory import create_coffee_maker, wire_logging_pump, wire_thermosiphon
from cremawire.domain.heater import ElectricHeater, Heater
from cremawire.domain.maker import CoffeeMaker
from cremawire.domain.pump import LoggingPump, Pump, Thermosiphon

__all__ = [
    "CoffeeMaker",
    "CoffeeMakerConfig",
    "CoffeeWiring",
    "ElectricHeater",
    "HasHeater",
    "HasPump",
    "Heater",
    "LoggingPump",
    "Pump",
    "Thermosiphon",
    "ThermosiphonConfig",
    "create_coffee_maker",
    "wire_logging_pump",
    "wire_thermosiphon",
]
