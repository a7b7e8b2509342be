from cremawire.coffee_app import AppSettings, BrewReport, CoffeeApp, LoggingCoffeeApp, create_coffee_app, create_logging_coffee_app
from cremawire.core.timing import measure_duration
from cremawire.domain import CoffeeMaker, CoffeeWiring, ElectricHeater, Heater, LoggingPump, Pump, Thermosiphon
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "AppSettings",
    "BrewReport",
    "CoffeeApp",
    "CoffeeMaker",
    "CoffeeWiring",
    "ElectricHeater",
    "Heater",
    "LoggingCoffeeApp",
    "LoggingPump",
    "Pump",
    "Thermosiphon",
    "create_coffee_app",
    "create_logging_coffee_app",
    "measure_duration",
]

try:
    __version__ = version("cremawire")
except PackageNotFoundError:
    __version__ = "0.0.0"
