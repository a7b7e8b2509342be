from cremawire.coffee_app.config import AppSettings, get_settings
from cremawire.coffee_app.models import BrewReport
from cremawire.coffee_app.wiring import (
    CoffeeApp,
    LoggingCoffeeApp,
    create_apps,
    create_coffee_app,
    create_logging_coffee_app,
)

__all__ = [
    "AppSettings",
    "BrewReport",
    "CoffeeApp",
    "LoggingCoffeeApp",
    "create_apps",
    "create_coffee_app",
    "create_logging_coffee_app",
    "get_settings",
]
