"""
Capability contracts used to wire components together.

Consumers depend on the narrowest contract they need: a ``Thermosiphon`` only
asks for something that has a heater, a ``CoffeeMaker`` for something that has
a heater and a pump. ``CoffeeWiring`` is the plain record that satisfies both
and is shared by reference between all consumers of one application.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol

from cremawire.domain.heater import Heater

if TYPE_CHECKING:
    from cremawire.domain.pump import Pump


class HasHeater(Protocol):
    heater: Heater


class HasPump(Protocol):
    # None until the pump is bound; consumers reject an unbound wiring.
    pump: Optional["Pump"]


class ThermosiphonConfig(HasHeater, Protocol):
    pass


class CoffeeMakerConfig(HasHeater, HasPump, Protocol):
    pass


@dataclass
class CoffeeWiring:
    heater: Heater
    # Bound after construction when the pump itself needs this wiring.
    pump: Optional["Pump"] = None


__all__ = ["HasHeater", "HasPump", "ThermosiphonConfig", "CoffeeMakerConfig", "CoffeeWiring"]
