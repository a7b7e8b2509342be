"""Tests for CoffeeMaker sequencing."""
import pytest

from cremawire.domain.config import CoffeeWiring
from cremawire.domain.factory import create_coffee_maker, wire_thermosiphon
from cremawire.domain.heater import ElectricHeater, Heater
from cremawire.domain.maker import COFFEE_LINE, CoffeeMaker
from cremawire.domain.pump import PUMPING_LINE, Pump


class RecordingHeater(Heater):
    def __init__(self, calls, hot=True):
        self.calls = calls
        self.hot = hot

    def on(self):
        self.calls.append("heater_on")

    def off(self):
        self.calls.append("heater_off")

    def is_hot(self):
        return self.hot

    @property
    def is_on(self):
        return bool(self.calls) and self.calls[-1] != "heater_off"


class RecordingPump(Pump):
    def __init__(self, calls):
        self.calls = calls

    def pump(self):
        self.calls.append("pump")


def _echo_into(calls):
    def echo(line):
        calls.append("coffee" if line == COFFEE_LINE else line)
    return echo


def test_brew_sequences_on_pump_marker_off():
    calls = []
    wiring = CoffeeWiring(heater=RecordingHeater(calls), pump=RecordingPump(calls))
    CoffeeMaker(wiring, echo=_echo_into(calls)).brew()
    assert calls == ["heater_on", "pump", "coffee", "heater_off"]


def test_brew_sequence_is_independent_of_pump_outcome():
    calls = []
    wiring = CoffeeWiring(heater=RecordingHeater(calls, hot=False), pump=RecordingPump(calls))
    maker = CoffeeMaker(wiring, echo=_echo_into(calls))
    maker.brew()
    maker.brew()
    assert calls == ["heater_on", "pump", "coffee", "heater_off"] * 2


def test_brew_with_hot_heater_pumps_once(lines):
    heater = ElectricHeater()
    maker = create_coffee_maker(wire_thermosiphon(heater, echo=lines.append), echo=lines.append)
    heater.on()
    maker.brew()
    assert lines == [PUMPING_LINE, COFFEE_LINE]
    assert heater.is_on is False


def test_brew_with_never_hot_heater_completes_without_pumping(lines, fake_clock):
    heater = ElectricHeater(warmup_seconds=30.0, clock=fake_clock)
    wiring = wire_thermosiphon(heater, echo=lines.append)
    maker = create_coffee_maker(wiring, echo=lines.append)
    maker.brew()
    assert lines == [COFFEE_LINE]
    assert wiring.pump.pumped == 0
    assert heater.is_on is False


def test_maker_forwards_wiring():
    heater = ElectricHeater()
    wiring = wire_thermosiphon(heater)
    maker = CoffeeMaker(wiring)
    assert maker.heater is heater
    assert maker.pump is wiring.pump


def test_maker_requires_bound_pump():
    with pytest.raises(ValueError):
        CoffeeMaker(CoffeeWiring(heater=ElectricHeater()))
