"""Plugs, wall outlets and an adapter that decides whether one fits the other."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum

AMERICAN_HERTZ = 60
UK_HERTZ = 50


class NumberOfPinholes(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3


class AmericanVoltage(IntEnum):
    RESIDENTIAL = 120
    COMMERCIAL = 240


class UKVoltage(IntEnum):
    RESIDENTIAL = 230
    COMMERCIAL = 415


class JapaneseVoltage(IntEnum):
    RESIDENTIAL = 100
    COMMERCIAL = 200


class JapaneseHertz(IntEnum):
    EASTERN = 50
    WESTERN = 60


@dataclass(frozen=True)
class Outlet:
    """A wall socket: its hole layout and the supply it delivers."""

    has_round_holes: bool = False
    number_of_holes: int = 0
    voltage_rating: int = 0
    frequency_rating: int = 0


@dataclass(frozen=True)
class Plug:
    """A device plug: its pin layout and the supply it expects."""

    pin_count: int = 0
    has_round_pins: bool = False
    voltage_rating: int = 0
    frequency_rating: int = 0


def american_outlet(
    voltage_rating: int = AmericanVoltage.RESIDENTIAL,
    frequency_rating: int = AMERICAN_HERTZ,
    has_round_holes: bool = False,
    number_of_holes: int = NumberOfPinholes.TWO,
) -> Outlet:
    """An outlet with American defaults."""
    return Outlet(has_round_holes, int(number_of_holes), int(voltage_rating), int(frequency_rating))


def uk_outlet(
    voltage_rating: int = UKVoltage.RESIDENTIAL,
    frequency_rating: int = UK_HERTZ,
    has_round_holes: bool = False,
    number_of_holes: int = NumberOfPinholes.THREE,
) -> Outlet:
    """An outlet with UK defaults."""
    return Outlet(has_round_holes, int(number_of_holes), int(voltage_rating), int(frequency_rating))


def japanese_outlet(
    voltage_rating: int = JapaneseVoltage.RESIDENTIAL,
    frequency_rating: int = JapaneseHertz.EASTERN,
    has_round_holes: bool = True,
    number_of_holes: int = NumberOfPinholes.TWO,
) -> Outlet:
    """An outlet with Japanese defaults."""
    return Outlet(has_round_holes, int(number_of_holes), int(voltage_rating), int(frequency_rating))


def american_plug(
    voltage_rating: int = AmericanVoltage.RESIDENTIAL,
    frequency_rating: int = AMERICAN_HERTZ,
    pin_count: int = NumberOfPinholes.TWO,
    has_round_pins: bool = False,
) -> Plug:
    """A plug with American defaults."""
    return Plug(int(pin_count), has_round_pins, int(voltage_rating), int(frequency_rating))


def uk_plug(
    voltage_rating: int = UKVoltage.RESIDENTIAL,
    frequency_rating: int = UK_HERTZ,
    pin_count: int = NumberOfPinholes.THREE,
    has_round_pins: bool = False,
) -> Plug:
    """A plug with UK defaults."""
    return Plug(int(pin_count), has_round_pins, int(voltage_rating), int(frequency_rating))


def japanese_plug(
    voltage_rating: int = JapaneseVoltage.RESIDENTIAL,
    frequency_rating: int = JapaneseHertz.EASTERN,
    pin_count: int = NumberOfPinholes.TWO,
    has_round_pins: bool = True,
) -> Plug:
    """A plug with Japanese defaults."""
    return Plug(int(pin_count), has_round_pins, int(voltage_rating), int(frequency_rating))


@dataclass
class Adapter:
    """Sits between a plug and an outlet and judges whether they fit directly."""

    plug: Plug

    def check_outlet_compatibility(self, outlet: Outlet) -> bool:
        """Whether the plug works in ``outlet`` as it is."""
        plug = self.plug
        return (
            plug.has_round_pins == outlet.has_round_holes
            and plug.pin_count <= outlet.number_of_holes
            and plug.frequency_rating == outlet.frequency_rating
            and plug.voltage_rating == outlet.voltage_rating
        )

    def check_needs_adapter(self, outlet: Outlet) -> bool:
        """Whether an adapter is needed to use the plug in ``outlet``."""
        if self.check_outlet_compatibility(outlet):
            print("No Adapter Needed!")
            return False
        print("Adapter Needed!")
        return True


def check_plug_and_outlet(plug: Plug, outlet: Outlet) -> bool:
    """Report and return whether ``plug`` needs an adapter for ``outlet``."""
    needs_adapter = Adapter(plug).check_needs_adapter(outlet)
    print(int(needs_adapter))
    return needs_adapter


def main(argv: list[str] | None = None) -> int:
    """Try every plug against every outlet."""
    if argv is None:
        argv = sys.argv[1:]
    plugs = (american_plug(), uk_plug(), japanese_plug())
    outlets = (american_outlet(), uk_outlet(), japanese_outlet())
    for plug in plugs:
        for outlet in outlets:
            check_plug_and_outlet(plug, outlet)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())