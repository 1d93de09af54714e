"""A computer assembled as a tree of parts (leaves) and groups of parts (composites)."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass(eq=False)
class ComputerComponent:
    """Operations shared by single parts and groups of parts."""

    parent: ComputerComponent | None = field(default=None, kw_only=True, repr=False)

    def add(self, component: ComputerComponent) -> None:
        """Add a child; a plain component has none, so this does nothing."""

    def remove(self, component: ComputerComponent) -> None:
        """Remove a child; a plain component has none, so this does nothing."""

    def is_composite(self) -> bool:
        """Whether this component can hold children."""
        return False

    def describe(self) -> list[str]:
        """Lines describing this component."""
        parent = type(self.parent).__name__ if self.parent is not None else None
        return [f"Parent: {parent}"]

    def print(self) -> None:
        """Write the description to standard output."""
        for line in self.describe():
            print(line)


@dataclass(eq=False)
class Part(ComputerComponent):
    """A single hardware part with a brand and a model."""

    brand_name: str = field(default="N/A", kw_only=True)
    model_name: str = field(default="N/A", kw_only=True)

    def describe(self) -> list[str]:
        return [f"Brand Name: {self.brand_name}", f"Model Name: {self.model_name}"]


@dataclass(eq=False)
class Mouse(Part):
    dpi: int = 1000

    def describe(self) -> list[str]:
        return ["Mouse Stats", f"DPI: {self.dpi}"]


@dataclass(eq=False)
class Keyboard(Part):
    has_clicky_keys: bool = False

    def describe(self) -> list[str]:
        return ["Keyboard Stats", f"HasClickyKeys: {int(self.has_clicky_keys)}"]


@dataclass(eq=False)
class Monitor(Part):
    length: float = 0.0
    width: float = 0.0

    def describe(self) -> list[str]:
        return [f"Monitor Length: {self.length:g}", f"Monitor Width: {self.width:g}"]


@dataclass(eq=False)
class Speakers(Part):
    is_powered: bool = False
    volume: int = 0

    def describe(self) -> list[str]:
        return [
            "Speakers Stats",
            f"Speakers Powered: {int(self.is_powered)}",
            f"Speakers Volume: {self.volume}",
        ]


@dataclass(eq=False)
class SSD(Part):
    current_storage: float = 0.0
    total_storage: float = 0.0

    def describe(self) -> list[str]:
        return [
            "SSD Stats",
            f"SSD Current Storage: {self.current_storage:g}",
            f"SSD Total Storage: {self.total_storage:g}",
        ]


@dataclass(eq=False)
class RAM(Part):
    capacity: float = 0.0  # in GB

    def describe(self) -> list[str]:
        return ["RAM Stats", f"RAM Capacity: {self.capacity:g}"]


@dataclass(eq=False)
class CPU(Part):
    cores: int = 0

    def describe(self) -> list[str]:
        return ["CPU Stats", f"CPU Cores: {self.cores}"]


@dataclass(eq=False)
class GPU(Part):
    memory: float = 0.0

    def describe(self) -> list[str]:
        return ["GPU Stats", f"GPU Memory: {self.memory:g}"]


@dataclass(eq=False)
class CompositeComponent(ComputerComponent):
    """A component that holds other components."""

    _children: list[ComputerComponent] = field(
        default_factory=list, init=False, repr=False
    )

    @property
    def children(self) -> tuple[ComputerComponent, ...]:
        """The children, in the order they were added."""
        return tuple(self._children)

    def add(self, component: ComputerComponent) -> None:
        """Append a child and make this component its parent."""
        self._children.append(component)
        component.parent = self

    def remove(self, component: ComputerComponent) -> None:
        """Drop every occurrence of a child and clear its parent."""
        self._children = [child for child in self._children if child is not component]
        component.parent = None

    def is_composite(self) -> bool:
        return True

    def describe(self) -> list[str]:
        """The descriptions of all children, in order."""
        return [line for child in self._children for line in child.describe()]


@dataclass(eq=False)
class Computer(CompositeComponent):
    """The whole computer."""


@dataclass(eq=False)
class Peripherals(CompositeComponent):
    """Devices outside the tower."""


@dataclass(eq=False)
class Tower(CompositeComponent):
    """The computer case."""


@dataclass(eq=False)
class Motherboard(CompositeComponent):
    """The board holding the internal parts."""


def create_computer(computer: CompositeComponent) -> CompositeComponent:
    """Fill ``computer`` with peripherals and a tower holding a motherboard."""
    peripherals = Peripherals()
    tower = Tower()
    computer.add(peripherals)
    computer.add(tower)

    motherboard = Motherboard()
    tower.add(motherboard)

    for part in (
        Mouse(1000, brand_name="Logitech", model_name="G502 Hero"),
        Keyboard(False, brand_name="Cool Master", model_name="Quick Fire"),
        Monitor(9, 16, brand_name="Asus", model_name="42069 Gaming"),
        Speakers(True, 5, brand_name="Adams", model_name="A7V"),
    ):
        peripherals.add(part)

    for part in (
        SSD(10, 25, brand_name="Samsung", model_name="Sandybridge"),
        RAM(32, brand_name="Corsair", model_name="Vengeance"),
        CPU(8, brand_name="AMD", model_name="PM9C1a"),
        GPU(16, brand_name="ASUS", model_name="TUF Gaming GeForce RTX"),
    ):
        motherboard.add(part)

    return computer


def main(argv: list[str] | None = None) -> int:
    """Build a computer and print its parts."""
    if argv is None:
        argv = sys.argv[1:]
    print("Hello World")
    computer = create_computer(Computer())
    computer.print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())