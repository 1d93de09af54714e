"""Character classes (components) wrapped by specialisations (decorators)."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Mapping

ATTACK_FATIGUE = 10
BLOCK_FATIGUE = 10
FAITH_MAGIC_USED = 5
DARK_MAGIC_USED = 5
FINESSE_POINTS_USED = 5


class Slot(Enum):
    """Places on an entity where a piece of gear goes."""

    ARMOR = "armor"
    GREAVES = "greaves"
    HELMET = "helmet"
    MAIN_HAND = "main hand"
    SECONDARY_HAND = "secondary hand"
    SABATON = "sabaton"


class Entity(ABC):
    """A fighter with health, mana and fatigue, none of which drops below zero."""

    gear: ClassVar[Mapping[Slot, str]] = {}

    def __init__(self, health: int = 100, mana: int = 100, fatigue: int = 100) -> None:
        self._health = 0
        self._mana = 0
        self._fatigue = 0
        self.health = health
        self.mana = mana
        self.fatigue = fatigue

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        if value < 0:
            self._health = 0
            print("Entity dead -- Health at zero")
        else:
            self._health = value

    @property
    def mana(self) -> int:
        return self._mana

    @mana.setter
    def mana(self, value: int) -> None:
        if value < 0:
            self._mana = 0
            print("Entity drained -- Mana at zero")
        else:
            self._mana = value

    @property
    def fatigue(self) -> int:
        return self._fatigue

    @fatigue.setter
    def fatigue(self, value: int) -> None:
        if value < 0:
            self._fatigue = 0
            print("Entity tired -- Fatigue at zero")
        else:
            self._fatigue = value

    def _equip(self, slot: Slot) -> str:
        item = self.gear[slot]
        print(f"{item} equipped")
        return item

    def equip_armor(self) -> str:
        """Put on body armour and return its name."""
        return self._equip(Slot.ARMOR)

    def equip_greaves(self) -> str:
        """Put on greaves and return their name."""
        return self._equip(Slot.GREAVES)

    def equip_helmet(self) -> str:
        """Put on a helmet and return its name."""
        return self._equip(Slot.HELMET)

    def equip_main_hand(self) -> str:
        """Take up the main-hand item and return its name."""
        return self._equip(Slot.MAIN_HAND)

    def equip_secondary_hand(self) -> str:
        """Take up the off-hand item and return its name."""
        return self._equip(Slot.SECONDARY_HAND)

    def equip_sabaton(self) -> str:
        """Put on foot armour and return its name."""
        return self._equip(Slot.SABATON)

    @abstractmethod
    def attack(self) -> int:
        """Attack and return the resource left afterwards."""

    @abstractmethod
    def block(self) -> int:
        """Block and return the resource left afterwards."""

    @abstractmethod
    def reload(self) -> bool:
        """Reload; return whether anything was reloaded."""


class Knight(Entity):
    """A sword-and-shield fighter whose actions cost fatigue."""

    gear = {
        Slot.ARMOR: "Armor",
        Slot.GREAVES: "Greaves",
        Slot.HELMET: "Helmet",
        Slot.MAIN_HAND: "Sword",
        Slot.SECONDARY_HAND: "Shield",
        Slot.SABATON: "Sabatons",
    }

    def attack(self) -> int:
        self.fatigue -= ATTACK_FATIGUE
        print("Sword swung")
        return self.fatigue

    def block(self) -> int:
        self.fatigue -= BLOCK_FATIGUE
        print("Blocked with shield")
        return self.fatigue

    def reload(self) -> bool:
        print("Knight don't reload!")
        return False


class Archer(Entity):
    """A bow fighter carrying a supply of arrows."""

    gear = {
        Slot.ARMOR: "Armor",
        Slot.GREAVES: "Greaves",
        Slot.HELMET: "Helmet",
        Slot.MAIN_HAND: "Bow",
        Slot.SECONDARY_HAND: "Arrows",
        Slot.SABATON: "Sabatons",
    }

    def __init__(
        self,
        arrows_equip: int = 100,
        health: int = 100,
        mana: int = 100,
        fatigue: int = 100,
    ) -> None:
        super().__init__(health, mana, fatigue)
        self.arrows_equip = arrows_equip

    def attack(self) -> int:
        self.fatigue -= ATTACK_FATIGUE
        print("Shot bow")
        return self.fatigue

    def block(self) -> int:
        print("Archer don't block")
        return self.fatigue

    def reload(self) -> bool:
        self.arrows_equip -= 1
        if self.arrows_equip < 0:
            self.arrows_equip = 0
            print("Insufficient arrows")
            return False
        print("Reloaded bow and arrow")
        return True


class EntitySpecialization(Entity):
    """An entity that wraps another entity and adds a class attack."""

    def __init__(self, entity: Entity | None = None) -> None:
        super().__init__()
        self.entity = entity

    @abstractmethod
    def class_attack(self) -> str:
        """Perform the specialisation's ultimate attack and describe it."""


class HolyKnight(EntitySpecialization):
    """A knight specialisation whose actions spend faith magic."""

    gear = {
        Slot.ARMOR: "Holy Armor",
        Slot.GREAVES: "Holy Greaves",
        Slot.HELMET: "Holy Helmet",
        Slot.MAIN_HAND: "Holy Sword",
        Slot.SECONDARY_HAND: "Holy Shield",
        Slot.SABATON: "Holy Sabatons",
    }

    def __init__(self, entity: Entity | None = None, faith_magic: int = 100) -> None:
        super().__init__(entity)
        self.faith_magic = faith_magic

    def class_attack(self) -> str:
        message = "Holy Knight's Ultimate Attack!"
        print(message)
        return message

    def _spend(self, message: str) -> int:
        if self.faith_magic < 0:
            print("Insufficient faith magic")
        else:
            print(message)
            self.faith_magic -= FAITH_MAGIC_USED
        return self.faith_magic

    def attack(self) -> int:
        return self._spend("Holy attack -- uses smite")

    def block(self) -> int:
        return self._spend("Holy block -- bubble shield")

    def reload(self) -> bool:
        print("Holy Knight doesn't reload")
        return False


class DarkKnight(EntitySpecialization):
    """A knight specialisation whose actions spend dark magic."""

    gear = {
        Slot.ARMOR: "Dark Armor",
        Slot.GREAVES: "Dark Greaves",
        Slot.HELMET: "Dark Helmet",
        Slot.MAIN_HAND: "Dark Sword",
        Slot.SECONDARY_HAND: "Dark Shield",
        Slot.SABATON: "Dark Sabaton",
    }

    def __init__(self, entity: Entity | None = None, dark_magic: int = 100) -> None:
        super().__init__(entity)
        self.dark_magic = dark_magic

    def class_attack(self) -> str:
        message = "Dark Knight's Ultimate Attack!"
        print(message)
        return message

    def _spend(self, message: str) -> int:
        if self.dark_magic < 0:
            print("Insufficient dark magic")
        else:
            print(message)
            self.dark_magic -= DARK_MAGIC_USED
        return self.dark_magic

    def attack(self) -> int:
        return self._spend("Dark attack -- uses blight")

    def block(self) -> int:
        return self._spend("Dark block -- terror shield")

    def reload(self) -> bool:
        print("Dark Knight doesn't reload")
        return False


class CrossBowArcher(EntitySpecialization):
    """An archer specialisation whose attacks spend finesse points."""

    gear = {
        Slot.ARMOR: "Cross Bow Armor",
        Slot.GREAVES: "Cross Bow Greaves",
        Slot.HELMET: "Cross Bow Helmet",
        Slot.MAIN_HAND: "Cross Bow",
        Slot.SECONDARY_HAND: "Cross Bow Arrows",
        Slot.SABATON: "Cross Bow Sabaton",
    }

    def __init__(self, entity: Entity | None = None, finesse_points: int = 100) -> None:
        super().__init__(entity)
        self.finesse_points = finesse_points

    def class_attack(self) -> str:
        message = "Cross Bow Archers's Ultimate Attack!"
        print(message)
        return message

    def attack(self) -> int:
        if self.finesse_points < 0:
            print("Insufficient finesse points")
        else:
            print("Cross Bow Attack -- uses sniper arrow")
            self.finesse_points -= FINESSE_POINTS_USED
        return self.finesse_points

    def block(self) -> int:
        print("Cross Bow Archer can't block")
        return self.finesse_points

    def reload(self) -> bool:
        """Load a bolt from the wrapped archer's arrows; other entities cannot."""
        archer = self.entity
        if not isinstance(archer, Archer):
            return False
        if archer.arrows_equip < 0:
            print("No more arrows, can't reload")
            return False
        print("Reloaded a cross bow bolt")
        archer.arrows_equip -= 1
        return True


def exercise_entity(entity: Entity) -> list[str]:
    """Equip every slot, then attack, block and reload; return the gear put on."""
    equipped = [
        entity.equip_armor(),
        entity.equip_greaves(),
        entity.equip_helmet(),
        entity.equip_main_hand(),
        entity.equip_secondary_hand(),
        entity.equip_sabaton(),
    ]
    entity.attack()
    entity.block()
    entity.reload()
    return equipped


def main(argv: list[str] | None = None) -> int:
    """Exercise plain entities and their specialisations."""
    if argv is None:
        argv = sys.argv[1:]

    knight = Knight()
    exercise_entity(knight)

    archer = Archer()
    exercise_entity(archer)

    for specialization in (HolyKnight(knight), DarkKnight(knight), CrossBowArcher(archer)):
        exercise_entity(specialization)
        specialization.class_attack()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())