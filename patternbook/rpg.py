"""Role-playing characters that fight with interchangeable weapons."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


class WeaponBehavior(ABC):
    @abstractmethod
    def use_weapon(self) -> str:
        """Describe one use of the weapon."""


@dataclass
class Sword(WeaponBehavior):
    name: str
    atk: int

    def use_weapon(self) -> str:
        return f"挥舞<<{self.name}>>(剑)对敌人造成了{self.atk}点伤害"


@dataclass
class Axe(WeaponBehavior):
    name: str
    atk: int

    def use_weapon(self) -> str:
        return f"挥舞<<{self.name}>>(斧)对敌人造成了{self.atk}点伤害"


@dataclass
class BowAndArrow(WeaponBehavior):
    name: str
    atk: int

    def use_weapon(self) -> str:
        return f"使用<<{self.name}>>(弓箭)对敌人造成了{self.atk}点伤害"


@dataclass
class Knife(WeaponBehavior):
    name: str
    atk: int

    def use_weapon(self) -> str:
        return f"挥舞<<{self.name}>>(小刀)对敌人造成了{self.atk}点伤害"


class Character:
    """A named fighter; subclasses restrict which kind of weapon they hold."""

    weapon_kind: ClassVar[type[WeaponBehavior]] = WeaponBehavior

    def __init__(self, name: str, weapon: WeaponBehavior | None = None) -> None:
        self.name = name
        self._weapon: WeaponBehavior | None = None
        if weapon is not None:
            self.weapon = weapon

    @property
    def weapon(self) -> WeaponBehavior | None:
        return self._weapon

    @weapon.setter
    def weapon(self, weapon: WeaponBehavior) -> None:
        if not isinstance(weapon, self.weapon_kind):
            raise TypeError(
                f"{type(self).__name__} can only wield {self.weapon_kind.__name__}, "
                f"not {type(weapon).__name__}"
            )
        self._weapon = weapon

    def fight(self) -> str:
        """Use the weapon, print the result and return it."""
        if self._weapon is None:
            raise ValueError(f"{self.name} has no weapon")
        line = f"{self.name} {self._weapon.use_weapon()}"
        print(line)
        return line


class Queen(Character):
    weapon_kind = BowAndArrow


class King(Character):
    weapon_kind = Axe


class Troll(Character):
    weapon_kind = Knife


class Knight(Character):
    weapon_kind = Sword