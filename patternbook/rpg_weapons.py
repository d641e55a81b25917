"""Weapons that display themselves and attack in their own way."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _say(message: str) -> str:
    print(message)
    return message


class WeaponBehavior(ABC):
    @abstractmethod
    def attack(self) -> str: ...

    @abstractmethod
    def display(self) -> str: ...


@dataclass
class Sword(WeaponBehavior):
    name: str
    atk: int

    def attack(self) -> str:
        return self.chop()

    def display(self) -> str:
        return _say(f'武器名称是 "{self.name}"， 种类是剑')

    def chop(self) -> str:
        return _say(f"敌人被砍伤 掉 {self.atk} 血 ")


@dataclass
class Staff(WeaponBehavior):
    name: str
    atk: int
    magic_type: str

    def attack(self) -> str:
        return self.magic()

    def display(self) -> str:
        return _say(f'武器名称是 "{self.name}"， 种类是法杖')

    def magic(self) -> str:
        return _say(f"敌人遭到{self.magic_type}魔法 掉 {self.atk} 血 ")