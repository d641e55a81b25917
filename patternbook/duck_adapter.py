"""Adapting a turkey so it can stand in for a duck."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _say(line: str) -> str:
    print(line)
    return line


class Duck(ABC):
    """Anything that quacks and flies like a duck."""

    @abstractmethod
    def quack(self) -> str:
        """Make the duck's sound and return what was said."""

    @abstractmethod
    def fly(self) -> str:
        """Fly and return the description of the flight."""


class Turkey(ABC):
    """Anything that gobbles and flies like a turkey."""

    @abstractmethod
    def gobble(self) -> str:
        """Make the turkey's sound and return what was said."""

    @abstractmethod
    def fly(self) -> str:
        """Fly and return the description of the flight."""


class MallardDuck(Duck):
    def quack(self) -> str:
        return _say("Quack")

    def fly(self) -> str:
        return _say("I'm flying")


class WildTurkey(Turkey):
    def gobble(self) -> str:
        return _say("Gobble gobble")

    def fly(self) -> str:
        return _say("I'm flying a short distance")


class TurkeyAdapter(Duck):
    """Presents a turkey through the duck interface."""

    FLIGHTS_PER_FLY = 5

    def __init__(self, turkey: Turkey) -> None:
        self.turkey = turkey

    def quack(self) -> str:
        return self.turkey.gobble()

    def fly(self) -> str:
        return "\n".join(self.turkey.fly() for _ in range(self.FLIGHTS_PER_FLY))