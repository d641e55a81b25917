"""Caffeine drinks sharing one recipe template."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _say(message: str) -> str:
    print(message)
    return message


class CaffeineBeverage(ABC):
    """A drink prepared by boiling, brewing, pouring and adding condiments."""

    def prepare_recipe(self) -> list[str]:
        """Run every step in order and return the lines each step reported."""
        return [
            self.boil_water(),
            self.brew(),
            self.pour_in_cup(),
            self.add_condiments(),
        ]

    def boil_water(self) -> str:
        return _say("Boiling water")

    def pour_in_cup(self) -> str:
        return _say("Pouring into cup")

    @abstractmethod
    def brew(self) -> str: ...

    @abstractmethod
    def add_condiments(self) -> str: ...


class Coffee(CaffeineBeverage):
    def brew(self) -> str:
        return _say("Dripping Coffee through filter")

    def add_condiments(self) -> str:
        return _say("Adding Sugar and Milk")


class Tea(CaffeineBeverage):
    def brew(self) -> str:
        return _say("Steeping the tea")

    def add_condiments(self) -> str:
        return _say("Adding Lemon")