"""Coffee-shop beverages wrapped in priced condiment decorators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union


class _Drink(Protocol):
    def cost(self) -> float: ...

    def describe(self) -> str: ...


@dataclass
class Beverage:
    """A base drink; its cost is the price times the discount factor."""

    description: str
    price: float
    count: float = 1.0

    def cost(self) -> float:
        return self.price * self.count

    def describe(self) -> str:
        return self.description


class DarkRoast(Beverage):
    def __init__(self) -> None:
        super().__init__(description="dark roast", price=0.99, count=1.0)


class HouseBlend(Beverage):
    def __init__(self) -> None:
        super().__init__(description="house blend", price=0.89, count=1.0)


class Espresso(Beverage):
    def __init__(self) -> None:
        super().__init__(description="espresso", price=1.99, count=1.0)


class Decaf(Beverage):
    def __init__(self) -> None:
        super().__init__(description="decaf", price=1.05, count=1.0)


@dataclass
class CondimentDecorator:
    """A condiment that adds its price and name to the drink it wraps."""

    beverage: Union[_Drink, None]
    price: float
    description: str

    def describe(self) -> str:
        if self.beverage is not None:
            return f"{self.beverage.describe()}, {self.description}"
        return self.description

    def cost(self) -> float:
        if self.beverage is None:
            return self.price
        return self.beverage.cost() + self.price


class Mocha(CondimentDecorator):
    def __init__(self, beverage: _Drink | None) -> None:
        super().__init__(beverage=beverage, price=0.2, description="mocha")


class Whip(CondimentDecorator):
    def __init__(self, beverage: _Drink | None) -> None:
        super().__init__(beverage=beverage, price=0.1, description="whip")


class Milk(CondimentDecorator):
    def __init__(self, beverage: _Drink | None) -> None:
        super().__init__(beverage=beverage, price=0.1, description="milk")


class Soy(CondimentDecorator):
    def __init__(self, beverage: _Drink | None) -> None:
        super().__init__(beverage=beverage, price=0.15, description="soy")