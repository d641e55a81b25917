"""Regional pizza stores that build pizzas from an ingredient factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from patternbook.ingredient_pizzas import (
    CheesePizza,
    ClamPizza,
    PepperoniPizza,
    Pizza,
    VeggiePizza,
)
from patternbook.ingredients import IngredientFactory

_MENU = {
    "cheese": (CheesePizza, "Cheese"),
    "veggie": (VeggiePizza, "Veggie"),
    "clam": (ClamPizza, "Clam"),
    "pepperoni": (PepperoniPizza, "Pepperoni"),
}


class PizzaStore(ABC):
    """A store that makes a pizza by type and then finishes it."""

    def __init__(self, ingredient_factory: IngredientFactory) -> None:
        self.ingredient_factory = ingredient_factory

    @abstractmethod
    def create_pizza(self, pizza_type: str) -> Optional[Pizza]:
        """Return a new pizza of the type, or None if it is not on the menu."""

    def order_pizza(self, pizza_type: str) -> Optional[Pizza]:
        """Make, prepare, bake, cut and box a pizza; None if unknown."""
        pizza = self.create_pizza(pizza_type)
        if pizza is None:
            return None
        pizza.prepare()
        pizza.bake()
        pizza.cut()
        pizza.box()
        return pizza

    def _make(self, pizza_type: str, style: str) -> Optional[Pizza]:
        entry = _MENU.get(pizza_type)
        if entry is None:
            return None
        cls, label = entry
        return cls(self.ingredient_factory, name=f"{style} style {label} Pizza")


class NYPizzaStore(PizzaStore):
    def create_pizza(self, pizza_type: str) -> Optional[Pizza]:
        return self._make(pizza_type, "New York")


class ChicagoPizzaStore(PizzaStore):
    def create_pizza(self, pizza_type: str) -> Optional[Pizza]:
        return self._make(pizza_type, "Chicago")