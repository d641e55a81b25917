"""A simple pizza factory and the stores that order from it."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from patternbook.factory_pizzas import (
    CheesePizza,
    ChicagoStyleCheesePizza,
    ClamPizza,
    NYStyleCheesePizza,
    NYStyleClamPizza,
    NYStylePepperoniPizza,
    NYStyleVeggiePizza,
    PepperoniPizza,
    Pizza,
    VeggiePizza,
)

_Menu = dict[str, Callable[[], Pizza]]


class SimplePizzaFactory:
    """Makes plain pizzas by type name."""

    MENU: _Menu = {
        "cheese": CheesePizza,
        "pepperoni": PepperoniPizza,
        "clam": ClamPizza,
        "veggie": VeggiePizza,
    }

    def create_pizza(self, pizza_type: str) -> Optional[Pizza]:
        """Return a new pizza of the type, or None if it is not on the menu."""
        make = self.MENU.get(pizza_type)
        return make() if make is not None else None


class PizzaStore:
    """A store that has its factory make pizzas and then finishes them."""

    def __init__(self, factory: Optional[SimplePizzaFactory] = None) -> None:
        self.factory = factory if factory is not None else SimplePizzaFactory()

    def create_pizza(self, pizza_type: str) -> Optional[Pizza]:
        return self.factory.create_pizza(pizza_type)

    def order_pizza(self, pizza_type: str) -> Optional[Pizza]:
        """Make, prepare, bake, cut and box a pizza; None if unknown."""
        return self._finish(self.create_pizza(pizza_type), cut=True)

    @staticmethod
    def _finish(pizza: Optional[Pizza], cut: bool) -> Optional[Pizza]:
        if pizza is None:
            return None
        pizza.prepare()
        pizza.bake()
        if cut:
            pizza.cut()
        pizza.box()
        return pizza


class NYPizzaStore(PizzaStore):
    MENU: _Menu = {
        "cheese": NYStyleCheesePizza,
        "pepperoni": NYStylePepperoniPizza,
        "clam": NYStyleClamPizza,
        "veggie": NYStyleVeggiePizza,
    }

    def create_pizza(self, pizza_type: str) -> Optional[Pizza]:
        make = self.MENU.get(pizza_type)
        return make() if make is not None else None

    def order_pizza(self, pizza_type: str) -> Optional[Pizza]:
        """Make, prepare, bake and box a pizza; this store does not cut."""
        return self._finish(self.create_pizza(pizza_type), cut=False)


class ChicagoPizzaStore(PizzaStore):
    MENU: _Menu = {
        "cheese": ChicagoStyleCheesePizza,
        "pepperoni": PepperoniPizza,
        "clam": ClamPizza,
        "veggie": VeggiePizza,
    }

    def create_pizza(self, pizza_type: str) -> Optional[Pizza]:
        make = self.MENU.get(pizza_type)
        return make() if make is not None else None

    def order_pizza(self, pizza_type: str) -> Optional[Pizza]:
        """Make, prepare, bake and box a pizza; this store does not cut."""
        return self._finish(self.create_pizza(pizza_type), cut=False)