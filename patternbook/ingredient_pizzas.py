"""Pizzas whose ingredients come from an ingredient factory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from patternbook.ingredients import (
    Cheese,
    Clam,
    Dough,
    FreshClam,
    Garlic,
    IngredientFactory,
    MarinaraSauce,
    Mushroom,
    Onion,
    Pepperoni,
    RedPepper,
    ReggianoCheese,
    Sauce,
    SlicePepperoni,
    ThinCrustDough,
    Veggie,
)


def _say(message: str) -> str:
    print(message)
    return message


@dataclass
class Pizza:
    """A pizza that can be prepared, baked, cut and boxed."""

    name: str
    dough: Optional[Dough] = None
    sauce: Optional[Sauce] = None
    cheese: Optional[Cheese] = None
    pepperoni: Optional[Pepperoni] = None
    clam: Optional[Clam] = None
    veggies: list[Veggie] = field(default_factory=list)

    def prepare(self) -> str:
        return _say(f"Preparing {self.name}")

    def bake(self) -> str:
        return _say("Bake for 25 minutes at 350")

    def cut(self) -> str:
        return _say("Cutting the pizza into diagonal slices")

    def box(self) -> str:
        return _say("Place in official PizzaStore box")


class _FactoryPizza(Pizza):
    """A pizza that draws its ingredients from a factory when prepared."""

    default_name = ""

    def __init__(self, factory: IngredientFactory, name: Optional[str] = None) -> None:
        super().__init__(name=self.default_name if name is None else name)
        self.factory = factory


class CheesePizza(_FactoryPizza):
    default_name = "cheese pizza"

    def prepare(self) -> str:
        message = _say(f"Preparing {self.name}")
        self.dough = self.factory.create_dough()
        self.sauce = self.factory.create_sauce()
        self.cheese = self.factory.create_cheese()
        return message


class PepperoniPizza(_FactoryPizza):
    default_name = "Pepperoni Pizza"


class ClamPizza(_FactoryPizza):
    default_name = "Clam Pizza"

    def prepare(self) -> str:
        message = _say(f"Preparing {self.name}")
        self.dough = self.factory.create_dough()
        self.sauce = self.factory.create_sauce()
        self.cheese = self.factory.create_cheese()
        self.clam = self.factory.create_clam()
        return message


class VeggiePizza(_FactoryPizza):
    default_name = "Veggie Pizza"


def _full_set(name: str) -> dict:
    return dict(
        name=name,
        dough=ThinCrustDough(),
        sauce=MarinaraSauce(),
        cheese=ReggianoCheese(),
        pepperoni=SlicePepperoni(),
        clam=FreshClam(),
        veggies=[Garlic(), Onion(), Mushroom(), RedPepper()],
    )


class NYStyleCheesePizza(Pizza):
    def __init__(self) -> None:
        super().__init__(**_full_set("Chicago Style Deep Dish Cheese Pizza"))


class NYStyleClamPizza(Pizza):
    def __init__(self) -> None:
        super().__init__(name="New York Style Clam Pizza")


class NYStyleVeggiePizza(Pizza):
    def __init__(self) -> None:
        super().__init__(name="New York Style Veggie Pizza")


class NYStylePepperoniPizza(Pizza):
    def __init__(self) -> None:
        super().__init__(name="New York Style Pepperoni Pizza")


class ChicagoStyleCheesePizza(Pizza):
    def __init__(self) -> None:
        super().__init__(**_full_set("Chicago Style Deep Dish Cheese Pizza"))

    def cut(self) -> str:
        return _say("Cutting the pizza into square slices")