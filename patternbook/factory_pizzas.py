"""Pizzas made by the simple factory and the regional stores."""

from __future__ import annotations

from dataclasses import dataclass, field


def _say(message: str) -> str:
    print(message)
    return message


@dataclass
class Pizza:
    """A pizza that can be prepared, baked, cut and boxed."""

    name: str
    dough: str = ""
    sauce: str = ""
    toppings: list[str] = field(default_factory=list)

    def prepare(self) -> str:
        return _say(f"prepare {self.name}")

    def bake(self) -> str:
        return _say("Bake for 25 minutes at 350")

    def cut(self) -> str:
        return _say("Cutting the pizza into diagonal slices")

    def box(self) -> str:
        return _say("Place in official PizzaStore box")


class CheesePizza(Pizza):
    def __init__(self) -> None:
        super().__init__(name="cheese pizza")


class PepperoniPizza(Pizza):
    def __init__(self) -> None:
        super().__init__(name="Pepperoni Pizza")


class ClamPizza(Pizza):
    def __init__(self) -> None:
        super().__init__(name="Clam Pizza")


class VeggiePizza(Pizza):
    def __init__(self) -> None:
        super().__init__(name="Veggie Pizza")


class NYStyleCheesePizza(Pizza):
    def __init__(self) -> None:
        super().__init__(
            name="Chicago Style Deep Dish Cheese Pizza",
            dough="Thin Crust Dough",
            sauce="Marinara Sauce",
            toppings=["Grated Reggiano Cheese"],
        )


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
        super().__init__(
            name="Chicago Style Deep Dish Cheese Pizza",
            dough="Extra Thick Crust Dough",
            sauce="Plum Tomato Sauce",
            toppings=["Shredded Mozzarella Cheese"],
        )

    def cut(self) -> str:
        return _say("Cutting the pizza into square slices")