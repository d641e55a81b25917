"""Pizza ingredients and the factory that supplies a matching set of them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Ingredient:
    """Anything that goes on a pizza; known by its name."""

    name: str


@dataclass
class Dough(Ingredient):
    pass


@dataclass
class ThinCrustDough(Dough):
    name: str = "Thin Crust Dough"


@dataclass
class Sauce(Ingredient):
    pass


@dataclass
class MarinaraSauce(Sauce):
    name: str = "Marinara Sauce"


@dataclass
class Cheese(Ingredient):
    pass


@dataclass
class ReggianoCheese(Cheese):
    name: str = "Regginao Cheese"


@dataclass
class Pepperoni(Ingredient):
    pass


@dataclass
class SlicePepperoni(Pepperoni):
    name: str = "Slice Pepperoni"


@dataclass
class Clam(Ingredient):
    pass


@dataclass
class FreshClam(Clam):
    name: str = "Fresh Clam"


@dataclass
class Veggie(Ingredient):
    pass


@dataclass
class Onion(Veggie):
    name: str = "Onion"


@dataclass
class Mushroom(Veggie):
    name: str = "Mushroom"


@dataclass
class RedPepper(Veggie):
    name: str = "Red Pepper"


@dataclass
class Garlic(Veggie):
    name: str = "Garlic"


class IngredientFactory(ABC):
    """Supplies one consistent family of pizza ingredients."""

    @abstractmethod
    def create_dough(self) -> Dough: ...

    @abstractmethod
    def create_sauce(self) -> Sauce: ...

    @abstractmethod
    def create_cheese(self) -> Cheese: ...

    @abstractmethod
    def create_veggies(self) -> list[Veggie]: ...

    @abstractmethod
    def create_pepperoni(self) -> Pepperoni: ...

    @abstractmethod
    def create_clam(self) -> Clam: ...


class PizzaIngredientFactory(IngredientFactory):
    """The standard ingredient family: thin crust, marinara, reggiano."""

    def create_dough(self) -> Dough:
        return ThinCrustDough()

    def create_sauce(self) -> Sauce:
        return MarinaraSauce()

    def create_cheese(self) -> Cheese:
        return ReggianoCheese()

    def create_veggies(self) -> list[Veggie]:
        return [Mushroom(), Garlic(), Onion(), RedPepper()]

    def create_pepperoni(self) -> Pepperoni:
        return SlicePepperoni()

    def create_clam(self) -> Clam:
        return FreshClam()