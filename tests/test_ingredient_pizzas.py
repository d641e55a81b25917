import pytest

from patternbook.ingredient_pizzas import (
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
from patternbook.ingredients import (
    Cheese,
    Clam,
    Dough,
    FreshClam,
    IngredientFactory,
    MarinaraSauce,
    Pepperoni,
    PizzaIngredientFactory,
    ReggianoCheese,
    Sauce,
    ThinCrustDough,
    Veggie,
)


class _CountingFactory(IngredientFactory):
    def __init__(self):
        self.calls = []

    def create_dough(self):
        self.calls.append("dough")
        return Dough("test dough")

    def create_sauce(self):
        self.calls.append("sauce")
        return Sauce("test sauce")

    def create_cheese(self):
        self.calls.append("cheese")
        return Cheese("test cheese")

    def create_veggies(self):
        self.calls.append("veggies")
        return [Veggie("test veggie")]

    def create_pepperoni(self):
        self.calls.append("pepperoni")
        return Pepperoni("test pepperoni")

    def create_clam(self):
        self.calls.append("clam")
        return Clam("test clam")


def test_default_names():
    factory = PizzaIngredientFactory()
    assert CheesePizza(factory).name == "cheese pizza"
    assert PepperoniPizza(factory).name == "Pepperoni Pizza"
    assert ClamPizza(factory).name == "Clam Pizza"
    assert VeggiePizza(factory).name == "Veggie Pizza"


def test_name_can_be_overridden():
    pizza = CheesePizza(PizzaIngredientFactory(), name="my pie")
    assert pizza.name == "my pie"


def test_cheese_pizza_prepare_draws_from_factory(capsys):
    factory = _CountingFactory()
    pizza = CheesePizza(factory)
    assert pizza.dough is None
    pizza.prepare()
    assert factory.calls == ["dough", "sauce", "cheese"]
    assert pizza.dough == Dough("test dough")
    assert pizza.sauce == Sauce("test sauce")
    assert pizza.cheese == Cheese("test cheese")
    assert pizza.clam is None
    assert capsys.readouterr().out == "Preparing cheese pizza\n"


def test_clam_pizza_prepare_adds_clam():
    pizza = ClamPizza(PizzaIngredientFactory())
    pizza.prepare()
    assert pizza.dough == ThinCrustDough()
    assert pizza.sauce == MarinaraSauce()
    assert pizza.cheese == ReggianoCheese()
    assert pizza.clam == FreshClam()
    assert pizza.veggies == []


def test_clam_pizza_call_order():
    factory = _CountingFactory()
    ClamPizza(factory).prepare()
    assert factory.calls == ["dough", "sauce", "cheese", "clam"]


def test_base_prepare_takes_no_ingredients(capsys):
    factory = _CountingFactory()
    pizza = VeggiePizza(factory)
    pizza.prepare()
    assert factory.calls == []
    assert pizza.veggies == []
    assert capsys.readouterr().out.startswith("Preparing Veggie Pizza")


def test_bake_cut_box_output(capsys):
    pizza = Pizza(name="plain")
    pizza.bake()
    pizza.cut()
    pizza.box()
    assert capsys.readouterr().out.splitlines() == [
        "Bake for 25 minutes at 350",
        "Cutting the pizza into diagonal slices",
        "Place in official PizzaStore box",
    ]


def test_chicago_cut_is_square(capsys):
    ChicagoStyleCheesePizza().cut()
    assert capsys.readouterr().out == "Cutting the pizza into square slices\n"


def test_ny_cut_is_diagonal(capsys):
    NYStyleCheesePizza().cut()
    assert capsys.readouterr().out == "Cutting the pizza into diagonal slices\n"


def test_styled_cheese_pizzas_come_fully_topped():
    for pizza in (NYStyleCheesePizza(), ChicagoStyleCheesePizza()):
        assert pizza.name == "Chicago Style Deep Dish Cheese Pizza"
        assert pizza.dough == ThinCrustDough()
        assert pizza.clam == FreshClam()
        assert [v.name for v in pizza.veggies] == ["Garlic", "Onion", "Mushroom", "Red Pepper"]


def test_styled_cheese_pizzas_do_not_share_toppings():
    first = NYStyleCheesePizza()
    second = NYStyleCheesePizza()
    first.veggies.clear()
    assert len(second.veggies) == 4


@pytest.mark.parametrize(
    "cls, name",
    [
        (NYStyleClamPizza, "New York Style Clam Pizza"),
        (NYStyleVeggiePizza, "New York Style Veggie Pizza"),
        (NYStylePepperoniPizza, "New York Style Pepperoni Pizza"),
    ],
)
def test_ny_plain_pizzas(cls, name):
    pizza = cls()
    assert pizza.name == name
    assert pizza.dough is None
    assert pizza.veggies == []