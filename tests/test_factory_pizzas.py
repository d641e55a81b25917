from patternbook.factory_pizzas import (
    CheesePizza,
    ChicagoStyleCheesePizza,
    NYStyleCheesePizza,
    NYStyleClamPizza,
    Pizza,
    VeggiePizza,
)


def test_cheese_pizza_name():
    assert CheesePizza().name == "cheese pizza"


def test_prepare_prints_name(capsys):
    pizza = VeggiePizza()
    pizza.prepare()
    assert capsys.readouterr().out == f"prepare {pizza.name}\n"


def test_bake_and_box_messages(capsys):
    pizza = NYStyleClamPizza()
    pizza.bake()
    pizza.box()
    assert capsys.readouterr().out.splitlines() == [
        "Bake for 25 minutes at 350",
        "Place in official PizzaStore box",
    ]


def test_default_cut_is_diagonal(capsys):
    CheesePizza().cut()
    assert capsys.readouterr().out == "Cutting the pizza into diagonal slices\n"


def test_chicago_cut_is_square(capsys):
    ChicagoStyleCheesePizza().cut()
    assert capsys.readouterr().out == "Cutting the pizza into square slices\n"


def test_ny_cheese_ingredients():
    pizza = NYStyleCheesePizza()
    assert pizza.dough == "Thin Crust Dough"
    assert pizza.sauce == "Marinara Sauce"
    assert pizza.toppings == ["Grated Reggiano Cheese"]


def test_equality_depends_on_class_and_fields():
    assert CheesePizza() == CheesePizza()
    assert (CheesePizza() == Pizza(name="cheese pizza")) is False


def test_toppings_are_not_shared():
    first = ChicagoStyleCheesePizza()
    second = ChicagoStyleCheesePizza()
    first.toppings.append("extra")
    assert second.toppings == ["Shredded Mozzarella Cheese"]
    assert Pizza(name="x").toppings == []