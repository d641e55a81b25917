import pytest

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
    PizzaIngredientFactory,
    RedPepper,
    ReggianoCheese,
    Sauce,
    SlicePepperoni,
    ThinCrustDough,
    Veggie,
)


@pytest.fixture
def factory():
    return PizzaIngredientFactory()


def test_dough(factory):
    dough = factory.create_dough()
    assert isinstance(dough, Dough)
    assert dough.name == "Thin Crust Dough"


def test_sauce(factory):
    sauce = factory.create_sauce()
    assert isinstance(sauce, Sauce)
    assert sauce.name == "Marinara Sauce"


def test_cheese(factory):
    cheese = factory.create_cheese()
    assert isinstance(cheese, Cheese)
    assert cheese.name == "Regginao Cheese"


def test_pepperoni(factory):
    pepperoni = factory.create_pepperoni()
    assert isinstance(pepperoni, Pepperoni)
    assert pepperoni.name == "Slice Pepperoni"


def test_clam(factory):
    clam = factory.create_clam()
    assert isinstance(clam, Clam)
    assert clam.name == "Fresh Clam"


def test_veggies_in_order(factory):
    veggies = factory.create_veggies()
    assert [v.name for v in veggies] == ["Mushroom", "Garlic", "Onion", "Red Pepper"]
    assert all(isinstance(v, Veggie) for v in veggies)


def test_each_call_gives_fresh_equal_objects(factory):
    first = factory.create_dough()
    second = factory.create_dough()
    assert first == second
    assert first is not second
    first.name = "changed"
    assert factory.create_dough().name == "Thin Crust Dough"


def test_veggie_lists_are_independent(factory):
    veggies = factory.create_veggies()
    veggies.clear()
    assert len(factory.create_veggies()) == 4


def test_concrete_ingredients_equal_their_defaults():
    assert ThinCrustDough() == ThinCrustDough("Thin Crust Dough")
    assert MarinaraSauce() == MarinaraSauce("Marinara Sauce")
    assert ReggianoCheese() == ReggianoCheese("Regginao Cheese")
    assert SlicePepperoni() == SlicePepperoni("Slice Pepperoni")
    assert FreshClam() == FreshClam("Fresh Clam")
    assert [Onion().name, Mushroom().name, RedPepper().name, Garlic().name] == [
        "Onion",
        "Mushroom",
        "Red Pepper",
        "Garlic",
    ]


def test_generic_ingredient_keeps_given_name():
    assert Dough("rye").name == "rye"
    assert Veggie("leek").name == "leek"


def test_different_kinds_with_same_name_differ():
    assert Dough("x") != Sauce("x")


def test_factory_interface_is_abstract():
    with pytest.raises(TypeError):
        IngredientFactory()