# patternbook

A small library of worked examples for the classic object-oriented design
patterns. Each module holds one self-contained scenario. It shows how the
participants of a pattern fit together. Most objects report what they do by
printing a line to standard output. Many methods also return that line, so
you can check it in code.

## Installation

From a checkout of the project:

```
pip install .
```

The package has no runtime dependencies and needs Python 3.10 or later.

## What is inside

| Pattern          | Modules |
|------------------|---------|
| Singleton        | `patternbook.singleton` |
| Adapter          | `patternbook.duck_adapter` |
| Strategy         | `patternbook.simuduck`, `patternbook.rpg`, `patternbook.rpg_weapons` |
| Template method  | `patternbook.caffeine` |
| Decorator        | `patternbook.starbuzz` |
| Command          | `patternbook.receivers`, `patternbook.command`, `patternbook.lambda_remote` |
| Facade           | `patternbook.home_theater` |
| Observer         | `patternbook.weather_data`, `patternbook.weather_displays` |
| Factory          | `patternbook.factory_pizzas`, `patternbook.factory_stores` |
| Abstract factory | `patternbook.ingredients`, `patternbook.ingredient_pizzas`, `patternbook.ingredient_stores` |

In brief:

- `singleton`: `get_singleton_instance()` always returns the same `Single`.
  There are three ways to get a shared `Boiler`:
  `get_boiler_double_checked()`, `get_boiler_eager()` and `get_boiler_lazy()`.
  A `Boiler` only fills when empty, only boils when full and unboiled, and
  only drains when full and boiled.
- `duck_adapter`: a `TurkeyAdapter` lets a `WildTurkey` act as a `Duck`.
  Its `quack()` gobbles, and its `fly()` flies the turkey five times.
- `simuduck`: a `Duck` hands flying and quacking to the behaviour objects
  it holds (`FlyWithWings`, `FlyNoWay`, `MuteQuack`, `Squeak`).
- `rpg`: a `Queen`, `King`, `Troll` and `Knight` each accept one kind of
  weapon. Each accepts `BowAndArrow`, `Axe`, `Knife` or `Sword` in that order.
  Giving a character the wrong kind raises `TypeError`. Calling `fight()`
  with no weapon raises `ValueError`.
- `rpg_weapons`: a `Sword` and a `Staff` that `display()` and `attack()`.
- `caffeine`: `Coffee` and `Tea` share `prepare_recipe()`. It returns the
  four lines its steps printed.
- `starbuzz`: beverages wrapped in `Mocha`, `Whip`, `Milk` and `Soy`.
  `describe()` and `cost()` build up through the wrappers.
- `command`: command objects and a seven-slot `RemoteControl` whose empty
  slots hold `NoCommand`.
- `lambda_remote`: a seven-slot `RemoteControl` that holds plain callables.
  Its `undo()` runs the opposite of the last button pressed.
- `home_theater`: a `HomeTheaterFacade` drives the amplifier, player,
  projector, lights, screen and popcorn popper with `watch_movie()` and
  `end_movie()`.
- `weather_data` / `weather_displays`: `WeatherData` tells its observers
  each time new measurements are set. The displays include current
  conditions, statistics, forecast, third-party and heat index.
- `factory_stores`: a `SimplePizzaFactory` and three stores. `PizzaStore`
  prepares, bakes, cuts and boxes each pizza. `NYPizzaStore` and
  `ChicagoPizzaStore` prepare, bake and box, but do not cut.
- `ingredient_stores`: New York and Chicago stores. Their pizzas draw
  ingredients from an `IngredientFactory` such as `PizzaIngredientFactory`.

## A few examples

### Decorator: building up a drink

```python
from patternbook.starbuzz import DarkRoast, Mocha, Whip

drink = Whip(Mocha(DarkRoast()))
print(drink.describe())   # dark roast, mocha, whip
print(f"${drink.cost():.2f}")
```

### Command: a remote control with undo

```python
from patternbook.receivers import Light
from patternbook.lambda_remote import RemoteControl

light = Light()
remote = RemoteControl()
remote.set_command(0, light.on, light.off)
remote.on_button_was_pressed(0)   # light on
remote.undo()                     # light off
```

Both remote controls raise `IndexError` for a slot outside 0 to 6. Calling
`undo()` before any button has been pressed raises `RuntimeError`.

### Observer: a weather station

```python
from patternbook.weather_data import WeatherData
from patternbook.weather_displays import CurrentConditionsDisplay, StatisticsDisplay

station = WeatherData()
CurrentConditionsDisplay(station)
StatisticsDisplay(station)
station.set_measurements(80, 65, 30.4)
```

### Abstract factory: ordering a pizza

```python
from patternbook.ingredients import PizzaIngredientFactory
from patternbook.ingredient_stores import NYPizzaStore

store = NYPizzaStore(PizzaIngredientFactory())
pizza = store.order_pizza("cheese")
print(pizza.name)   # New York style Cheese Pizza
```

If a store does not sell the kind of pizza you ask for, `order_pizza`
returns `None`.

### Strategy: arming a character

```python
from patternbook.rpg import King, Axe

king = King("King")
king.weapon = Axe("Bloodroar", 30)
king.fight()
```

## What it does not do

This is a library of examples to import and read. It has no command-line
program. Nothing in it saves state between runs.

## Running the tests

```
pip install ".[test]"
pytest
```