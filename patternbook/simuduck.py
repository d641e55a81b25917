"""Ducks whose flying and quacking are pluggable strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _say(message: str) -> str:
    print(message)
    return message


class FlyBehavior(ABC):
    @abstractmethod
    def fly(self) -> str: ...


class QuackBehavior(ABC):
    @abstractmethod
    def quack(self) -> str: ...


class FlyWithWings(FlyBehavior):
    def fly(self) -> str:
        return _say("I'm flying!!")


class FlyNoWay(FlyBehavior):
    def fly(self) -> str:
        return _say("I can't fly")


class MuteQuack(QuackBehavior):
    def quack(self) -> str:
        return _say("<< Silence >>")


class Squeak(QuackBehavior):
    def quack(self) -> str:
        return _say("Squeak")


@dataclass
class Duck:
    """A duck that delegates flying and quacking to its behaviours."""

    fly_behavior: FlyBehavior
    quack_behavior: QuackBehavior

    def perform_fly(self) -> str:
        return self.fly_behavior.fly()

    def perform_quack(self) -> str:
        return self.quack_behavior.quack()

    def swim(self) -> str:
        return _say("All ducks float, even decoys!")

    def display(self) -> str:
        return _say("I'm a duck")