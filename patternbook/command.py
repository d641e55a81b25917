"""Command objects and a seven-slot remote control that runs them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from patternbook.receivers import GarageDoor, Light, Stereo


class Command(ABC):
    @abstractmethod
    def execute(self) -> None: ...


@dataclass
class LightOnCommand(Command):
    light: Light

    def execute(self) -> None:
        self.light.on()


@dataclass
class LightOffCommand(Command):
    light: Light

    def execute(self) -> None:
        self.light.off()


@dataclass
class GarageDoorOpenCommand(Command):
    garage_door: GarageDoor

    def execute(self) -> None:
        self.garage_door.up()


@dataclass
class StereoOnWithCDCommand(Command):
    stereo: Stereo

    def execute(self) -> None:
        self.stereo.on()
        self.stereo.play_cd("Wall")
        self.stereo.volume = 11


class NoCommand(Command):
    """A command that does nothing; fills empty slots."""

    def execute(self) -> None:
        pass


class RemoteControl:
    """A remote with a fixed number of on/off button pairs."""

    SLOTS = 7

    def __init__(self) -> None:
        self.on_commands: list[Command] = [NoCommand() for _ in range(self.SLOTS)]
        self.off_commands: list[Command] = [NoCommand() for _ in range(self.SLOTS)]

    def _check(self, slot: int) -> None:
        if not 0 <= slot < self.SLOTS:
            raise IndexError(f"slot {slot} out of range 0..{self.SLOTS - 1}")

    def set_command(self, slot: int, on_command: Command, off_command: Command) -> None:
        self._check(slot)
        self.on_commands[slot] = on_command
        self.off_commands[slot] = off_command

    def on_button_was_pressed(self, slot: int) -> None:
        self._check(slot)
        self.on_commands[slot].execute()

    def off_button_was_pressed(self, slot: int) -> None:
        self._check(slot)
        self.off_commands[slot].execute()

    def __str__(self) -> str:
        lines = ["", "------ Remote Control ------"]
        for slot, command in enumerate(self.on_commands):
            name = type(command).__name__
            lines.append(f"[slot {slot}] {name}    {name}")
        return "\n".join(lines) + "\n"