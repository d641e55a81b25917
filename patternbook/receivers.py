"""Household devices that remote-control commands act on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class DoorStatus(IntEnum):
    DOWN = 0
    UP = 1
    STOP = 2


@dataclass
class Light:
    """A light that can be switched on and off."""

    status: bool = False

    def on(self) -> None:
        self.status = True
        print("light on")

    def off(self) -> None:
        self.status = False
        print("light off")


@dataclass
class GarageDoor:
    """A garage door with its own light."""

    door_status: DoorStatus = DoorStatus.DOWN
    light: Light = field(default_factory=Light)

    def down(self) -> None:
        self.door_status = DoorStatus.DOWN

    def up(self) -> None:
        self.door_status = DoorStatus.UP

    def stop(self) -> None:
        self.door_status = DoorStatus.STOP

    def light_on(self) -> None:
        self.light.on()

    def light_off(self) -> None:
        self.light.off()


@dataclass
class Stereo:
    """A stereo that plays CDs, DVDs or the radio at some volume."""

    volume: int = 0
    powered: bool = False
    source: str | None = None

    def on(self) -> None:
        self.powered = True
        print("stereo on")

    def off(self) -> None:
        self.powered = False
        print("stereo off")

    def play_cd(self, name: str) -> None:
        self.source = f"CD <{name}>"
        print(f"stereo play CD <{name}>")

    def play_dvd(self, name: str) -> None:
        self.source = f"DVD <{name}>"
        print(f"stereo play DVD <{name}>")

    def play_radio(self) -> None:
        self.source = "radio"
        print("stereo plays radio")