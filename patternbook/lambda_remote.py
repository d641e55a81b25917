"""A remote control whose buttons hold plain callables, with undo."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

Action = Callable[[], None]


class RemoteControl:
    """Seven on/off button pairs; undo runs the opposite of the last press."""

    SLOTS = 7

    def __init__(self) -> None:
        self.on_commands: list[Optional[Action]] = [None] * self.SLOTS
        self.off_commands: list[Optional[Action]] = [None] * self.SLOTS
        self.undo_command: Optional[Action] = None
        self._pressed = False

    def _check(self, slot: int) -> None:
        if not 0 <= slot < self.SLOTS:
            raise IndexError(f"slot {slot} out of range 0..{self.SLOTS - 1}")

    @staticmethod
    def _run(action: Optional[Action]) -> None:
        if action is not None:
            action()

    def set_command(self, slot: int, on_command: Action, off_command: Action) -> None:
        self._check(slot)
        self.on_commands[slot] = on_command
        self.off_commands[slot] = off_command

    def on_button_was_pressed(self, slot: int) -> None:
        self._check(slot)
        self._run(self.on_commands[slot])
        self.undo_command = self.off_commands[slot]
        self._pressed = True

    def off_button_was_pressed(self, slot: int) -> None:
        self._check(slot)
        self._run(self.off_commands[slot])
        self.undo_command = self.on_commands[slot]
        self._pressed = True

    def undo(self) -> None:
        """Reverse the last button press."""
        if not self._pressed:
            raise RuntimeError("no button has been pressed yet")
        self._run(self.undo_command)