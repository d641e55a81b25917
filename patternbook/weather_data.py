"""A weather station subject that pushes new measurements to observers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Something told when the weather data changes."""

    @abstractmethod
    def update(self) -> None: ...


class WeatherData:
    """Holds the latest measurements and notifies registered observers."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self.temp = 0.0
        self.humidity = 0.0
        self.pressure = 0.0

    @property
    def observers(self) -> tuple[Observer, ...]:
        """The registered observers, in registration order."""
        return tuple(self._observers)

    def set_measurements(self, temp: float, humidity: float, pressure: float) -> None:
        """Record new measurements and notify every observer."""
        self.temp = temp
        self.humidity = humidity
        self.pressure = pressure
        self._measurements_changed()

    def register_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Stop notifying the observer; unknown observers are ignored."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update()

    def _measurements_changed(self) -> None:
        self.notify_observers()