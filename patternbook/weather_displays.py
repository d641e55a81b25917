"""Displays that observe a weather station and print what they see."""

from __future__ import annotations

import math

from patternbook.weather_data import Observer, WeatherData


def _num(value: float) -> str:
    """Format a number the way the station's displays show it."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def _show(*parts: object) -> str:
    line = " ".join(_num(p) if isinstance(p, (int, float)) else str(p) for p in parts)
    print(line)
    return line


class _MirrorDisplay(Observer):
    """A display that copies the latest measurements and shows them."""

    def __init__(self, weather_data: WeatherData) -> None:
        self.weather_data = weather_data
        self.temp = 0.0
        self.humidity = 0.0
        self.pressure = 0.0
        weather_data.register_observer(self)

    def update(self) -> None:
        self.temp = self.weather_data.temp
        self.humidity = self.weather_data.humidity
        self.pressure = self.weather_data.pressure
        self.display()

    def display(self) -> str:
        raise NotImplementedError


class CurrentConditionsDisplay(_MirrorDisplay):
    def update(self) -> None:
        super().update()

    def display(self) -> str:
        """Print and return the current conditions."""
        return _show("Current conditions:", self.temp, "F degrees and", self.humidity, "% humiditySum")


class StatisticsDisplay(Observer):
    """Tracks the average, maximum and minimum temperature seen."""

    def __init__(self, weather_data: WeatherData) -> None:
        self.weather_data = weather_data
        self.temp_sum = 0.0
        self.humidity_sum = 0.0
        self.pressure_sum = 0.0
        self.days = 0
        self.max_temp = 0.0
        self.min_temp = 9999.0
        weather_data.register_observer(self)

    def update(self) -> None:
        data = self.weather_data
        self.temp_sum += data.temp
        self.humidity_sum += data.humidity
        self.pressure_sum += data.pressure
        self.days += 1
        if data.temp > self.max_temp:
            self.max_temp = data.temp
        if data.temp < self.min_temp:
            self.min_temp = data.temp
        self.display()

    def display(self) -> str:
        """Print and return the average, maximum and minimum temperature."""
        average = self.temp_sum / self.days if self.days else math.nan
        return _show("Avg/Max/Min temperature:", average, self.max_temp, self.min_temp)


class ForecastDisplay(_MirrorDisplay):
    def update(self) -> None:
        super().update()

    def display(self) -> str:
        return _show(
            "Forecast:", self.temp, "F degrees and", self.humidity,
            "% humiditySum and", self.pressure, "kPa pressureSum",
        )


class ThirdPartyDisplay(_MirrorDisplay):
    def update(self) -> None:
        super().update()

    def display(self) -> str:
        return _show(
            "ThirdParty:", self.temp, "F degrees and", self.humidity,
            "% humiditySum and", self.pressure, "kPa pressureSum",
        )


class HeatIndexDisplay(_MirrorDisplay):
    def update(self) -> None:
        super().update()

    def display(self) -> str:
        return _show("Heat index is", self.heat_index())

    def heat_index(self) -> float:
        """Compute the heat index from the last temperature and humidity."""
        t = self.temp
        rh = self.humidity
        first = 16.923 + 1.85212e-1 * t + 5.37941 * rh
        quad = -1.00254e-1 * t * rh + 9.41695e-3 + t * t + 7.28898e-3 * rh * rh
        cubic = (
            3.45372e-4 * t * t * rh
            - 8.14971e-4 * t * rh * rh
            - 3.8646e-5 * t * t * t
            + 2.91583e-5 * rh * rh * rh
        )
        quar = 1.02102e-5 * t * t * rh * rh
        return first + quad + cubic + quar