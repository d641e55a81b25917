import pytest

from patternbook.weather_data import Observer, WeatherData


class Recorder(Observer):
    def __init__(self, data: WeatherData, log: list) -> None:
        self.data = data
        self.log = log

    def update(self) -> None:
        self.log.append((self, self.data.temp, self.data.humidity, self.data.pressure))


def test_set_measurements_stores_values():
    data = WeatherData()
    data.set_measurements(80, 65, 30.4)
    assert (data.temp, data.humidity, data.pressure) == (80, 65, 30.4)


def test_observers_notified_in_registration_order():
    data = WeatherData()
    log: list = []
    first = Recorder(data, log)
    second = Recorder(data, log)
    data.register_observer(first)
    data.register_observer(second)
    data.set_measurements(82, 72, 29.2)
    assert log == [(first, 82, 72, 29.2), (second, 82, 72, 29.2)]


def test_remove_observer_stops_notifications():
    data = WeatherData()
    log: list = []
    first = Recorder(data, log)
    second = Recorder(data, log)
    data.register_observer(first)
    data.register_observer(second)
    data.remove_observer(first)
    data.set_measurements(78, 90, 29.2)
    assert log == [(second, 78, 90, 29.2)]
    assert data.observers == (second,)


def test_remove_unknown_observer_leaves_list_unchanged():
    data = WeatherData()
    log: list = []
    registered = Recorder(data, log)
    data.register_observer(registered)
    data.remove_observer(Recorder(data, log))
    assert data.observers == (registered,)


def test_notify_observers_without_change():
    data = WeatherData()
    log: list = []
    recorder = Recorder(data, log)
    data.register_observer(recorder)
    data.notify_observers()
    assert log == [(recorder, 0.0, 0.0, 0.0)]


def test_observer_is_abstract():
    with pytest.raises(TypeError):
        Observer()