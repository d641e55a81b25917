"""Singletons: a plain single instance and a chocolate boiler held three ways."""

from __future__ import annotations

import threading


class Single:
    """The one object handed out by :func:`get_singleton_instance`."""


_single_lock = threading.Lock()
_single_instance: Single | None = None


def get_singleton_instance() -> Single:
    """Return the shared :class:`Single`, creating it on first use."""
    global _single_instance
    if _single_instance is None:
        with _single_lock:
            if _single_instance is None:
                print("Creating single instance now.")
                instance = Single()
                _single_instance = instance
                return instance
    print("Single instance already created.")
    return _single_instance


class Boiler:
    """A chocolate boiler that is filled, boiled and drained in that order."""

    def __init__(self, empty: bool = True, boiled: bool = False) -> None:
        self._empty = empty
        self._boiled = boiled

    def fill(self) -> None:
        """Fill the boiler with a milk and chocolate mixture if it is empty."""
        if self.is_empty():
            self._empty = False
            self._boiled = False

    def drain(self) -> None:
        """Drain the boiled contents; does nothing unless full and boiled."""
        if not self.is_empty() and self.is_boiled():
            self._empty = True

    def boil(self) -> None:
        """Bring the contents to a boil if full and not yet boiled."""
        if not self.is_empty() and not self.is_boiled():
            self._boiled = True

    def is_empty(self) -> bool:
        return self._empty

    def is_boiled(self) -> bool:
        return self._boiled


_dcl_lock = threading.Lock()
_boiler_double_checked: Boiler | None = None


def get_boiler_double_checked() -> Boiler:
    """Return the boiler created lazily under a double-checked lock."""
    global _boiler_double_checked
    instance = _boiler_double_checked
    if instance is None:
        with _dcl_lock:
            instance = _boiler_double_checked
            if instance is None:
                instance = Boiler()
                _boiler_double_checked = instance
    return instance


# Created at import time with every flag cleared.
_boiler_eager = Boiler(empty=False, boiled=False)


def get_boiler_eager() -> Boiler:
    """Return the boiler created when the module was loaded."""
    return _boiler_eager


_lazy_lock = threading.Lock()
_boiler_lazy: Boiler | None = None


def get_boiler_lazy() -> Boiler:
    """Return the boiler created on first call, always taking the lock."""
    global _boiler_lazy
    with _lazy_lock:
        if _boiler_lazy is None:
            _boiler_lazy = Boiler(empty=False, boiled=False)
        return _boiler_lazy