"""Shared test fixtures for stateful-checkbox."""

import pandas as pd
import pytest

from stateful_checkbox.controller import SelectionController
from stateful_checkbox.storage.providers import MemoryProvider
from stateful_checkbox.storage.state_store import SelectionStateStore


class FailingProvider:
    """Provider whose operations can be made to raise on demand."""

    def __init__(self):
        self._data = {}
        self.fail_on = set()

    def get(self, key):
        if "get" in self.fail_on:
            raise OSError("disk unavailable")
        return self._data.get(key)

    def set(self, key, value):
        if "set" in self.fail_on:
            raise OSError("quota exceeded")
        self._data[key] = list(value)

    def clear(self, key):
        if "clear" in self.fail_on:
            raise OSError("disk unavailable")
        self._data.pop(key, None)


@pytest.fixture
def memory_provider():
    return MemoryProvider()


@pytest.fixture
def failing_provider():
    return FailingProvider()


@pytest.fixture
def store(memory_provider):
    return SelectionStateStore(memory_provider)


@pytest.fixture
def records_df():
    """Three records with integer ids and mixed-dtype columns."""
    return pd.DataFrame(
        {
            "id": [1, 2, 3],
            "name": ["alpha", "beta", "gamma"],
            "price": [9.5, 20.0, 3.25],
        }
    )


@pytest.fixture
def records_list():
    return [{"id": 1}, {"id": 2}, {"id": 3}]


@pytest.fixture
def controller(store):
    """Controller bound to 'grid1' on field 'id' with no visible records."""
    ctrl = SelectionController(store)
    ctrl.initialize("grid1", "id")
    return ctrl


@pytest.fixture
def notifications(controller):
    """List collecting every 'selection changed' payload after init."""
    received = []
    controller.on_change(received.append)
    return received
