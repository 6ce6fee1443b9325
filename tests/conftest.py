import pytest

from orrery.catalog import ElementCatalog
from orrery.elements import KeplerianElements


def _make_elements(**overrides):
    values = {name: 0.0 for name in KeplerianElements.field_names()}
    values["a_au"] = 1.0
    values.update(overrides)
    return KeplerianElements(**values)


@pytest.fixture
def make_elements():
    return _make_elements


@pytest.fixture
def catalog():
    return ElementCatalog.load()


@pytest.fixture
def circular_elements():
    # 36000 deg per century: one revolution every 365.25 days
    return _make_elements(a_au=1.0, e=0.0, L_deg=30.0, dL_deg=36000.0)
