"""Shared test fixtures: fresh catalogs and the three start-up sample cars."""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from catalog import Catalog  # noqa: E402
from vehicle import SUV, Sedan, Truck  # noqa: E402


@pytest.fixture()
def catalog():
    """An empty catalog for each test."""
    return Catalog()


@pytest.fixture()
def camry():
    return Sedan("Toyota", "Camry", 2022, 25000)


@pytest.fixture()
def crv():
    return SUV("Honda", "CR-V", 2023, 32000)


@pytest.fixture()
def f150():
    return Truck("Ford", "F-150", 2021, 40000)


@pytest.fixture()
def seeded(catalog, camry, crv, f150):
    """Catalog holding the Camry, CR-V and F-150 samples."""
    for car in (camry, crv, f150):
        catalog.add(car)
    return catalog
