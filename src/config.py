import os

# --------- Constants ---------
MIN_YEAR = 1886    # first production automobile
MAX_YEAR = 2025

# Listing order of the catalog: Sedan < SUV < Truck
CATEGORIES = ("Sedan", "SUV", "Truck")
TRUNK_SIZES = ("Small", "Medium", "Large")

BASE_INSURANCE_RATE = 0.015  # yearly premium as a share of the price

# Cars loaded when the console starts
SAMPLE_CARS = [
    {"category": "Sedan", "make": "Toyota", "model": "Camry", "year": 2022, "price": 25000},
    {"category": "SUV", "make": "Honda", "model": "CR-V", "year": 2023, "price": 32000},
    {"category": "Truck", "make": "Ford", "model": "F-150", "year": 2021, "price": 40000},
]

FALSE_VALUES = {"0", "false", "no", "off"}


def category_rank(category):
    """Position of a category in the listing order"""
    return CATEGORIES.index(category)


def load_settings(environ=None):
    """Read console settings from the environment"""
    env = os.environ if environ is None else environ
    return {
        "seed": env.get("CAR_CATALOG_SEED", "1").strip().lower() not in FALSE_VALUES,
        "currency": env.get("CAR_CATALOG_CURRENCY", "$"),
    }
