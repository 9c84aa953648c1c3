'''
Exceptions raised by the car catalog.
'''


class CatalogError(Exception):
    """Base class for every catalog failure"""


class ValidationError(CatalogError, ValueError):
    """A value was rejected (price, year, discount, variant field, category)"""


class NotFoundError(CatalogError, LookupError):
    """No car in the catalog matches the requested make and model"""

    def __init__(self, make, model):
        super().__init__(f"No car found for {make} {model}")
        self.make = make
        self.model = model
