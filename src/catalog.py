from car_list import CarList
from config import CATEGORIES
from errors import NotFoundError, ValidationError
from price_tree import PriceTree
from vehicle import Vehicle


class Catalog:
    """Keeps the category list and the price tree in step

    The list decides membership: a car is in the catalog when the list holds
    it. The tree indexes the same cars by price and is rebuilt from the
    surviving cars, in the order they were added, whenever a car leaves or a
    price changes.
    """

    def __init__(self):
        self.cars = CarList()        # category order, owns the cars
        self.price_index = PriceTree()
        self._arrivals = []          # every cataloged car, in the order added

    def add(self, car):
        """Add a car to both the list and the price tree"""
        if not isinstance(car, Vehicle) or car.category not in CATEGORIES:
            raise ValidationError(f"Only Sedan, SUV or Truck records can be cataloged, got {car!r}")
        if car in self.cars:
            raise ValidationError(f"{car!r} is already in the catalog")
        self.cars.insert_by_category(car)
        self.price_index.insert(car)
        self._arrivals.append(car)

    def remove(self, make, model):
        """Remove the first car matching make and model; False if none does"""
        car = self.cars.find_by_make_model(make, model)
        if car is None:
            return False
        self.cars.remove(car)
        self._arrivals = [item for item in self._arrivals if item is not car]
        self._reindex()
        return True

    def apply_discount(self, make, model, pct):
        """Lower a car's price by pct percent and re-sort the price tree"""
        car = self.cars.find_by_make_model(make, model)
        if car is None:
            raise NotFoundError(make, model)
        car.apply_discount(pct)
        self._reindex()
        return car

    def find_by_make_model(self, make, model):
        return self.cars.find_by_make_model(make, model)

    def list_all(self):
        return list(self.cars)

    def list_by_category(self, category):
        return list(self.cars.in_category(category))

    def list_by_price_ascending(self):
        return list(self.price_index.ascending())

    def list_by_price_descending(self):
        return list(self.price_index.descending())

    def tree_size(self):
        return len(self.price_index)

    def index_height(self):
        """Levels of the price tree; equals the car count for sorted arrivals"""
        return self.price_index.height()

    def _reindex(self):
        self.price_index.rebuild(self._arrivals)

    def __contains__(self, car):
        return car in self.cars

    def __len__(self):
        return len(self.cars)
