import math
from numbers import Real

from config import BASE_INSURANCE_RATE, MAX_YEAR, MIN_YEAR, TRUNK_SIZES
from errors import ValidationError


def _check_number(value, name):
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be a finite number, got {value!r}")
    return value


def _check_price(price):
    _check_number(price, "Price")
    if price < 0:
        raise ValidationError(f"Price cannot be negative: {price}")
    return float(price)


def _check_year(year):
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValidationError(f"Year must be a whole number, got {year!r}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}: {year}")
    return year


def _check_text(value, name):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} cannot be empty")
    return value.strip()


def _check_count(value, name, minimum):
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ValidationError(f"{name} must be a whole number >= {minimum}, got {value!r}")
    return value


class Vehicle:
    """Base class for the common vehicle properties"""

    _category = None  # set by each variant

    def __init__(self, make, model, year, price):
        """Validate and store the common vehicle attributes"""
        self.make = _check_text(make, "Make")     # Manufacturer name
        self.model = _check_text(model, "Model")  # Model name
        self.year = _check_year(year)             # Year of manufacture
        self._price = _check_price(price)         # Price in dollars

    @property
    def category(self):
        return self._category

    @property
    def price(self):
        return self._price

    def set_price(self, price):
        """Replace the price; the old price is kept if the new one is rejected

        The catalog's price tree is not told about the change. Use
        ``Catalog.apply_discount`` for a car that is already cataloged.
        """
        self._price = _check_price(price)

    def apply_discount(self, pct):
        """Reduce the price by ``pct`` percent (0-100); see ``set_price`` about cataloged cars"""
        _check_number(pct, "Discount")
        if not 0 <= pct <= 100:
            raise ValidationError(f"Discount must be between 0 and 100 percent: {pct}")
        self._price = self._price * (1 - pct / 100)

    def get_basic_info(self):
        """Return the common fields as a dictionary"""
        return {
            'make': self.make,
            'model': self.model,
            'year': self.year,
            'price': self.price,
            'category': self.category,
        }

    def get_extra_info(self):
        return {}

    def info(self):
        """Return all vehicle data as a dictionary"""
        data = self.get_basic_info()
        data.update(self.get_extra_info())
        return data

    def details(self):
        """Multi-line description used by the console"""
        lines = [
            f"{self.year} {self.make} {self.model}",
            f"Category: {self.category}",
            f"Price: ${self.price:,.2f}",
        ]
        for key, value in self.get_extra_info().items():
            label = key.replace("_", " ").capitalize()
            if isinstance(value, bool):
                value = "Yes" if value else "No"
            lines.append(f"{label}: {value}")
        lines.append(f"Insurance estimate: ${insurance_estimate(self):,.2f}/year")
        return "\n".join(lines)

    def __repr__(self):
        return f"{type(self).__name__}({self.make!r}, {self.model!r}, {self.year}, {self.price!r})"


class Sedan(Vehicle):
    _category = "Sedan"

    def __init__(self, make, model, year, price, seating_capacity=5,
                 has_navigation=False, has_sunroof=False, trunk_size="Medium"):
        super().__init__(make, model, year, price)
        self.seating_capacity = _check_count(seating_capacity, "Seating capacity", 1)
        self.has_navigation = bool(has_navigation)
        self.has_sunroof = bool(has_sunroof)
        if trunk_size not in TRUNK_SIZES:
            raise ValidationError(f"Trunk size must be one of {', '.join(TRUNK_SIZES)}: {trunk_size!r}")
        self.trunk_size = trunk_size

    def get_extra_info(self):
        return {
            'seating_capacity': self.seating_capacity,
            'has_navigation': self.has_navigation,
            'has_sunroof': self.has_sunroof,
            'trunk_size': self.trunk_size,
        }


class SUV(Vehicle):
    _category = "SUV"

    def __init__(self, make, model, year, price, seating_capacity=5,
                 has_navigation=False, is_awd=False, cargo_space=0):
        super().__init__(make, model, year, price)
        self.seating_capacity = _check_count(seating_capacity, "Seating capacity", 1)
        self.has_navigation = bool(has_navigation)
        self.is_awd = bool(is_awd)
        self.cargo_space = _check_count(cargo_space, "Cargo space", 0)  # cubic feet

    def get_extra_info(self):
        return {
            'seating_capacity': self.seating_capacity,
            'has_navigation': self.has_navigation,
            'is_awd': self.is_awd,
            'cargo_space': self.cargo_space,
        }


class Truck(Vehicle):
    _category = "Truck"

    def __init__(self, make, model, year, price, payload_capacity=1.0,
                 transmission_type="Automatic", axle_count=2, has_sleeper=False):
        super().__init__(make, model, year, price)
        _check_number(payload_capacity, "Payload capacity")
        if payload_capacity < 0:
            raise ValidationError(f"Payload capacity cannot be negative: {payload_capacity}")
        self.payload_capacity = float(payload_capacity)  # tons
        self.transmission_type = _check_text(transmission_type, "Transmission type")
        self.axle_count = _check_count(axle_count, "Axle count", 2)
        self.has_sleeper = bool(has_sleeper)

    def get_extra_info(self):
        return {
            'payload_capacity': self.payload_capacity,
            'transmission_type': self.transmission_type,
            'axle_count': self.axle_count,
            'has_sleeper': self.has_sleeper,
        }


VARIANTS = {cls._category: cls for cls in (Sedan, SUV, Truck)}


# --------- Insurance ---------
def _age_factor(year):
    age = MAX_YEAR - year
    if age < 3:
        return 1.10
    if age > 10:
        return 0.85
    return 1.0


def _sedan_adjustment(car):
    factor = 1.0
    if car.has_sunroof:
        factor += 0.03
    if car.has_navigation:
        factor += 0.02
    factor += 0.02 * max(car.seating_capacity - 5, 0)
    return factor


def _suv_adjustment(car):
    factor = 1.0
    if car.is_awd:
        factor -= 0.05
    if car.has_navigation:
        factor += 0.02
    factor += 0.01 * (car.cargo_space // 10)
    return factor


def _truck_adjustment(car):
    factor = 1.0 + 0.04 * car.payload_capacity
    factor += 0.03 * max(car.axle_count - 2, 0)
    if car.has_sleeper:
        factor += 0.06
    return factor


_ADJUSTMENTS = {
    "Sedan": _sedan_adjustment,
    "SUV": _suv_adjustment,
    "Truck": _truck_adjustment,
}


def insurance_estimate(vehicle):
    """Yearly insurance estimate derived only from the vehicle's fields"""
    try:
        adjust = _ADJUSTMENTS[vehicle.category]
    except (AttributeError, KeyError):
        raise ValidationError(f"Unknown vehicle type: {vehicle!r}") from None
    base = vehicle.price * BASE_INSURANCE_RATE * _age_factor(vehicle.year)
    return round(base * adjust(vehicle), 2)
