import matplotlib.pyplot as plt

from config import CATEGORIES, SAMPLE_CARS, TRUNK_SIZES
from errors import CatalogError, ValidationError
from report import category_chart, category_summary, format_price, render_table
from vehicle import VARIANTS

BORDER = "=" * 50


def ask_int(prompt, label):
    """Read a whole number or fail with the field name"""
    raw = input(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Invalid {label} input.") from None


def ask_float(prompt, label):
    raw = input(prompt).strip().lstrip("$").replace(",", "")
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(f"Invalid {label} input.") from None


def ask_yes_no(prompt):
    return input(prompt).strip().lower() in ("y", "yes")


def ask_choice(prompt, options, label):
    """Pick one of ``options`` by its 1-based number"""
    for i, option in enumerate(options, start=1):
        print(f"{i}. {option}")
    number = ask_int(prompt, label)
    if not 1 <= number <= len(options):
        raise ValidationError(f"Invalid {label} selection.")
    return options[number - 1]


class ManagingSystem:
    """Console front end for a car catalog"""

    def __init__(self, catalog, currency="$"):
        self.catalog = catalog
        self.currency = currency
        self.actions = {
            "1": self.add_car,
            "2": self.view_all_cars,
            "3": self.view_by_category,
            "4": self.view_price_low_to_high,
            "5": self.view_price_high_to_low,
            "6": self.find_car,
            "7": self.discount_car,
            "8": self.remove_car,
            "9": self.view_summary,
            "10": self.show_chart,
        }

    def load_samples(self):
        """Add the demo cars shown at start-up"""
        for sample in SAMPLE_CARS:
            data = dict(sample)
            cls = VARIANTS[data.pop("category")]
            self.catalog.add(cls(**data))

    def display_menu(self):
        """Display main system menu"""
        print("\n" + BORDER)
        print("Car Catalog System")
        print("1. Add a new car")
        print("2. Display all cars")
        print("3. Display cars by category")
        print("4. Display cars sorted by price (low to high)")
        print("5. Display cars sorted by price (high to low)")
        print("6. Find a car by make and model")
        print("7. Apply a discount")
        print("8. Remove a car from catalog")
        print("9. Summary by category")
        print("10. Chart of cars by category")
        print("0. Exit")
        print(BORDER)

    def run(self):
        """Menu loop; returns when the user exits or input runs out"""
        while True:
            self.display_menu()
            try:
                choice = input("Enter your choice: ").strip()
            except EOFError:
                print("\nExiting system...")
                return
            if choice == "0":
                print("Thank you for using the Car Catalog. Bye!")
                return
            action = self.actions.get(choice)
            if action is None:
                print("Invalid choice! Please try again.")
                continue
            try:
                action()
            except CatalogError as e:
                print(f"Error: {e}")

    def add_car(self):
        """Collect a car from the user and add it to the catalog"""
        category = ask_choice("Select car type: ", CATEGORIES, "car type")
        make = input("Enter make: ")
        model = input("Enter model: ")
        year = ask_int("Enter year: ", "year")
        price = ask_float("Enter price: $", "price")

        if category == "Sedan":
            extra = {
                "seating_capacity": ask_int("Enter seating capacity: ", "seating capacity"),
                "has_navigation": ask_yes_no("Has navigation system? (y/n): "),
                "has_sunroof": ask_yes_no("Has sunroof? (y/n): "),
                "trunk_size": input(f"Enter trunk size ({'/'.join(TRUNK_SIZES)}): ").strip().capitalize(),
            }
        elif category == "SUV":
            extra = {
                "seating_capacity": ask_int("Enter seating capacity: ", "seating capacity"),
                "has_navigation": ask_yes_no("Has navigation system? (y/n): "),
                "is_awd": ask_yes_no("Has all-wheel drive? (y/n): "),
                "cargo_space": ask_int("Enter cargo space (cubic feet): ", "cargo space"),
            }
        else:
            extra = {
                "payload_capacity": ask_float("Enter payload capacity (tons): ", "payload capacity"),
                "transmission_type": input("Enter transmission type: "),
                "axle_count": ask_int("Enter axle count: ", "axle count"),
                "has_sleeper": ask_yes_no("Has sleeper cabin? (y/n): "),
            }

        car = VARIANTS[category](make, model, year, price, **extra)
        self.catalog.add(car)
        print("Car added successfully!")

    def _print_cars(self, title, cars):
        print(f"\n===== {title} =====")
        print(render_table(cars, self.currency))

    def view_all_cars(self):
        self._print_cars("All Cars in Catalog", self.catalog.list_all())

    def view_by_category(self):
        category = ask_choice("Select category to display: ", CATEGORIES, "category")
        cars = self.catalog.list_by_category(category)
        if not cars:
            print(f"No {category}s found in the catalog.")
            return
        self._print_cars(f"{category}s in Catalog", cars)

    def view_price_low_to_high(self):
        self._print_cars("Cars Sorted by Price (Low to High)", self.catalog.list_by_price_ascending())

    def view_price_high_to_low(self):
        self._print_cars("Cars Sorted by Price (High to Low)", self.catalog.list_by_price_descending())

    def find_car(self):
        make = input("Enter make: ").strip()
        model = input("Enter model: ").strip()
        car = self.catalog.find_by_make_model(make, model)
        if car is None:
            print("Car not found.")
            return
        print("\n===== Car Found =====")
        print(car.details())

    def discount_car(self):
        make = input("Enter make: ").strip()
        model = input("Enter model: ").strip()
        pct = ask_float("Enter discount (%): ", "discount")
        car = self.catalog.apply_discount(make, model, pct)
        print(f"New price for {car.make} {car.model}: {format_price(car.price, self.currency)}")

    def remove_car(self):
        make = input("Enter make: ").strip()
        model = input("Enter model: ").strip()
        if self.catalog.remove(make, model):
            print("Car removed successfully!")
        else:
            print("Car not found.")

    def view_summary(self):
        cars = self.catalog.list_all()
        if not cars:
            print("No cars in the catalog.")
            return
        summary = category_summary(cars)
        print("\n===== Summary by Category =====")
        print(summary.to_string(float_format=lambda p: format_price(p, self.currency)))
        print(f"Price index: {self.catalog.tree_size()} cars, {self.catalog.index_height()} levels")

    def show_chart(self):
        fig = category_chart(self.catalog.list_all())
        plt.show()
        plt.close(fig)
