"""Tests for the console menu, driven by scripted input."""

import pytest

import main as entry
from catalog import Catalog
from managing_system import ManagingSystem


def feed(monkeypatch, *answers):
    """Replace input() with a script; running out of answers raises EOFError."""
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture()
def system(seeded):
    return ManagingSystem(seeded)


class TestMenu:
    def test_exit(self, system, monkeypatch, capsys):
        feed(monkeypatch, "0")
        system.run()
        assert "Bye!" in capsys.readouterr().out

    def test_invalid_choice(self, system, monkeypatch, capsys):
        feed(monkeypatch, "42", "0")
        system.run()
        assert "Invalid choice" in capsys.readouterr().out

    def test_end_of_input_stops_loop(self, system, monkeypatch, capsys):
        feed(monkeypatch)
        system.run()
        assert "Exiting system" in capsys.readouterr().out

    def test_display_all(self, system, monkeypatch, capsys):
        feed(monkeypatch, "2", "0")
        system.run()
        out = capsys.readouterr().out
        assert out.index("Camry") < out.index("CR-V") < out.index("F-150")


class TestAddCar:
    def test_add_sedan(self, system, monkeypatch, capsys):
        feed(monkeypatch, "1", "1", "Honda", "Civic", "2020", "21000",
             "5", "y", "n", "small", "0")
        system.run()
        car = system.catalog.find_by_make_model("Honda", "Civic")
        assert car is not None
        assert car.has_navigation and not car.has_sunroof
        assert car.trunk_size == "Small"
        assert "Car added successfully!" in capsys.readouterr().out

    def test_add_truck(self, system, monkeypatch):
        feed(monkeypatch, "1", "3", "Ram", "1500", "2022", "$45,000",
             "1.5", "Manual", "2", "y", "0")
        system.run()
        car = system.catalog.find_by_make_model("Ram", "1500")
        assert car.price == 45000
        assert car.payload_capacity == 1.5
        assert car.has_sleeper

    def test_non_finite_price_reports_error(self, system, monkeypatch, capsys):
        feed(monkeypatch, "1", "1", "Honda", "Civic", "2020", "nan",
             "5", "n", "n", "Medium", "0")
        system.run()
        assert "Error: Price must be a finite number" in capsys.readouterr().out
        assert system.catalog.find_by_make_model("Honda", "Civic") is None

    def test_bad_year_reports_error(self, system, monkeypatch, capsys):
        feed(monkeypatch, "1", "2", "Kia", "Sorento", "soon", "0")
        system.run()
        assert "Error: Invalid year input." in capsys.readouterr().out
        assert len(system.catalog) == 3

    def test_year_out_of_range(self, system, monkeypatch, capsys):
        feed(monkeypatch, "1", "2", "Kia", "Sorento", "1800", "30000",
             "7", "n", "y", "40", "0")
        system.run()
        assert "Error: Year must be between" in capsys.readouterr().out
        assert system.catalog.find_by_make_model("Kia", "Sorento") is None

    def test_bad_type_selection(self, system, monkeypatch, capsys):
        feed(monkeypatch, "1", "9", "0")
        system.run()
        assert "Error: Invalid car type selection." in capsys.readouterr().out


class TestOtherActions:
    def test_find(self, system, monkeypatch, capsys):
        feed(monkeypatch, "6", "Honda", "CR-V", "6", "Honda", "Pilot", "0")
        system.run()
        out = capsys.readouterr().out
        assert "Car Found" in out
        assert "2023 Honda CR-V" in out
        assert "Car not found." in out

    def test_discount(self, system, monkeypatch, capsys):
        feed(monkeypatch, "7", "Ford", "F-150", "25", "0")
        system.run()
        assert "New price for Ford F-150: $30,000" in capsys.readouterr().out

    def test_discount_missing(self, system, monkeypatch, capsys):
        feed(monkeypatch, "7", "Ford", "Ranger", "25", "0")
        system.run()
        assert "Error: No car found for Ford Ranger" in capsys.readouterr().out

    def test_remove(self, system, monkeypatch, capsys):
        feed(monkeypatch, "8", "Honda", "CR-V", "8", "Honda", "CR-V", "0")
        system.run()
        out = capsys.readouterr().out
        assert "Car removed successfully!" in out
        assert "Car not found." in out
        assert len(system.catalog) == 2

    def test_price_views(self, system, monkeypatch, capsys):
        feed(monkeypatch, "5", "0")
        system.run()
        out = capsys.readouterr().out
        assert out.index("F-150") < out.index("CR-V") < out.index("Camry")

    def test_category_view_empty(self, monkeypatch, capsys):
        system = ManagingSystem(Catalog())
        feed(monkeypatch, "3", "2", "0")
        system.run()
        assert "No SUVs found in the catalog." in capsys.readouterr().out

    def test_summary(self, system, monkeypatch, capsys):
        feed(monkeypatch, "9", "0")
        system.run()
        out = capsys.readouterr().out
        assert "Summary by Category" in out
        assert "$32,000" in out
        assert "Price index: 3 cars, 3 levels" in out

    def test_chart(self, system, monkeypatch):
        shown = []
        monkeypatch.setattr("managing_system.plt.show", lambda: shown.append(True))
        feed(monkeypatch, "10", "0")
        system.run()
        assert shown == [True]


class TestEntryPoint:
    def test_seeds_samples(self, monkeypatch, capsys):
        monkeypatch.delenv("CAR_CATALOG_SEED", raising=False)
        feed(monkeypatch, "2", "0")
        entry.main()
        out = capsys.readouterr().out
        assert "Camry" in out and "F-150" in out

    def test_seeding_disabled(self, monkeypatch, capsys):
        monkeypatch.setenv("CAR_CATALOG_SEED", "off")
        monkeypatch.setenv("CAR_CATALOG_CURRENCY", "€")
        feed(monkeypatch, "2", "0")
        entry.main()
        assert "No cars in the catalog." in capsys.readouterr().out
