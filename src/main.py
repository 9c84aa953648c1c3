from catalog import Catalog
from config import load_settings
from managing_system import ManagingSystem


def main():
    """Main application entry point"""
    settings = load_settings()
    catalog = Catalog()                 # One catalog for the whole session
    system = ManagingSystem(catalog, currency=settings["currency"])

    if settings["seed"]:
        system.load_samples()           # Demo cars shown at start-up

    system.run()


# Ensure main() only runs if this script is executed directly
if __name__ == "__main__":
    main()
