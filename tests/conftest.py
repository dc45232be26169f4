import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from rental_agency import create_app
from rental_agency.models.customer import Customer
from rental_agency.models.vehicle import Car, Motorcycle, Truck
from rental_agency.services.agency import RentalAgency


@pytest.fixture
def customer():
    return Customer("John Doe", "CUST001")


@pytest.fixture
def agency():
    """
    Sample agency with one vehicle of each kind, in this order:
    C001 Sedan, M001 Sport Bike, T001 Cargo Truck.
    """
    ag = RentalAgency()
    ag.add_vehicle(Car("C001", "Sedan", 50, True))
    ag.add_vehicle(Motorcycle("M001", "Sport Bike", 30, True))
    ag.add_vehicle(Truck("T001", "Cargo Truck", 80, 5))
    return ag


@pytest.fixture
def app():
    app = create_app()
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def runner(app):
    """Flask CLI runner for the registered agency commands."""
    return app.test_cli_runner()
