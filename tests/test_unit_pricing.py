"""
Cost formulas per vehicle kind. Costs are plain floats with no rounding,
so the expected values are written out as the formula itself.
"""

import pytest

from rental_agency.models.vehicle import Car, Motorcycle, Truck


def test_car_with_ac_three_days():
    car = Car("C001", "Sedan", 50, True)
    assert car.calculate_rental_cost(3) == 180.0


def test_motorcycle_two_days():
    bike = Motorcycle("M001", "Sport Bike", 30, True)
    assert bike.calculate_rental_cost(2) == 60.0


def test_truck_three_days():
    truck = Truck("T001", "Cargo Truck", 80, 5)
    assert truck.calculate_rental_cost(3) == 315.0


@pytest.mark.parametrize("rate, ac, days", [
    (50, True, 1),
    (50, False, 1),
    (42.5, True, 7),
    (42.5, False, 7),
    (19.99, True, 30),
])
def test_car_formula(rate, ac, days):
    car = Car("C9", "Hatch", rate, ac)
    expected = rate * days + (10 * days if ac else 0)
    assert car.calculate_rental_cost(days) == expected


def test_car_without_ac_pays_base_only():
    assert Car("C2", "Sedan", 50).calculate_rental_cost(3) == 150.0


@pytest.mark.parametrize("helmet", [True, False])
def test_motorcycle_helmet_does_not_change_price(helmet):
    bike = Motorcycle("M2", "Scooter", 25.5, helmet)
    assert bike.calculate_rental_cost(4) == 25.5 * 4


@pytest.mark.parametrize("rate, capacity, days", [
    (80, 5, 1),
    (80, 0.5, 10),
    (120.25, 12, 3),
])
def test_truck_formula(rate, capacity, days):
    truck = Truck("T9", "Box Truck", rate, capacity)
    assert truck.calculate_rental_cost(days) == rate * days + capacity * 5 * days


def test_non_positive_days_do_not_raise():
    """Callers validate the day count; the formulas just compute."""
    assert Car("C1", "Sedan", 50, True).calculate_rental_cost(0) == 0
    assert Motorcycle("M1", "Sport Bike", 30).calculate_rental_cost(-1) < 0
    assert Truck("T1", "Cargo Truck", 80, 5).calculate_rental_cost(0) == 0


def test_cost_is_pure(agency):
    """Quoting does not touch availability."""
    car = agency.fleet[0]
    car.calculate_rental_cost(3)
    car.calculate_rental_cost(3)
    assert car.is_available_for_rental()
