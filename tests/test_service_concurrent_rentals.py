"""
Several threads racing for the same model: each vehicle is handed out to
exactly one of them, everyone else gets VehicleUnavailableError.
"""

import threading

from rental_agency.exceptions import VehicleAlreadyRentedError, VehicleUnavailableError
from rental_agency.models.customer import Customer
from rental_agency.models.transaction import RentalTransaction
from rental_agency.models.vehicle import Car
from rental_agency.services.agency import RentalAgency


def _race(n_threads, target):
    barrier = threading.Barrier(n_threads)
    results = []
    lock = threading.Lock()

    def worker(i):
        barrier.wait()
        outcome = target(i)
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return results


def test_agency_hands_each_vehicle_out_once():
    ag = RentalAgency([Car(f"C{i}", "Sedan", 50) for i in range(3)])

    def rent(i):
        try:
            return ag.rent_vehicle(Customer(f"Renter {i}", f"CUST{i:03d}"), "Sedan", 2)
        except VehicleUnavailableError:
            return None

    results = _race(10, rent)
    won = [t for t in results if t is not None]
    assert len(won) == 3
    assert sorted(t.vehicle.vehicle_id for t in won) == ["C0", "C1", "C2"]
    assert len(ag.transactions) == 3


def test_direct_transactions_on_one_vehicle_only_one_wins():
    car = Car("C001", "Sedan", 50)

    def rent(i):
        try:
            return RentalTransaction(Customer(f"Renter {i}", f"CUST{i:03d}"), car, 1)
        except VehicleAlreadyRentedError:
            return None

    results = _race(8, rent)
    assert sum(1 for t in results if t is not None) == 1
    assert not car.is_available_for_rental()
