from __future__ import annotations

import threading
from collections import Counter
from typing import List, Optional

from rental_agency.exceptions import (
    InvalidArgumentError,
    VehicleNotFoundError,
    VehicleUnavailableError,
)
from rental_agency.models.customer import Customer
from rental_agency.models.transaction import RentalTransaction
from rental_agency.models.vehicle import Vehicle
from rental_agency.services.common import _lc, norm_type, round2, to_float_safe


class RentalAgency:
    """
    Owns the fleet and the ledger of rentals started through it.

    The fleet is an ordered list: lookups scan it in insertion order, so the
    earliest added match wins. Duplicate vehicle IDs are accepted as-is.
    """

    def __init__(self, vehicles: Optional[List[Vehicle]] = None):
        self.fleet: List[Vehicle] = []
        self.transactions: List[RentalTransaction] = []
        self._rw = threading.RLock()
        for v in vehicles or []:
            self.add_vehicle(v)

    # ---------- Fleet ----------
    def add_vehicle(self, vehicle: Vehicle) -> None:
        """Append a vehicle to the fleet."""
        if not isinstance(vehicle, Vehicle):
            raise InvalidArgumentError("Error: only vehicles can be added to the fleet")
        with self._rw:
            self.fleet.append(vehicle)

    def find_available_vehicle(self, model: str) -> Vehicle:
        """
        Return the first vehicle (insertion order) whose model equals `model`
        exactly and which is available, or raise VehicleUnavailableError.
        """
        with self._rw:
            for v in self.fleet:
                if v.model == model and v.is_available_for_rental():
                    return v
        raise VehicleUnavailableError(f"Error: no available vehicle of model '{model}'")

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        """Return a vehicle by ID or raise VehicleNotFoundError."""
        with self._rw:
            for v in self.fleet:
                if v.vehicle_id == vehicle_id:
                    return v
        raise VehicleNotFoundError(f"Error: vehicle with ID '{vehicle_id}' not found")

    def all_vehicles(self) -> List[Vehicle]:
        with self._rw:
            return list(self.fleet)

    def filter_vehicles(self, vtype=None, model=None, min_rate=None, max_rate=None,
                        available_only: bool = False) -> List[Vehicle]:
        """
        Filter the fleet by type, model and price range, keeping fleet order.
        - type: exact, case-insensitive
        - model: partial, case-insensitive
        - rate bounds: inclusive; invalid bounds are ignored, swapped ones corrected
        """
        res = self.all_vehicles()

        # 1. Type filter
        if vtype:
            vt = norm_type(vtype)
            res = [v for v in res if v.type == vt]

        # 2. Model filter
        if model:
            kw = _lc(model).strip()
            if kw:
                res = [v for v in res if kw in _lc(v.model)]

        # 3. Price range filter
        min_val = to_float_safe(min_rate)
        max_val = to_float_safe(max_rate)
        if (min_val is not None) and (max_val is not None) and (min_val > max_val):
            min_val, max_val = max_val, min_val
        if min_val is not None:
            res = [v for v in res if v.base_rental_rate >= min_val]
        if max_val is not None:
            res = [v for v in res if v.base_rental_rate <= max_val]

        # 4. Availability
        if available_only:
            res = [v for v in res if v.is_available_for_rental()]

        return res

    # ---------- Rentals ----------
    def rent_vehicle(self, customer: Customer, model: str, days: int) -> RentalTransaction:
        """
        Find an available vehicle of `model` and rent it to `customer`.
        Lookup and rental happen under one lock, so two callers can never
        claim the same vehicle.
        """
        with self._rw:
            vehicle = self.find_available_vehicle(model)
            transaction = RentalTransaction(customer, vehicle, days)
            self.transactions.append(transaction)
            return transaction

    def complete_rental(self, transaction: RentalTransaction) -> None:
        with self._rw:
            transaction.complete_rental()

    def active_transactions(self) -> List[RentalTransaction]:
        with self._rw:
            return [t for t in self.transactions if t.is_active]

    # ---------- Reporting ----------
    def summary(self) -> dict:
        """Fleet and revenue totals for display."""
        with self._rw:
            available = sum(1 for v in self.fleet if v.is_available_for_rental())
            by_type = Counter(v.type for v in self.fleet)
            revenue = round2(sum(t.get_total_cost() for t in self.transactions))
            return {
                "vehicles": len(self.fleet),
                "available": available,
                "rented": len(self.fleet) - available,
                "transactions": len(self.transactions),
                "active_transactions": sum(1 for t in self.transactions if t.is_active),
                "revenue": revenue,
                "by_type": dict(by_type),
            }
