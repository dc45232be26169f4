from __future__ import annotations

from typing import Optional

from rental_agency.exceptions import (
    InvalidArgumentError,
    RentalStateError,
    VehicleAlreadyRentedError,
)
from rental_agency.models.customer import Customer
from rental_agency.models.rentable import Rentable
from rental_agency.models.vehicle import Vehicle
from rental_agency.utils.clock import utc_now_iso
from rental_agency.utils.constants import RentalStatus
from rental_agency.utils.validators import require_days


class RentalTransaction(Rentable):
    """
    One customer renting one vehicle for a whole number of days.

    Constructing the transaction rents the vehicle: the cost is quoted once and
    frozen, and the vehicle leaves the available pool. complete_rental()
    (alias of return_vehicle()) puts it back. A transaction is single-use.
    """

    def __init__(self, customer: Customer, vehicle: Vehicle, rental_days: int):
        if not isinstance(vehicle, Vehicle):
            raise InvalidArgumentError("Error: a vehicle is required")
        self.vehicle = vehicle
        self.customer: Optional[Customer] = None
        self.rental_days = 0
        self.total_cost = 0.0
        self.status: Optional[str] = None
        self.started_at: Optional[str] = None
        self.completed_at: Optional[str] = None
        self.rent(customer, rental_days)

    # ---------- Rentable ----------
    def rent(self, customer: Customer, days: int) -> None:
        """
        Validate, quote and take the vehicle out of the pool.
        Nothing is changed if any step fails.
        """
        if self.status is not None:
            raise RentalStateError(f"Error: transaction for vehicle '{self.vehicle.vehicle_id}' already started")
        if not isinstance(customer, Customer):
            raise InvalidArgumentError("Error: a customer is required")
        days = require_days(days)

        cost = self.vehicle.calculate_rental_cost(days)
        if not self.vehicle.reserve():
            raise VehicleAlreadyRentedError(f"Error: vehicle '{self.vehicle.vehicle_id}' is already rented")

        self.customer = customer
        self.rental_days = days
        self.total_cost = cost
        self.status = RentalStatus.ACTIVE
        self.started_at = utc_now_iso()

    def return_vehicle(self) -> None:
        """
        Release the vehicle. Only the first call has an effect, so a late
        second call cannot free a vehicle someone else has rented since.
        """
        if self.status != RentalStatus.ACTIVE:
            return
        self.vehicle.release()
        self.status = RentalStatus.COMPLETED
        self.completed_at = utc_now_iso()

    complete_rental = return_vehicle

    # ---------- Queries ----------
    def get_total_cost(self) -> float:
        return self.total_cost

    @property
    def is_active(self) -> bool:
        return self.status == RentalStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "customer_id": self.customer.customer_id if self.customer else None,
            "vehicle_id": self.vehicle.vehicle_id,
            "model": self.vehicle.model,
            "days": self.rental_days,
            "total": self.total_cost,
            "status": self.status,
            "started_at": self.started_at,
            "completed_at": self.completed_at,
        }
