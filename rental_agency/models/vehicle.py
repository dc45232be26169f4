import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from rental_agency.utils.constants import (
    AC_SURCHARGE_PER_DAY,
    LOAD_CAPACITY_FACTOR,
    VehicleType,
)
from rental_agency.utils.validators import require_positive, require_text


@dataclass(frozen=True, eq=False)
class Vehicle(ABC):
    """
    Base vehicle model. Identity and pricing fields are frozen after
    construction; only the availability flag changes, and only through
    reserve()/release().
    Subclasses decide how the per-day rate turns into a rental cost.
    """
    type: ClassVar[str] = ""

    vehicle_id: str
    model: str
    base_rental_rate: float  # per day
    available: bool = field(default=True, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self):
        require_text(self.vehicle_id, "vehicle id")
        require_text(self.model, "model")
        object.__setattr__(self, "base_rental_rate",
                           require_positive(self.base_rental_rate, "base rental rate"))

    @abstractmethod
    def calculate_rental_cost(self, days: int) -> float:
        """
        Cost of renting this vehicle for `days` days, no rounding.
        Callers validate `days`; zero or negative input yields 0 or a
        negative number rather than an exception.
        """

    def is_available_for_rental(self) -> bool:
        return self.available

    # ---------- Availability ----------
    def reserve(self) -> bool:
        """Flip available -> unavailable; False if someone already holds it."""
        with self._lock:
            if not self.available:
                return False
            object.__setattr__(self, "available", False)
            return True

    def release(self) -> None:
        with self._lock:
            object.__setattr__(self, "available", True)

    def to_dict(self) -> dict:
        return {
            "vehicle_id": self.vehicle_id,
            "model": self.model,
            "type": self.type,
            "rate": self.base_rental_rate,
            "available": self.available,
        }


@dataclass(frozen=True, eq=False)
class Car(Vehicle):
    """
    Cars pay the base rate plus a flat daily surcharge when air conditioned.
    """
    type: ClassVar[str] = VehicleType.CAR

    has_air_conditioning: bool = False

    def calculate_rental_cost(self, days: int) -> float:
        cost = self.base_rental_rate * days
        if self.has_air_conditioning:
            cost += AC_SURCHARGE_PER_DAY * days
        return cost

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["has_air_conditioning"] = self.has_air_conditioning
        return d


@dataclass(frozen=True, eq=False)
class Motorcycle(Vehicle):
    """
    Motorcycles follow the base rule. The helmet flag is recorded for the
    front desk but does not change the price.
    """
    type: ClassVar[str] = VehicleType.MOTORCYCLE

    requires_helmet: bool = False

    def calculate_rental_cost(self, days: int) -> float:
        return self.base_rental_rate * days

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["requires_helmet"] = self.requires_helmet
        return d


@dataclass(frozen=True, eq=False)
class Truck(Vehicle):
    """
    Trucks add a surcharge that grows linearly with load capacity.
    """
    type: ClassVar[str] = VehicleType.TRUCK

    load_capacity: float

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "load_capacity",
                           require_positive(self.load_capacity, "load capacity"))

    def calculate_rental_cost(self, days: int) -> float:
        return self.base_rental_rate * days + self.load_capacity * LOAD_CAPACITY_FACTOR * days

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["load_capacity"] = self.load_capacity
        return d
