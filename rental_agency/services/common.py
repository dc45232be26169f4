"""Shared service helpers and factories."""

from typing import Optional

from rental_agency.exceptions import InvalidArgumentError
from rental_agency.models.customer import Customer
from rental_agency.models.vehicle import Car, Motorcycle, Truck, Vehicle
from rental_agency.utils.constants import ALLOWED_TYPES, VehicleType


# -------- math helpers --------
def round2(x: float) -> float:
    return round(float(x), 2)


def to_float_safe(value) -> Optional[float]:
    """Safely convert to float; return None if invalid."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


# -------- normalizers --------
def norm_type(value: Optional[str]) -> str:
    """Normalize vehicle type to lowercase string; return '' for None."""
    return (value or "").strip().lower()


def _lc(s):
    """Safe lowercase for case-insensitive compare."""
    return (s or "").lower()


# -------- dict -> rich model mappers --------
def vehicle_from_dict(d: Optional[dict]) -> Vehicle:
    """
    Map a plain vehicle dict (config, CLI input) to a rich vehicle object.
    Accepts `rate` or `base_rental_rate`; the variant is picked by `type`.
    """
    if not d:
        raise InvalidArgumentError("Error: empty vehicle record")
    vtype = norm_type(d.get("type"))
    if vtype not in ALLOWED_TYPES:
        raise InvalidArgumentError(f"Error: unknown vehicle type '{d.get('type')}'")
    rate = d.get("base_rental_rate", d.get("rate"))
    base = dict(
        vehicle_id=d.get("vehicle_id") or d.get("id"),
        model=d.get("model"),
        base_rental_rate=rate,
    )
    if vtype == VehicleType.MOTORCYCLE:
        return Motorcycle(**base, requires_helmet=bool(d.get("requires_helmet", False)))
    if vtype == VehicleType.TRUCK:
        return Truck(**base, load_capacity=d.get("load_capacity"))
    return Car(**base, has_air_conditioning=bool(d.get("has_air_conditioning", False)))


def customer_from_dict(d: Optional[dict]) -> Customer:
    """Map a stored customer dict to a Customer."""
    if not d:
        raise InvalidArgumentError("Error: empty customer record")
    return Customer(name=d.get("name"), customer_id=d.get("customer_id") or d.get("id"))
