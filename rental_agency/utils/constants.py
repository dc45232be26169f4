# rental_agency/utils/constants.py

"""
Global constants for vehicle types, rental statuses, and pricing surcharges.
These constants are imported by both models and services.
"""


class VehicleType:
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    TRUCK = "truck"


class RentalStatus:
    ACTIVE = "active"
    COMPLETED = "completed"


# --- Pricing ---
AC_SURCHARGE_PER_DAY = 10.0  # cars with air conditioning
LOAD_CAPACITY_FACTOR = 5.0  # trucks: per unit of capacity, per day

# --- Misc ---
ALLOWED_TYPES = {VehicleType.CAR, VehicleType.MOTORCYCLE, VehicleType.TRUCK}
DEFAULT_TIMEZONE = "Pacific/Auckland"
