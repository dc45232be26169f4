"""
Custom exception classes for the rental agency.

Each error carries a ready-to-print message so the command-line layer can show
it as-is instead of a traceback.
"""


class InvalidArgumentError(Exception):
    """Raised when a vehicle, customer or transaction is built from bad input."""

    def __init__(self, message: str = "Error: invalid argument") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class VehicleNotFoundError(Exception):
    """Raised when a vehicle ID cannot be found in the fleet."""

    def __init__(self, message: str = "Error: vehicle not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class VehicleUnavailableError(Exception):
    """Raised when no vehicle of the requested model is available."""

    def __init__(self, message: str = "Error: no available vehicle of the specified model") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class VehicleAlreadyRentedError(Exception):
    """Raised when a rental is started against a vehicle that is already out."""

    def __init__(self, message: str = "Error: vehicle is already rented") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class RentalStateError(Exception):
    """Raised when a transaction is asked to rent a second time."""

    def __init__(self, message: str = "Error: rental already started") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
