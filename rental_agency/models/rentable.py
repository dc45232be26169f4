from abc import ABC, abstractmethod


class Rentable(ABC):
    """
    Capability of anything that can take a vehicle out and bring it back.
    RentalTransaction is the concrete implementation.
    """

    @abstractmethod
    def rent(self, customer, days: int) -> None:
        """Bind `customer` to the vehicle for `days` days."""

    @abstractmethod
    def return_vehicle(self) -> None:
        """Hand the vehicle back to the available pool."""
