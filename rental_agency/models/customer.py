from dataclasses import dataclass

from rental_agency.utils.validators import require_text


@dataclass(frozen=True)
class Customer:
    """
    A renter. The agency does not own customers; transactions only point at them.
    """
    name: str
    customer_id: str

    def __post_init__(self):
        require_text(self.name, "customer name")
        require_text(self.customer_id, "customer id")
