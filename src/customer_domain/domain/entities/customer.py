"""Customer entity."""

from dataclasses import dataclass


@dataclass
class Customer:
    """Represents a pharmacy customer with contact details for invoicing."""

    id: str
    name: str
    email: str
    phone: str
    address: str

    def __post_init__(self) -> None:
        self.id = str(self.id)
