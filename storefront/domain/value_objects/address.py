"""Address value object."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """
    Postal address of a customer.

    Immutable: replace the whole address with Customer.change_address().
    """
    street: str
    number: int
    zip_code: str
    city: str

    def __post_init__(self):
        if not self.street:
            raise ValueError("Street is required")
        if self.number is None or self.number <= 0:
            raise ValueError(f"Number must be greater than zero, got: {self.number}")
        if not self.zip_code:
            raise ValueError("Zip code is required")
        if not self.city:
            raise ValueError("City is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip_code} {self.city}"
