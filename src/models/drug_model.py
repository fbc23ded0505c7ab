"""
Domain model for Drug entity.
Database-agnostic representation of a clinic drug.
"""
from decimal import Decimal
from typing import Optional


class Drug:
    """Domain model representing a drug stocked by the clinic."""

    def __init__(
        self,
        name: str,
        price: Decimal,
        id: Optional[int] = None
    ):
        self.id = id
        self.name = name
        self.price = price

    def __eq__(self, other):
        if not isinstance(other, Drug):
            return NotImplemented
        return (self.id, self.name, self.price) == (other.id, other.name, other.price)

    def __repr__(self):
        return f"Drug(id={self.id}, name={self.name}, price={self.price})"
