"""Catalog models."""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from boutique.services.money import to_decimal


class Product(BaseModel):
    """A catalog product, normalized from an Airtable record."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    price: Decimal = Decimal("0")
    image_url: str = ""
    availability: str
    category: str

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v)

    def to_dict(self) -> dict:
        """JSON-safe dict; price is kept as a string to round-trip exactly."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        return cls.model_validate(data)
