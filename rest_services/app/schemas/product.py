"""
Pydantic models for product data.

A product is a plain name and price pair.  ``ProductCreate`` mirrors
the stored ``Product`` with zero-value defaults so that a body missing
a field still creates a product.  ``ProductUpdate`` is the partial
model accepted by ``PUT``; empty and zero values mean "leave as is".

Decoding is strict: a quoted number is not a price and a number is not
a name.  Integers are still accepted as prices, and a ``null`` field is
treated as if it were absent.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str = Field("", examples=["food"])
    price: float = Field(0.0, examples=[10.0])

    @field_validator("name", "price", mode="before")
    @classmethod
    def null_is_zero_value(cls, v, info):
        if v is None:
            return cls.model_fields[info.field_name].default
        return v


class ProductCreate(Product):
    """Schema for creating a product."""
    pass


class ProductUpdate(BaseModel):
    """Schema for updating a product.

    All fields are optional; only non-empty ``name`` and non-zero
    ``price`` values are applied.
    """

    model_config = ConfigDict(strict=True)

    name: Optional[str] = None
    price: Optional[float] = None

    def changes(self) -> dict:
        """Return the fields that should overwrite the stored product."""
        updates = {}
        if self.name:
            updates["name"] = self.name
        if self.price:
            updates["price"] = self.price
        return updates
