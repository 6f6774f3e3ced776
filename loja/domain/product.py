"""
Product Domain Model

Represents a row of the `produtos` table.
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

NAME_MIN_LENGTH = 2
CENT = Decimal("0.01")


def parse_price(value: str) -> Optional[Decimal]:
    """
    Parse a price typed by the operator

    Accepts both "29.99" and "29,99". The value is rounded half-up to
    cents, as NUMERIC(10, 2) stores it. Returns None for anything that is
    not a finite number, or that rounds to zero or less.
    """
    if "_" in value:
        return None

    try:
        price = Decimal(value.strip().replace(",", "."))
        if not price.is_finite():
            return None
        # Too many digits to quantize also ends up here
        price = price.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None

    if price <= 0:
        return None
    return price


class Product(BaseModel):
    """
    Product domain model - represents a product in the catalog

    Fields:
        id: Internal product ID (primary key)
        name: Product name (column `nome`)
        price: Sale price (column `preco`)
        description: Free-text description (column `descricao`, optional)
    """

    id: int = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Sale price")
    description: Optional[str] = Field(None, description="Product description")

    model_config = ConfigDict(from_attributes=True)


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    name: str = Field(..., min_length=NAME_MIN_LENGTH)
    price: Decimal = Field(..., gt=0)
    description: Optional[str] = None

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator('description')
    @classmethod
    def blank_description_is_none(cls, v: Optional[str]) -> Optional[str]:
        # Stored as NULL rather than an empty string
        return v or None
