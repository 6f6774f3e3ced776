"""
Customer Domain Model

Represents a row of the `clientes` table.
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator

NAME_MIN_LENGTH = 3


def is_valid_email(value: str) -> bool:
    """The only email rule the store enforces: it must contain '@'"""
    return "@" in value


class Customer(BaseModel):
    """
    Customer domain model - represents a stored customer

    Fields:
        id: Internal customer ID (primary key, assigned by the database)
        name: Customer name (column `nome`)
        email: Customer email
    """

    id: int = Field(..., description="Customer ID")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")

    model_config = ConfigDict(from_attributes=True)


class CustomerCreate(BaseModel):
    """Schema for creating a new customer"""
    name: str = Field(..., min_length=NAME_MIN_LENGTH)
    email: str

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator('email')
    @classmethod
    def email_must_contain_at(cls, v: str) -> str:
        if not is_valid_email(v):
            raise ValueError("email must contain '@'")
        return v


class CustomerUpdate(CustomerCreate):
    """Schema for updating an existing customer (all fields are replaced)"""
