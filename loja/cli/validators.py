"""
Input validators for the prompts

Each returns True when the value is accepted, otherwise the message shown
before asking again.
"""
from typing import Union

from loja.domain import customer, product


def customer_name(value: str) -> Union[bool, str]:
    return len(value) >= customer.NAME_MIN_LENGTH or f"Mínimo {customer.NAME_MIN_LENGTH} caracteres"


def email(value: str) -> Union[bool, str]:
    return customer.is_valid_email(value) or "Email inválido"


def product_name(value: str) -> Union[bool, str]:
    return (
        len(value.strip()) >= product.NAME_MIN_LENGTH
        or f"Nome deve ter pelo menos {product.NAME_MIN_LENGTH} caracteres"
    )


def price(value: str) -> Union[bool, str]:
    return product.parse_price(value) is not None or "Preço deve ser um número positivo"


# Largest value of a PostgreSQL integer (SERIAL) column
MAX_ID = 2147483647


def record_id(value: str) -> Union[bool, str]:
    """IDs are positive integers that fit the id column"""
    try:
        return 0 < int(value) <= MAX_ID or "ID deve ser um número inteiro positivo"
    except ValueError:
        return "ID deve ser um número inteiro positivo"
