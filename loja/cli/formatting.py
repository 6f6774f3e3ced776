"""
Report formatting helpers
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from loja.cli.console import console
from loja.domain.customer import Customer
from loja.domain.product import Product

RULE_WIDTH = 60


def rule() -> str:
    return "=" * RULE_WIDTH


def format_money(value: Decimal) -> str:
    """29.9 -> 'R$ 29.90', rounded half-up like PostgreSQL NUMERIC"""
    cents = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"R$ {cents}"


def format_customer(customer: Customer) -> str:
    return f"[{customer.id}] {customer.name} - {customer.email}"


def format_product(product: Product) -> List[str]:
    """One line per product plus an indented description line if it has one"""
    lines = [f"[{product.id}] {product.name} - {format_money(product.price)}"]
    if product.description:
        lines.append(f"    Descrição: {product.description}")
    return lines


def print_report(title: str, lines: Iterable[str], empty_message: Optional[str] = None) -> None:
    """
    Print a titled report between two rules

    When there are no lines and empty_message is given, that message is
    printed instead so the report is never blank.
    """
    lines = list(lines)

    console.print()
    console.print(title, style="bold")
    console.print(rule())

    if not lines and empty_message:
        console.print(empty_message)
    for line in lines:
        console.print(line)

    console.print(rule())
