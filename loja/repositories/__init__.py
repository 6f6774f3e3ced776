"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Each method opens its own connection and closes it before returning.
"""
from loja.repositories.customer_repository import CustomerRepository
from loja.repositories.product_repository import ProductRepository
from loja.repositories.sales_repository import SalesRepository

__all__ = [
    'CustomerRepository',
    'ProductRepository',
    'SalesRepository'
]
