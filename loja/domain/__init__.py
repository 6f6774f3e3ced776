"""
Domain Layer - Business Entities

Pydantic models for the store entities. Create/update schemas enforce the
invariants every persisted row must satisfy.
"""
from loja.domain.customer import Customer, CustomerCreate, CustomerUpdate
from loja.domain.product import Product, ProductCreate
from loja.domain.sales import SalesSummary

__all__ = [
    'Customer',
    'CustomerCreate',
    'CustomerUpdate',
    'Product',
    'ProductCreate',
    'SalesSummary'
]
