"""
Pytest fixtures and configuration for the Loja tests

Nothing here needs a database: repository tests mock the connection and
handler tests swap the repositories for in-memory fakes.
"""
import logging
import pytest
from decimal import Decimal
from typing import List, Optional
from unittest.mock import MagicMock

from loja.domain.customer import Customer, CustomerCreate, CustomerUpdate
from loja.domain.product import Product, ProductCreate


@pytest.fixture
def mock_conn():
    """
    Provides a mocked psycopg2 connection whose cursor() returns
    mock_conn.cursor_mock
    """
    conn = MagicMock()
    cursor = MagicMock()
    conn.cursor.return_value = cursor
    conn.cursor_mock = cursor
    return conn


@pytest.fixture
def sample_customer_row():
    """Row as returned by RealDictCursor for `clientes`"""
    return {'id': 1, 'nome': 'Ana Silva', 'email': 'ana@x.com'}


@pytest.fixture
def sample_product_row():
    """Row as returned by RealDictCursor for `produtos`"""
    return {
        'id': 10,
        'nome': 'Caneca',
        'preco': Decimal('29.90'),
        'descricao': 'Caneca de cerâmica 300ml'
    }


class FakeCustomerRepository:
    """In-memory stand-in for CustomerRepository"""

    def __init__(self):
        self.rows: List[Customer] = []
        self._next_id = 1

    def create(self, data: CustomerCreate) -> Customer:
        customer = Customer(id=self._next_id, name=data.name, email=data.email)
        self._next_id += 1
        self.rows.append(customer)
        return customer

    def find_all(self) -> List[Customer]:
        return sorted(self.rows, key=lambda c: c.name)

    def search_by_name(self, term: str) -> List[Customer]:
        return [c for c in self.find_all() if term.lower() in c.name.lower()]

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        return next((c for c in self.rows if c.id == customer_id), None)

    def update(self, customer_id: int, data: CustomerUpdate) -> bool:
        for i, c in enumerate(self.rows):
            if c.id == customer_id:
                self.rows[i] = Customer(id=customer_id, name=data.name, email=data.email)
                return True
        return False

    def delete(self, customer_id: int) -> bool:
        before = len(self.rows)
        self.rows = [c for c in self.rows if c.id != customer_id]
        return len(self.rows) < before


class FakeProductRepository:
    """In-memory stand-in for ProductRepository"""

    def __init__(self):
        self.rows: List[Product] = []

    def create(self, data: ProductCreate) -> Product:
        product = Product(
            id=len(self.rows) + 1,
            name=data.name,
            price=data.price,
            description=data.description
        )
        self.rows.append(product)
        return product

    def find_all(self) -> List[Product]:
        return sorted(self.rows, key=lambda p: p.name)


@pytest.fixture
def fake_customer_repo():
    return FakeCustomerRepository()


@pytest.fixture
def fake_product_repo():
    return FakeProductRepository()


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() so later tests keep pytest's log capture"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
