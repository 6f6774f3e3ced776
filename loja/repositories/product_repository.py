"""
Product Repository - Data Access Layer for Products

Handles all database queries for the `produtos` table and returns Product
domain models.
"""
from typing import List
from loja.domain.product import Product, ProductCreate
from loja.core.database import get_db_connection_dict


class ProductRepository:
    """
    Repository for Product data access

    Products can only be added and listed.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        return Product(
            id=row['id'],
            name=row['nome'],
            price=row['preco'],
            description=row.get('descricao')
        )

    def find_all(self) -> List[Product]:
        """
        Find all products ordered by name

        Returns:
            List of products (empty when there are none)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, nome, preco, descricao
                FROM produtos
                ORDER BY nome
            """)

            rows = cursor.fetchall()
            return [self._map_row_to_product(row) for row in rows]

        finally:
            cursor.close()
            conn.close()

    def create(self, data: ProductCreate) -> Product:
        """
        Insert a new product

        Args:
            data: Validated product fields (blank description already None)

        Returns:
            The stored product, with the ID assigned by the database
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO produtos (nome, preco, descricao)
                VALUES (%s, %s, %s)
                RETURNING id, nome, preco, descricao
            """, (data.name, data.price, data.description))

            row = cursor.fetchone()
            conn.commit()
            return self._map_row_to_product(row)

        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()
