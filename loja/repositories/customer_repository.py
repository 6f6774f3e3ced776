"""
Customer Repository - Data Access Layer for Customers

Handles all database queries for the `clientes` table and returns Customer
domain models.
"""
from typing import List, Optional
from loja.domain.customer import Customer, CustomerCreate, CustomerUpdate
from loja.core.database import get_db_connection_dict


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term is matched literally"""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CustomerRepository:
    """
    Repository for Customer data access

    All SQL queries for customers are centralized here.
    Returns Customer domain models, not raw dictionaries.
    """

    @staticmethod
    def _map_row_to_customer(row: dict) -> Customer:
        """Map a `clientes` row (Portuguese column names) to Customer"""
        return Customer(
            id=row['id'],
            name=row['nome'],
            email=row['email']
        )

    def find_all(self) -> List[Customer]:
        """
        Find all customers ordered by name

        Returns:
            List of customers (empty when there are none)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, nome, email
                FROM clientes
                ORDER BY nome
            """)

            rows = cursor.fetchall()
            return [self._map_row_to_customer(row) for row in rows]

        finally:
            cursor.close()
            conn.close()

    def search_by_name(self, term: str) -> List[Customer]:
        """
        Find customers whose name contains the term (case-insensitive)

        Args:
            term: Name or part of the name

        Returns:
            List of matching customers ordered by name
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, nome, email
                FROM clientes
                WHERE nome ILIKE %s
                ORDER BY nome
            """, (f"%{escape_like(term)}%",))

            rows = cursor.fetchall()
            return [self._map_row_to_customer(row) for row in rows]

        finally:
            cursor.close()
            conn.close()

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Find customer by ID

        Args:
            customer_id: Internal customer ID

        Returns:
            Customer or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, nome, email
                FROM clientes
                WHERE id = %s
            """, (customer_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_customer(row)

        finally:
            cursor.close()
            conn.close()

    def create(self, data: CustomerCreate) -> Customer:
        """
        Insert a new customer

        Args:
            data: Validated customer fields

        Returns:
            The stored customer, with the ID assigned by the database
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO clientes (nome, email)
                VALUES (%s, %s)
                RETURNING id, nome, email
            """, (data.name, data.email))

            row = cursor.fetchone()
            conn.commit()
            return self._map_row_to_customer(row)

        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    def update(self, customer_id: int, data: CustomerUpdate) -> bool:
        """
        Replace name and email of an existing customer

        Returns:
            True if a row was updated, False if the ID no longer exists
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                UPDATE clientes
                SET nome = %s, email = %s
                WHERE id = %s
            """, (data.name, data.email, customer_id))

            updated = cursor.rowcount > 0
            conn.commit()
            return updated

        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    def delete(self, customer_id: int) -> bool:
        """
        Delete a customer

        Returns:
            True if a row was deleted, False if the ID no longer exists
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("DELETE FROM clientes WHERE id = %s", (customer_id,))

            deleted = cursor.rowcount > 0
            conn.commit()
            return deleted

        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()
