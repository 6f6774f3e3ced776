"""
Sales Repository - read-only aggregate over the optional `vendas` table
"""
import logging
from decimal import Decimal

from psycopg2 import errors

from loja.domain.sales import SalesSummary
from loja.core.database import get_db_connection_dict

logger = logging.getLogger(__name__)


class SalesRepository:
    """Repository for the sales summary"""

    def get_summary(self) -> SalesSummary:
        """
        Count sales and sum their totals

        A missing `vendas` table is an expected condition: the summary
        comes back with zeros and table_found=False. Any other database
        error is raised to the caller.

        Returns:
            SalesSummary
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT
                    COUNT(*) AS total_vendas,
                    COALESCE(SUM(total), 0) AS total_valor
                FROM vendas
            """)

            row = cursor.fetchone()
            return SalesSummary(
                total_sales=row['total_vendas'],
                total_value=Decimal(str(row['total_valor'] or 0)),
                table_found=True
            )

        except errors.UndefinedTable:
            logger.info("Table 'vendas' does not exist, reporting zero sales")
            return SalesSummary.empty()

        finally:
            cursor.close()
            conn.close()
