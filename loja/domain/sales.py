"""
Sales Domain Model

Aggregate over the optional `vendas` table. There are no sale rows in the
domain, only the summary.
"""
from pydantic import BaseModel, Field
from decimal import Decimal


class SalesSummary(BaseModel):
    """
    Sales summary - count and sum of `vendas.total`

    Fields:
        total_sales: Number of rows in `vendas`
        total_value: Sum of the `total` column (0 when there are no rows)
        table_found: False when the `vendas` table does not exist
    """

    total_sales: int = Field(0, description="Number of sales", ge=0)
    total_value: Decimal = Field(Decimal('0'), description="Sum of sale totals")
    table_found: bool = Field(True, description="Whether the vendas table exists")

    @classmethod
    def empty(cls) -> "SalesSummary":
        """Summary used when the sales table does not exist"""
        return cls(total_sales=0, total_value=Decimal('0'), table_found=False)
