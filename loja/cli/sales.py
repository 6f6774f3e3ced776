"""
Sales report handler
"""
import logging

from loja.cli.console import console, print_error
from loja.cli.formatting import format_money, print_report
from loja.repositories.sales_repository import SalesRepository

logger = logging.getLogger(__name__)


def sales_report() -> None:
    """Number of sales and their total; zeros when there is no sales table"""
    try:
        summary = SalesRepository().get_summary()

        if not summary.table_found:
            console.print('⚠️ Tabela "vendas" não encontrada. Exibindo zeros.', style="yellow")

        print_report("📊 RELATÓRIO DE VENDAS:", [
            f"Total de vendas: {summary.total_sales}",
            f"Valor total: {format_money(summary.total_value)}",
        ])

    except Exception as e:
        logger.debug("sales_report failed", exc_info=True)
        print_error("Erro ao gerar relatório", e)
