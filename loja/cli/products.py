"""
Product handlers - add and list
"""
import logging

from rich.markup import escape

from loja.cli import prompts, validators
from loja.cli.console import console, print_error
from loja.cli.formatting import format_money, format_product, print_report
from loja.domain.product import ProductCreate, parse_price
from loja.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def add_product() -> None:
    """Ask for name, price and an optional description, then insert"""
    try:
        name = prompts.text("Nome do produto", validate=validators.product_name)
        price = parse_price(prompts.text("Preço do produto (ex: 29.99)", validate=validators.price))
        description = prompts.text("Descrição do produto (opcional)")

        if not prompts.confirm(f"Confirma adicionar produto {escape(name)} - {format_money(price)}?"):
            console.print("❌ Operação cancelada", style="yellow")
            return

        product = ProductRepository().create(
            ProductCreate(name=name, price=price, description=description)
        )
        logger.info(f"Product {product.id} created")
        console.print(f"✅ Produto adicionado com sucesso! (ID {product.id})", style="green")

    except Exception as e:
        logger.debug("add_product failed", exc_info=True)
        print_error("Erro ao adicionar produto", e)


def list_products() -> None:
    try:
        products = ProductRepository().find_all()
        print_report(
            "📦 LISTA DE PRODUTOS:",
            (line for p in products for line in format_product(p)),
            empty_message="Nenhum produto cadastrado"
        )

    except Exception as e:
        logger.debug("list_products failed", exc_info=True)
        print_error("Erro ao listar produtos", e)
