"""
Menu navigator

Each menu is an explicit loop: show the options, run the chosen action,
show the menu again. The last option leaves the loop and returns to
whoever called run() (the parent menu, or main() for the root).
"""
import logging
from typing import Callable, List, Optional, Tuple

from loja.cli import prompts
from loja.cli.console import console, print_error
from loja.cli.customers import (
    add_customer,
    delete_customer,
    list_customers,
    search_customers,
    update_customer,
)
from loja.cli.products import add_product, list_products
from loja.cli.sales import sales_report

logger = logging.getLogger(__name__)

Action = Callable[[], None]


class Menu:
    """A titled list of numbered options plus a final back/exit option"""

    def __init__(self, title: str, exit_label: str, exit_message: Optional[str] = None):
        self.title = title
        self.exit_label = exit_label
        self.exit_message = exit_message
        self._options: List[Tuple[str, Action]] = []

    def add(self, label: str, action: Action) -> "Menu":
        """Append an option; a sub-menu is added as its run method"""
        self._options.append((label, action))
        return self

    @property
    def exit_tag(self) -> str:
        return str(len(self._options) + 1)

    def choices(self) -> List[Tuple[str, str]]:
        """(label, tag) pairs in display order, exit option last"""
        numbered = [
            (f"{tag}. {label}", str(tag))
            for tag, (label, _) in enumerate(self._options, start=1)
        ]
        return numbered + [(f"{self.exit_tag}. {self.exit_label}", self.exit_tag)]

    def dispatch(self, tag: str) -> bool:
        """
        Run the action behind a tag

        Returns:
            False when the exit tag was chosen, True otherwise
        """
        if tag == self.exit_tag:
            return False

        label, action = self._options[int(tag) - 1]
        try:
            action()
        except Exception as e:
            # Handlers report their own failures; this keeps the loop alive
            # if one slips through.
            logger.debug(f"Unhandled error in '{label}'", exc_info=True)
            print_error(f"Erro em '{label}'", e)
        return True

    def run(self) -> None:
        while self.dispatch(prompts.select(self.title, self.choices())):
            pass

        if self.exit_message:
            console.print(self.exit_message)


def build_customers_menu() -> Menu:
    return (
        Menu("OPERAÇÕES DE CLIENTES", "Voltar ao Menu Principal")
        .add("Adicionar Cliente", add_customer)
        .add("Listar Clientes", list_customers)
        .add("Buscar Cliente por Nome", search_customers)
        .add("Atualizar Cliente", update_customer)
        .add("Deletar Cliente", delete_customer)
    )


def build_products_menu() -> Menu:
    return (
        Menu("OPERAÇÕES DE PRODUTOS", "Voltar ao Menu Principal")
        .add("Adicionar Produto", add_product)
        .add("Listar Produtos", list_products)
    )


def build_main_menu() -> Menu:
    return (
        Menu("🏪 SISTEMA DE GERENCIAMENTO DA LOJA", "Sair", exit_message="👋 Até logo!")
        .add("Operações de Clientes", build_customers_menu().run)
        .add("Operações de Produtos", build_products_menu().run)
        .add("Relatório de Vendas", sales_report)
    )
