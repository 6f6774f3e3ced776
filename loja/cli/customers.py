"""
Customer handlers - one function per entry of the customers menu

Every handler ends normally: database failures are reported on stderr and
the menu is shown again.
"""
import logging

from rich.markup import escape

from loja.cli import prompts, validators
from loja.cli.console import console, print_error
from loja.cli.formatting import format_customer, print_report
from loja.domain.customer import CustomerCreate, CustomerUpdate
from loja.repositories.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)

NOT_FOUND = "❌ Cliente não encontrado"
CANCELLED = "❌ Operação cancelada"


def add_customer() -> None:
    """Ask for name and email and insert the customer"""
    try:
        name = prompts.text("Nome", validate=validators.customer_name)
        email = prompts.text("Email", validate=validators.email)

        if not prompts.confirm(f"Confirma adicionar cliente {escape(name)} - {escape(email)}?"):
            console.print(CANCELLED, style="yellow")
            return

        customer = CustomerRepository().create(CustomerCreate(name=name, email=email))
        logger.info(f"Customer {customer.id} created")
        console.print(f"✅ Cliente adicionado com sucesso! (ID {customer.id})", style="green")

    except Exception as e:
        logger.debug("add_customer failed", exc_info=True)
        print_error("Erro ao adicionar cliente", e)


def list_customers() -> None:
    try:
        customers = CustomerRepository().find_all()
        print_report(
            "📋 LISTA DE CLIENTES:",
            (format_customer(c) for c in customers),
            empty_message="Nenhum cliente cadastrado"
        )

    except Exception as e:
        logger.debug("list_customers failed", exc_info=True)
        print_error("Erro ao listar clientes", e)


def search_customers() -> None:
    """Case-insensitive search by name or part of the name"""
    try:
        term = prompts.text("Digite o nome ou parte do nome para buscar")
        customers = CustomerRepository().search_by_name(term)
        print_report(
            f'🔍 RESULTADO DA BUSCA POR "{term}":',
            (format_customer(c) for c in customers),
            empty_message="Nenhum cliente encontrado"
        )

    except Exception as e:
        logger.debug("search_customers failed", exc_info=True)
        print_error("Erro ao buscar cliente", e)


def update_customer() -> None:
    """
    Replace name and email of an existing customer

    The current values are offered as defaults, so pressing Enter keeps
    them. Nothing is written unless the customer exists and the operator
    confirms.
    """
    try:
        customer_id = int(prompts.text("Digite o ID do cliente a atualizar", validate=validators.record_id))

        repo = CustomerRepository()
        customer = repo.find_by_id(customer_id)
        if customer is None:
            console.print(NOT_FOUND, style="red")
            return

        console.print(f"Cliente atual: {format_customer(customer)}")

        name = prompts.text(
            "Novo nome (pressione Enter para manter o atual)",
            validate=validators.customer_name,
            default=customer.name
        )
        email = prompts.text(
            "Novo email (pressione Enter para manter o atual)",
            validate=validators.email,
            default=customer.email
        )

        if not prompts.confirm(f"Confirma atualização para {escape(name)} - {escape(email)}?"):
            console.print(CANCELLED, style="yellow")
            return

        # Deleted by someone else between the lookup and the update
        if not repo.update(customer_id, CustomerUpdate(name=name, email=email)):
            console.print(NOT_FOUND, style="red")
            return

        logger.info(f"Customer {customer_id} updated")
        console.print("✅ Cliente atualizado com sucesso!", style="green")

    except Exception as e:
        logger.debug("update_customer failed", exc_info=True)
        print_error("Erro ao atualizar cliente", e)


def delete_customer() -> None:
    """Delete a customer after showing it and asking for confirmation"""
    try:
        customer_id = int(prompts.text("Digite o ID do cliente a deletar", validate=validators.record_id))

        repo = CustomerRepository()
        customer = repo.find_by_id(customer_id)
        if customer is None:
            console.print(NOT_FOUND, style="red")
            return

        console.print(f"Cliente a deletar: {format_customer(customer)}")

        if not prompts.confirm(
            "Tem certeza que deseja deletar este cliente? Esta ação não pode ser desfeita!",
            default=False
        ):
            console.print(CANCELLED, style="yellow")
            return

        if not repo.delete(customer_id):
            console.print(NOT_FOUND, style="red")
            return

        logger.info(f"Customer {customer_id} deleted")
        console.print("✅ Cliente deletado com sucesso!", style="green")

    except Exception as e:
        logger.debug("delete_customer failed", exc_info=True)
        print_error("Erro ao deletar cliente", e)
