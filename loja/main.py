"""
Loja - ponto de entrada da aplicação
"""
import logging
import sys
from dotenv import find_dotenv, load_dotenv

# Load environment variables before the settings are built
load_dotenv(find_dotenv(usecwd=True))

from loja.core.config import settings
from loja.cli.console import console, error_console
from loja.cli.menu import build_main_menu

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """
    Configure the root logger from LOG_LEVEL / LOG_FILE

    With LOG_FILE set the log stays out of the interactive screen.
    """
    if settings.LOG_FILE:
        handler = logging.FileHandler(settings.LOG_FILE, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        handlers=[handler],
        force=True
    )


def main() -> None:
    """Main entry point."""
    try:
        setup_logging()
        console.print("🚀 Iniciando aplicação da loja...")
        build_main_menu().run()
    except KeyboardInterrupt:
        console.print("\n\nInterrompido pelo usuário. Saindo...")
        sys.exit(0)
    except Exception as e:
        logger.critical("Fatal error", exc_info=True)
        error_console.print(f"\nErro fatal: {e}", style="red")
        sys.exit(1)


if __name__ == "__main__":
    main()
