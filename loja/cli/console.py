"""
Shared rich consoles

Results go to stdout, errors to stderr. Markup is off so names and emails
typed by the operator are printed exactly as stored; use style= for color.
"""
from rich.console import Console

console = Console(markup=False, highlight=False, emoji=False, soft_wrap=True)
error_console = Console(stderr=True, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_error(action: str, error: Exception) -> None:
    """Print a handler failure as '❌ <action>: <message>' on stderr"""
    error_console.print(f"❌ {action}: {error}", style="red")
