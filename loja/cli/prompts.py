"""
Prompt helpers built on rich.prompt

text() keeps asking until the validator accepts the answer, so invalid
input never leaves this module. Prompt messages are rendered as rich
markup: escape any user data interpolated into them.
"""
from typing import Callable, List, Optional, Tuple, Union

from rich.prompt import Confirm, Prompt

from loja.cli.console import console

# Returns True when the value is accepted, or the message to show otherwise
Validator = Callable[[str], Union[bool, str]]


class MenuPrompt(Prompt):
    illegal_choice_message = "[prompt.invalid.choice]Escolha uma das opções disponíveis"


class YesNoPrompt(Confirm):
    validate_error_message = "[prompt.invalid]Digite S ou N"
    choices: List[str] = ["s", "n"]


def text(message: str, validate: Optional[Validator] = None, default: Optional[str] = None) -> str:
    """
    Ask for a line of text (whitespace stripped)

    Args:
        message: Prompt shown to the operator
        validate: Predicate returning True or an error message
        default: Value returned when the operator just presses Enter
    """
    while True:
        if default is None:
            value = Prompt.ask(message, console=console)
        else:
            value = Prompt.ask(message, console=console, default=default)
        value = value.strip()

        if validate is None:
            return value

        result = validate(value)
        if result is True:
            return value
        console.print(f">> {result}", style="red")


def select(message: str, choices: List[Tuple[str, str]]) -> str:
    """
    Show a numbered list and return the value of the chosen entry

    Args:
        message: Menu title
        choices: (label, value) pairs; only the values are accepted as input
    """
    console.print()
    console.print(message, style="bold")
    for label, _ in choices:
        console.print(f"  {label}")

    return MenuPrompt.ask(
        "Escolha uma opção",
        console=console,
        choices=[value for _, value in choices],
        show_choices=False
    )


def confirm(message: str, default: bool = True) -> bool:
    """Yes/no question, answered with S or N"""
    return YesNoPrompt.ask(message, console=console, default=default)
