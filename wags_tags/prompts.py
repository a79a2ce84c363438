"""
Interactive Prompts

Minimal terminal prompts built on typer. Every prompt re-asks until it
gets an acceptable answer; an empty answer selects the default.
"""

from typing import Callable, List, Optional

import typer


def select(message: str, choices: List[str], default: Optional[str] = None) -> str:
    """Ask the user to pick one of `choices` by number or by name."""
    typer.echo(message)
    for i, choice in enumerate(choices, start=1):
        marker = " (default)" if choice == default else ""
        typer.echo(f"{i:2}. {choice}{marker}")

    default_idx = str(choices.index(default) + 1) if default in choices else None
    while True:
        raw = typer.prompt("Pick a number", default=default_idx).strip()
        if raw in choices:
            return raw
        try:
            idx = int(raw)
        except ValueError:
            typer.echo("invalid number")
            continue
        if idx < 1 or idx > len(choices):
            typer.echo("out of range")
            continue
        return choices[idx - 1]


def text(message: str, default: Optional[str] = None, validate: Optional[Callable[[str], Optional[str]]] = None) -> str:
    """Ask for free text.

    Args:
        message: Question to show
        default: Value used for an empty answer; without one an empty answer is allowed
        validate: Returns an error message for unacceptable answers, None otherwise
    """
    while True:
        answer = typer.prompt(message, default=default or "", show_default=bool(default)).strip()
        error = validate(answer) if validate else None
        if error is None:
            return answer
        typer.echo(error)


def confirm(message: str, default: bool = False) -> bool:
    """Ask a yes/no question."""
    return typer.confirm(message, default=default)
