"""
Package CLI de la plateforme avec Rich et Typer.

Reexporte la console partagee et le shell interactif.
"""

from rich.console import Console

# Console globale pour tous les affichages
console = Console()

from .shell import EXIT_SELECTOR, MenuCommand, Shell  # noqa: E402

__all__ = [
    "console",
    "EXIT_SELECTOR",
    "MenuCommand",
    "Shell",
]
