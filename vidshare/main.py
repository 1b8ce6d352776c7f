"""
Point d'entree CLI de vidshare.

Configure le logging et fournit les commandes CLI. Sans sous-commande,
le shell interactif est lance.
"""

import typer
from loguru import logger

from .adapters.cli.commands import VERSION, info, shell, version
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="vidshare",
    help="Simulation d'une plateforme de partage de videos",
)


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """vidshare - Plateforme video en memoire."""
    if ctx.invoked_subcommand is None:
        shell()


app.command()(shell)
app.command()(info)
app.command()(version)


def main() -> None:
    """Point d'entree de l'application."""
    settings = Container().config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Demarrage de vidshare", version=VERSION)

    app()


if __name__ == "__main__":
    main()
