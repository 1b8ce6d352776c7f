"""
Commandes CLI de la plateforme (shell, info, version).
"""

import typer

from vidshare.container import Container

from . import console
from .shell import Shell

VERSION = "0.1.0"


def shell() -> None:
    """
    Lance le shell interactif de la plateforme.

    L'etat (utilisateurs, chaines, videos) vit le temps de la session.

    Exemples:
      vidshare shell
      VIDSHARE_PERF_LOGGING=true vidshare shell
    """
    container = Container()
    Shell(
        platform=container.platform_service(),
        benchmark_factory=container.benchmark_service,
        console=console,
    ).run()


def info() -> None:
    """Affiche la configuration actuelle."""
    config = Container().config()
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")
    typer.echo(f"Mesure de performance : {'activee' if config.perf_logging else 'desactivee'}")
    typer.echo(
        f"Benchmark : {config.benchmark_lookups} recherches, "
        f"{config.benchmark_comments} commentaires, requete \"{config.benchmark_query}\""
    )


def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"vidshare v{VERSION}")
