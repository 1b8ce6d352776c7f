"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI : configuration,
generateur d'identifiants, tables en memoire et services.
"""

from dependency_injector import containers, providers

from .config import Settings
from .core.identity import IdGenerator
from .infrastructure.persistence.repositories import (
    InMemoryChannelRepository,
    InMemoryUserRepository,
    InMemoryVideoRepository,
)
from .services.benchmark import BenchmarkService
from .services.platform import PlatformService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Les tables et le service de plateforme sont des Singletons : un container
    porte l'etat complet d'une execution. Un nouveau container repart d'un
    etat vide.

    Utilisation :
        container = Container()
        platform = container.platform_service()
        benchmark = container.benchmark_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Generateur d'ids partage par les videos et les commentaires
    id_generator = providers.Singleton(IdGenerator)

    # Tables de l'annuaire
    user_repository = providers.Singleton(InMemoryUserRepository)
    channel_repository = providers.Singleton(InMemoryChannelRepository)
    video_repository = providers.Singleton(InMemoryVideoRepository)

    # Service de plateforme - porte la session courante
    platform_service = providers.Singleton(
        PlatformService,
        users=user_repository,
        channels=channel_repository,
        videos=video_repository,
        id_generator=id_generator,
        perf_logging=config.provided.perf_logging,
    )

    # Benchmark - Factory car parametre par la configuration a chaque execution
    benchmark_service = providers.Factory(
        BenchmarkService,
        videos=video_repository,
        lookups=config.provided.benchmark_lookups,
        comments=config.provided.benchmark_comments,
        query=config.provided.benchmark_query,
    )
