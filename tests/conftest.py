"""
Fixtures pytest partagées pour les tests vidshare.

Ce module contient les fixtures communes utilisées dans les tests:
- Générateur d'ids isolé par test
- PlatformService sur des tables en mémoire vides
- Scénario de base : alice connectée, propriétaire de la chaîne "Vlogs"
- Console Rich écrivant dans un buffer
"""

import io

import pytest
from rich.console import Console

from vidshare.core.entities import Channel
from vidshare.core.identity import IdGenerator
from vidshare.infrastructure.persistence.repositories import (
    InMemoryChannelRepository,
    InMemoryUserRepository,
    InMemoryVideoRepository,
)
from vidshare.services.platform import PlatformService


@pytest.fixture
def id_generator() -> IdGenerator:
    """Générateur d'ids repartant de zéro pour chaque test."""
    return IdGenerator()


@pytest.fixture
def video_repo() -> InMemoryVideoRepository:
    return InMemoryVideoRepository()


@pytest.fixture
def channel_repo() -> InMemoryChannelRepository:
    return InMemoryChannelRepository()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def platform(
    user_repo: InMemoryUserRepository,
    channel_repo: InMemoryChannelRepository,
    video_repo: InMemoryVideoRepository,
    id_generator: IdGenerator,
) -> PlatformService:
    """PlatformService sur des tables vides, sans session."""
    return PlatformService(
        users=user_repo,
        channels=channel_repo,
        videos=video_repo,
        id_generator=id_generator,
    )


@pytest.fixture
def alice_platform(platform: PlatformService) -> PlatformService:
    """alice inscrite, connectée et propriétaire de la chaîne "Vlogs"."""
    platform.register("alice")
    platform.login("alice")
    platform.create_channel("Vlogs", "Mes vlogs")
    return platform


@pytest.fixture
def channel(id_generator: IdGenerator) -> Channel:
    """Chaîne "Vlogs" appartenant a alice."""
    return Channel(name="Vlogs", owner="alice", id_generator=id_generator)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def test_console(output: io.StringIO) -> Console:
    """Console Rich sans couleur écrivant dans un buffer."""
    return Console(file=output, width=120, color_system=None, force_terminal=False)
