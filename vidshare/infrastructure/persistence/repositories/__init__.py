"""
Implementations en memoire des repositories.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Stocke les entites dans un dict indexe par leur cle unique
- Conserve l'ordre d'insertion pour les listings
"""

from vidshare.infrastructure.persistence.repositories.user_repository import (
    InMemoryUserRepository,
)
from vidshare.infrastructure.persistence.repositories.channel_repository import (
    InMemoryChannelRepository,
)
from vidshare.infrastructure.persistence.repositories.video_repository import (
    InMemoryVideoRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryChannelRepository",
    "InMemoryVideoRepository",
]
