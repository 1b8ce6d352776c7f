"""
Module de stockage en memoire pour vidshare.

Les tables vivent le temps du processus : aucune persistance entre deux
executions.

Usage:
    from vidshare.infrastructure.persistence import InMemoryVideoRepository

    videos = InMemoryVideoRepository()
    videos.save(video)
    videos.get_by_id(video.id)
"""

from vidshare.infrastructure.persistence.repositories import (
    InMemoryChannelRepository,
    InMemoryUserRepository,
    InMemoryVideoRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryChannelRepository",
    "InMemoryVideoRepository",
]
