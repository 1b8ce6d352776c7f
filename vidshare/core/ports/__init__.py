"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports repository : Contrats de stockage de l'annuaire
- IUserRepository : Utilisateurs par nom
- IChannelRepository : Chaines par nom
- IVideoRepository : Videos par identifiant
"""

from vidshare.core.ports.repositories import (
    IChannelRepository,
    IUserRepository,
    IVideoRepository,
)

__all__ = [
    "IUserRepository",
    "IChannelRepository",
    "IVideoRepository",
]
