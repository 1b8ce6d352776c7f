"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats des trois tables de
l'annuaire : utilisateurs par nom, chaînes par nom, vidéos par id.
Les implementations (adaptateurs) fournissent le stockage concret
(en mémoire pour la durée du processus).
"""

from abc import ABC, abstractmethod
from typing import Optional

from vidshare.core.entities import Channel, User, Video


class IUserRepository(ABC):
    """
    Interface de stockage des utilisateurs.

    Définit les opérations pour enregistrer et retrouver les entités User.
    """

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[User]:
        """Récupère un utilisateur par son nom."""
        ...

    @abstractmethod
    def save(self, user: User) -> User:
        """Enregistre un utilisateur (insertion ou remplacement)."""
        ...


class IChannelRepository(ABC):
    """
    Interface de stockage des chaînes.

    Définit les opérations pour enregistrer et retrouver les entités Channel.
    """

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Channel]:
        """Récupère une chaîne par son nom."""
        ...

    @abstractmethod
    def save(self, channel: Channel) -> Channel:
        """Enregistre une chaîne (insertion ou remplacement)."""
        ...


class IVideoRepository(ABC):
    """
    Interface de la table globale des vidéos.

    La table référence les vidéos sans les posseder : chaque vidéo
    appartient a sa chaîne.
    """

    @abstractmethod
    def get_by_id(self, video_id: int) -> Optional[Video]:
        """Récupère une vidéo par son identifiant."""
        ...

    @abstractmethod
    def save(self, video: Video) -> Video:
        """Enregistre une vidéo dans la table."""
        ...

    @abstractmethod
    def list_all(self) -> list[Video]:
        """Liste toutes les vidéos dans l'ordre d'enregistrement."""
        ...

    @abstractmethod
    def search_by_title(self, query: str) -> list[Video]:
        """Recherche les vidéos dont le titre contient query (insensible à la casse)."""
        ...
