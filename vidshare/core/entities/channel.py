"""
Entité chaîne.

Une Channel possède ses vidéos pour toute leur durée de vie et gere son
ensemble d'abonnés. Son nom et son propriétaire sont fixes à la création.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from loguru import logger

from vidshare.core.entities.base import Entity
from vidshare.core.entities.video import Video
from vidshare.core.identity import IdGenerator, get_default_id_generator
from vidshare.core.value_objects import OpResult


@dataclass
class Channel(Entity):
    """
    Chaîne d'un utilisateur.

    Attributs :
        name : Nom unique de la chaîne
        owner : Nom de l'utilisateur propriétaire
        description : Description libre
        uploads : Videos dans l'ordre d'upload
        subscribers : Noms des utilisateurs abonnés
    """

    name: str
    owner: str
    description: str = ""
    id_generator: IdGenerator = field(
        default_factory=get_default_id_generator, repr=False, compare=False
    )
    uploads: list[Video] = field(default_factory=list, init=False)
    subscribers: set[str] = field(default_factory=set, init=False)

    _read_only: ClassVar[frozenset[str]] = frozenset({"name", "owner"})

    def upload(self, title: str, duration_seconds: int) -> Video:
        """Crée une vidéo hébergée par cette chaîne et l'ajoute aux uploads."""
        video = Video(
            title=title,
            uploader=self.name,
            duration_seconds=duration_seconds,
            id_generator=self.id_generator,
        )
        self.uploads.append(video)
        logger.info(
            "Video uploadee", title=title, video_id=video.id, channel=self.name
        )
        return video

    def subscribe(self, username: str) -> OpResult:
        if username in self.subscribers:
            return OpResult.already_exists(f"{username} est deja abonne a {self.name}")

        self.subscribers.add(username)
        return OpResult.ok(f"{username} est abonne a {self.name}")

    def unsubscribe(self, username: str) -> OpResult:
        if username not in self.subscribers:
            return OpResult.not_found(f"{username} n'est pas abonne a {self.name}")

        self.subscribers.discard(username)
        return OpResult.ok(f"{username} est desabonne de {self.name}")

    def list_uploads(self) -> tuple[Video, ...]:
        """Videos de la chaîne dans l'ordre d'upload (lecture seule)."""
        return tuple(self.uploads)
