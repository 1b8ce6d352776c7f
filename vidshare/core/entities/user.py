"""
Entités utilisateur et playlist.

Les playlists et l'historique de visionnage stockent des identifiants de
vidéos, jamais des références : une vidéo absente de la table est ignorée
à la lecture plutôt que rejetée à l'insertion.
"""

from dataclasses import dataclass, field
from typing import Callable, ClassVar, Optional

from loguru import logger

from vidshare.core.entities.base import Entity
from vidshare.core.entities.channel import Channel
from vidshare.core.entities.video import Video
from vidshare.core.value_objects import OpResult, PlaylistEntry


@dataclass
class Playlist:
    """
    Playlist personnelle d'un utilisateur.

    Attributs :
        name : Nom, unique parmi les playlists de son propriétaire
        video_ids : Identifiants des vidéos dans l'ordre d'ajout (doublons autorises)
    """

    name: str
    video_ids: list[int] = field(default_factory=list)

    def add(self, video_id: int, title: str) -> OpResult:
        """Ajoute un id en fin de playlist. Le titre ne sert qu'au message."""
        self.video_ids.append(video_id)
        logger.info("Video ajoutee a la playlist", title=title, playlist=self.name)
        return OpResult.ok(
            f'"{title}" ajoutee a la playlist "{self.name}"', id=video_id
        )

    @property
    def entries(self) -> tuple[int, ...]:
        return tuple(self.video_ids)

    def resolve(
        self, lookup: Callable[[int], Optional[Video]]
    ) -> list[PlaylistEntry]:
        """
        Résout les ids de la playlist contre la table des vidéos.

        Les ids sans vidéo correspondante sont ignorés silencieusement ;
        les positions restent celles de la liste d'origine.

        Args:
            lookup: Fonction id -> Video (ou None si absente)

        Returns:
            Entrées résolues dans l'ordre d'insertion
        """
        resolved = []
        for position, video_id in enumerate(self.video_ids, start=1):
            video = lookup(video_id)
            if video is not None:
                resolved.append(
                    PlaylistEntry(position=position, video_id=video.id, title=video.title)
                )
        return resolved


@dataclass
class User(Entity):
    """
    Compte utilisateur.

    Attributs :
        username : Nom unique de l'utilisateur
        subscriptions : Noms des chaînes suivies
        history : Ids des vidéos regardees (sans déduplication ni limite)
        playlists : Playlists par nom
    """

    username: str
    subscriptions: set[str] = field(default_factory=set)
    history: list[int] = field(default_factory=list)
    playlists: dict[str, Playlist] = field(default_factory=dict)

    _read_only: ClassVar[frozenset[str]] = frozenset({"username"})

    def watch(self, video: Optional[Video]) -> OpResult:
        """Enregistre la vidéo dans l'historique puis lance sa lecture."""
        if video is None:
            return OpResult.not_found("Video introuvable")

        self.history.append(video.id)
        return video.play()

    def add_comment(self, video: Optional[Video], text: str) -> OpResult:
        if video is None:
            return OpResult.not_found("Video introuvable")
        return video.add_comment(self.username, text)

    def like_comment(self, video: Optional[Video], comment_id: int) -> OpResult:
        if video is None:
            return OpResult.not_found("Video introuvable")
        return video.like_comment(comment_id)

    def remove_comment(
        self, video: Optional[Video], comment_id: int, channel_owner: str
    ) -> OpResult:
        if video is None:
            return OpResult.not_found("Video introuvable")
        return video.remove_comment(comment_id, self.username, channel_owner)

    def create_playlist(self, name: str) -> OpResult:
        if not name:
            return OpResult.invalid_input("Nom de playlist vide")
        if name in self.playlists:
            return OpResult.already_exists(f'La playlist "{name}" existe deja')

        self.playlists[name] = Playlist(name)
        return OpResult.ok(f'Playlist "{name}" creee')

    def get_playlist(self, name: str) -> Optional[Playlist]:
        return self.playlists.get(name)

    def subscribe_channel(self, channel: Channel) -> OpResult:
        """
        Abonne l'utilisateur a une chaîne.

        Si l'abonnement figure déjà dans l'enregistrement local, la chaîne
        n'est pas sollicitée : les deux ensembles restent synchronisés tant
        que la chaîne n'est modifiée que par ce chemin.
        """
        if channel.name in self.subscriptions:
            return OpResult.already_exists(
                f"{self.username} est deja abonne a {channel.name}"
            )

        self.subscriptions.add(channel.name)
        return channel.subscribe(self.username)

    def unsubscribe_channel(self, channel: Channel) -> OpResult:
        if channel.name not in self.subscriptions:
            return OpResult.not_found(
                f"{self.username} n'est pas abonne a {channel.name}"
            )

        self.subscriptions.discard(channel.name)
        return channel.unsubscribe(self.username)
