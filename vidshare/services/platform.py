"""
Service de plateforme orchestrant l'annuaire et la session.

Le PlatformService est le point d'entree unique des commandes : il resout
les entites nommees dans les trois tables (utilisateurs, chaines, videos),
echoue immediatement en NOT_FOUND si l'une d'elles manque, puis delegue
l'operation a l'entite concernee.

Responsabilites:
- Inscription, connexion et deconnexion (session courante optionnelle)
- Creation de chaines et upload de videos par leur proprietaire
- Abonnements, visionnage, commentaires et likes
- Playlists personnelles et leur lecture
- Recherche et listings en lecture seule
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from vidshare.core.entities import Channel, User
from vidshare.core.identity import IdGenerator
from vidshare.core.ports.repositories import (
    IChannelRepository,
    IUserRepository,
    IVideoRepository,
)
from vidshare.core.value_objects import OpResult
from vidshare.services.perf import perf_timer


@dataclass
class Session:
    """Session du shell : utilisateur courant, ou None en mode anonyme."""

    current: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.current is not None


class PlatformService:
    """
    Service applicatif de la plateforme video.

    Toutes les operations retournent un OpResult ; aucune erreur du domaine
    n'est levee.

    Example:
        service = PlatformService(
            users=InMemoryUserRepository(),
            channels=InMemoryChannelRepository(),
            videos=InMemoryVideoRepository(),
            id_generator=IdGenerator(),
        )

        service.register("alice")
        service.login("alice")
        service.create_channel("Vlogs")
        result = service.upload("Vlogs", "Intro", 120)
        service.watch(result.id)
    """

    def __init__(
        self,
        users: IUserRepository,
        channels: IChannelRepository,
        videos: IVideoRepository,
        id_generator: IdGenerator,
        perf_logging: bool = False,
    ) -> None:
        """
        Initialise le service avec les tables de l'annuaire.

        Args:
            users: Table des utilisateurs par nom
            channels: Table des chaines par nom
            videos: Table globale des videos par id
            id_generator: Generateur d'ids transmis aux chaines creees
            perf_logging: Active la journalisation des durees d'operation
        """
        self._users = users
        self._channels = channels
        self._videos = videos
        self._ids = id_generator
        self.session = Session()
        self.perf_logging = perf_logging

    @property
    def current_user(self) -> Optional[User]:
        return self.session.current

    def toggle_perf_logging(self) -> OpResult:
        self.perf_logging = not self.perf_logging
        state = "ACTIVEE" if self.perf_logging else "DESACTIVEE"
        return OpResult.ok(f"Mesure de performance {state}", value=self.perf_logging)

    # ------------------------------------------------------------------
    # Comptes et session
    # ------------------------------------------------------------------

    def register(self, username: str) -> OpResult:
        if not username:
            return OpResult.invalid_input("Nom d'utilisateur vide")
        if self._users.get_by_username(username) is not None:
            return OpResult.already_exists(f"L'utilisateur {username} existe deja")

        self._users.save(User(username))
        logger.info("Utilisateur inscrit", username=username)
        return OpResult.ok(f"Utilisateur inscrit : {username}")

    def login(self, username: str) -> OpResult:
        user = self._users.get_by_username(username)
        if user is None:
            return OpResult.not_found(
                f"Utilisateur {username} introuvable. Inscrivez-vous d'abord."
            )

        self.session.current = user
        logger.debug("Connexion", username=username)
        return OpResult.ok(f"Connecte en tant que {username}")

    def logout(self) -> OpResult:
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in("Aucun utilisateur connecte")

        self.session.current = None
        logger.debug("Deconnexion", username=user.username)
        return OpResult.ok(f"{user.username} deconnecte")

    # ------------------------------------------------------------------
    # Chaines et videos
    # ------------------------------------------------------------------

    def create_channel(self, name: str, description: str = "") -> OpResult:
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in()
        if not name:
            return OpResult.invalid_input("Nom de chaine vide")
        if self._channels.get_by_name(name) is not None:
            return OpResult.already_exists(f'La chaine "{name}" existe deja')

        channel = Channel(
            name=name,
            owner=user.username,
            description=description,
            id_generator=self._ids,
        )
        self._channels.save(channel)
        logger.info("Chaine creee", channel=name, owner=user.username)
        return OpResult.ok(f'Chaine "{name}" creee', value=channel)

    def upload(self, channel_name: str, title: str, duration_seconds: int) -> OpResult:
        """
        Upload une video sur une chaine de l'utilisateur courant.

        Returns:
            SUCCESS avec l'id de la video et la Video en value,
            NOT_LOGGED_IN, NOT_FOUND, PERMISSION_DENIED ou INVALID_INPUT
        """
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in()
        channel = self._channels.get_by_name(channel_name)
        if channel is None:
            return OpResult.not_found(f'Chaine "{channel_name}" introuvable')
        if channel.owner != user.username:
            return OpResult.permission_denied(
                f'{user.username} n\'est pas proprietaire de la chaine "{channel_name}"'
            )
        if duration_seconds < 0:
            return OpResult.invalid_input("La duree doit etre positive")

        with perf_timer("Channel.upload", self.perf_logging):
            video = channel.upload(title, duration_seconds)
            self._videos.save(video)

        return OpResult.ok(
            f'"{title}" uploadee (id={video.id}) sur la chaine {channel_name}',
            id=video.id,
            value=video,
        )

    def subscribe(self, channel_name: str) -> OpResult:
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in()
        channel = self._channels.get_by_name(channel_name)
        if channel is None:
            return OpResult.not_found(f'Chaine "{channel_name}" introuvable')

        result = user.subscribe_channel(channel)
        if result.is_success:
            logger.info("Abonnement", username=user.username, channel=channel_name)
        return result

    def unsubscribe(self, channel_name: str) -> OpResult:
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in()
        channel = self._channels.get_by_name(channel_name)
        if channel is None:
            return OpResult.not_found(f'Chaine "{channel_name}" introuvable')

        result = user.unsubscribe_channel(channel)
        if result.is_success:
            logger.info("Desabonnement", username=user.username, channel=channel_name)
        return result

    def watch(self, video_id: int) -> OpResult:
        """
        Regarde une video.

        Connecte : passe par User.watch (historique + lecture).
        Anonyme : lance directement Video.play.
        """
        video = self._videos.get_by_id(video_id)
        if video is None:
            return OpResult.not_found(f"Video {video_id} introuvable")

        user = self.session.current
        with perf_timer("Video.play", self.perf_logging):
            if user is None:
                return video.play()
            return user.watch(video)

    def pause(self, video_id: int) -> OpResult:
        video = self._videos.get_by_id(video_id)
        if video is None:
            return OpResult.not_found(f"Video {video_id} introuvable")
        return video.pause()

    # ------------------------------------------------------------------
    # Commentaires
    # ------------------------------------------------------------------

    def comment(self, video_id: int, text: str) -> OpResult:
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in()
        video = self._videos.get_by_id(video_id)
        if video is None:
            return OpResult.not_found(f"Video {video_id} introuvable")

        with perf_timer("Video.addComment", self.perf_logging):
            return user.add_comment(video, text)

    def like_comment(self, video_id: int, comment_id: int) -> OpResult:
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in()
        video = self._videos.get_by_id(video_id)
        if video is None:
            return OpResult.not_found(f"Video {video_id} introuvable")

        with perf_timer("Video.likeComment", self.perf_logging):
            return user.like_comment(video, comment_id)

    def remove_comment(self, video_id: int, comment_id: int) -> OpResult:
        """Supprime un commentaire si l'utilisateur courant en est l'auteur ou possede la chaine."""
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in()
        video = self._videos.get_by_id(video_id)
        if video is None:
            return OpResult.not_found(f"Video {video_id} introuvable")

        channel = self._channels.get_by_name(video.uploader)
        owner = channel.owner if channel is not None else ""
        result = user.remove_comment(video, comment_id, owner)
        if result.is_success:
            logger.info(
                "Commentaire supprime",
                video_id=video_id,
                comment_id=comment_id,
                requester=user.username,
            )
        return result

    def list_comments(self, video_id: int) -> OpResult:
        video = self._videos.get_by_id(video_id)
        if video is None:
            return OpResult.not_found(f"Video {video_id} introuvable")
        return OpResult.ok(
            f'Commentaires de "{video.title}"', id=video.id, value=video.list_comments()
        )

    # ------------------------------------------------------------------
    # Playlists
    # ------------------------------------------------------------------

    def create_playlist(self, name: str) -> OpResult:
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in()
        return user.create_playlist(name)

    def add_to_playlist(self, playlist_name: str, video_id: int) -> OpResult:
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in()
        playlist = user.get_playlist(playlist_name)
        if playlist is None:
            return OpResult.not_found(f'Playlist "{playlist_name}" introuvable')
        video = self._videos.get_by_id(video_id)
        if video is None:
            return OpResult.not_found(f"Video {video_id} introuvable")

        return playlist.add(video.id, video.title)

    def play_playlist(self, playlist_name: str) -> OpResult:
        """
        Lit une playlist.

        Resout les ids contre la table des videos (les ids orphelins sont
        ignores), puis enchaine lecture et pause pour chaque video, dans l'ordre.

        Returns:
            SUCCESS avec la liste des PlaylistEntry lues en value
        """
        user = self.session.current
        if user is None:
            return OpResult.not_logged_in()
        playlist = user.get_playlist(playlist_name)
        if playlist is None:
            return OpResult.not_found(f'Playlist "{playlist_name}" introuvable')

        with perf_timer("Playlist playback", self.perf_logging):
            entries = playlist.resolve(self._videos.get_by_id)
            for entry in entries:
                video = self._videos.get_by_id(entry.video_id)
                played = video.play()
                paused = video.pause()
                logger.debug(
                    "Lecture playlist",
                    playlist=playlist_name,
                    video_id=entry.video_id,
                    play=played.status.value,
                    pause=paused.status.value,
                )

        return OpResult.ok(f'Lecture de la playlist "{playlist_name}"', value=entries)

    # ------------------------------------------------------------------
    # Recherche et listings
    # ------------------------------------------------------------------

    def search(self, query: str) -> OpResult:
        with perf_timer("Search operation", self.perf_logging):
            found = self._videos.search_by_title(query)
        return OpResult.ok(f"{len(found)} resultat(s) pour \"{query}\"", value=found)

    def list_videos(self) -> OpResult:
        with perf_timer("List all videos", self.perf_logging):
            videos = self._videos.list_all()
        return OpResult.ok(f"{len(videos)} video(s)", value=videos)

    def list_channel_uploads(self, channel_name: str) -> OpResult:
        channel = self._channels.get_by_name(channel_name)
        if channel is None:
            return OpResult.not_found(f'Chaine "{channel_name}" introuvable')
        return OpResult.ok(
            f"Uploads de la chaine {channel_name}", value=channel.list_uploads()
        )
