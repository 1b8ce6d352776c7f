"""
Implementation en memoire du repository Video.

La table globale des videos reference des videos possedees par leurs
chaines : elle sert de point de resolution pour les ids stockes dans les
playlists et l'historique.
"""

from typing import Optional

from vidshare.core.entities import Video
from vidshare.core.ports.repositories import IVideoRepository


class InMemoryVideoRepository(IVideoRepository):
    """Table des videos par identifiant."""

    def __init__(self) -> None:
        self._videos: dict[int, Video] = {}

    def get_by_id(self, video_id: int) -> Optional[Video]:
        return self._videos.get(video_id)

    def save(self, video: Video) -> Video:
        self._videos[video.id] = video
        return video

    def list_all(self) -> list[Video]:
        return list(self._videos.values())

    def search_by_title(self, query: str) -> list[Video]:
        """
        Recherche par sous-chaine, insensible a la casse.

        Une requete vide correspond a toutes les videos.
        """
        needle = query.casefold()
        return [v for v in self._videos.values() if needle in v.title.casefold()]
