"""Entree resolue d'une playlist."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaylistEntry:
    """
    Video d'une playlist resolue contre la table des videos.

    Attributs:
        position: Position 1-based dans la liste d'ids de la playlist
        video_id: Identifiant de la video
        title: Titre de la video au moment de la resolution
    """

    position: int
    video_id: int
    title: str
