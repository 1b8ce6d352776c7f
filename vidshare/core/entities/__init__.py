"""
Entités métier représentant les concepts du domaine.

Les entités sont des objets mutables dotés d'une identite.
Elles encapsulent les règles métier et leur comportement.

Exports:
- Entity: Base interdisant la reaffectation des attributs d'identite
- Comment: Commentaire sur une vidéo
- Video: Video avec son état de lecture et ses commentaires
- Channel: Chaîne possedant ses vidéos et ses abonnés
- Playlist: Liste ordonnée d'ids de vidéos
- User: Compte utilisateur (abonnements, historique, playlists)
"""

from vidshare.core.entities.base import Entity
from vidshare.core.entities.video import Comment, Video
from vidshare.core.entities.channel import Channel
from vidshare.core.entities.user import Playlist, User

__all__ = [
    "Entity",
    "Comment",
    "Video",
    "Channel",
    "Playlist",
    "User",
]
