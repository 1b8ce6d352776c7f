"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- OpStatus : Taxonomie des statuts d'operation
- OpResult : Resultat structure (statut + message + identifiant optionnel)
- PlaylistEntry : Entree resolue d'une playlist (position, titre, id)
"""

from vidshare.core.value_objects.result import OpResult, OpStatus
from vidshare.core.value_objects.playlist_entry import PlaylistEntry

__all__ = [
    "OpResult",
    "OpStatus",
    "PlaylistEntry",
]
