"""
Objets valeur pour le resultat des operations du domaine.

Chaque operation du domaine retourne un OpResult plutot que de lever une
exception : le statut est une valeur de OpStatus, verifiable par les tests,
accompagnee d'un message lisible et d'un identifiant ou d'une charge utile
optionnels.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OpStatus(str, Enum):
    """Statut d'une operation du domaine.

    Valeurs:
        SUCCESS: Operation reussie
        NOT_FOUND: Utilisateur, chaine, video, commentaire ou playlist absent
        ALREADY_EXISTS: Doublon d'une entite a cle unique, abonnement ou lecture deja active
        PERMISSION_DENIED: Demandeur non autorise (suppression de commentaire, upload)
        INVALID_INPUT: Saisie invalide ou pause sans lecture en cours
        NOT_LOGGED_IN: Commande necessitant une session sans utilisateur courant
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PERMISSION_DENIED = "permission_denied"
    INVALID_INPUT = "invalid_input"
    NOT_LOGGED_IN = "not_logged_in"


@dataclass(frozen=True)
class OpResult:
    """
    Resultat structure d'une operation.

    Attributs:
        status: Statut de l'operation
        message: Message lisible destine a l'affichage
        id: Identifiant cree ou concerne (video, commentaire), si applicable
        value: Charge utile typee (nombre de vues, Video uploadee, listing...)
    """

    status: OpStatus
    message: str = ""
    id: Optional[int] = None
    value: Any = None

    @property
    def is_success(self) -> bool:
        """Vrai si l'operation a reussi."""
        return self.status is OpStatus.SUCCESS

    @classmethod
    def ok(cls, message: str = "", id: Optional[int] = None, value: Any = None) -> "OpResult":
        return cls(OpStatus.SUCCESS, message, id, value)

    @classmethod
    def not_found(cls, message: str) -> "OpResult":
        return cls(OpStatus.NOT_FOUND, message)

    @classmethod
    def already_exists(cls, message: str) -> "OpResult":
        return cls(OpStatus.ALREADY_EXISTS, message)

    @classmethod
    def permission_denied(cls, message: str) -> "OpResult":
        return cls(OpStatus.PERMISSION_DENIED, message)

    @classmethod
    def invalid_input(cls, message: str) -> "OpResult":
        return cls(OpStatus.INVALID_INPUT, message)

    @classmethod
    def not_logged_in(cls, message: str = "Connexion requise") -> "OpResult":
        return cls(OpStatus.NOT_LOGGED_IN, message)
