"""
Entités vidéo et commentaire.

Une Video possède ses commentaires et suit son état de lecture (lecture / pause)
ainsi que son compteur de vues. Les identifiants des vidéos et des commentaires
proviennent du meme IdGenerator.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from vidshare.core.entities.base import Entity
from vidshare.core.identity import IdGenerator, get_default_id_generator
from vidshare.core.value_objects import OpResult


@dataclass
class Comment(Entity):
    """
    Commentaire laissé sur une vidéo.

    Attributs :
        id : Identifiant unique, attribue une seule fois à la création
        author : Nom de l'utilisateur auteur
        text : Contenu du commentaire
        likes : Nombre de likes (jamais négatif)
        created_at : Date de création
    """

    id: int
    author: str
    text: str
    likes: int = 0
    created_at: datetime = field(default_factory=datetime.now)

    _read_only: ClassVar[frozenset[str]] = frozenset({"id"})

    def like(self) -> int:
        """Ajoute un like et retourne le nouveau total."""
        self.likes += 1
        return self.likes


@dataclass
class Video(Entity):
    """
    Video uploadée sur une chaîne.

    L'identifiant est tire du générateur à la construction et ne change plus.
    Le compteur de vues n'augmente qu'a chaque passage effectif en lecture.

    Attributs :
        title : Titre de la vidéo
        uploader : Nom de la chaîne hébergeant la vidéo
        duration_seconds : Durée en secondes
        id : Identifiant unique (lecture seule apres création)
        views : Nombre de vues (lecture seule, ne fait que croitre)
        playing : True si en lecture, False si en pause
        comments : Commentaires dans l'ordre d'insertion
    """

    title: str
    uploader: str
    duration_seconds: int = 0
    id_generator: IdGenerator = field(
        default_factory=get_default_id_generator, repr=False, compare=False
    )
    id: int = field(init=False)
    _views: int = field(default=0, init=False)
    playing: bool = field(default=False, init=False)
    comments: list[Comment] = field(default_factory=list, init=False)

    _read_only: ClassVar[frozenset[str]] = frozenset({"id"})

    def __post_init__(self) -> None:
        self.id = self.id_generator.next()

    @property
    def views(self) -> int:
        return self._views

    def play(self) -> OpResult:
        """
        Passe la vidéo en lecture.

        Returns:
            SUCCESS avec le nouveau nombre de vues en value,
            ALREADY_EXISTS si la vidéo est déjà en lecture (aucun changement)
        """
        if self.playing:
            return OpResult.already_exists(f'Lecture deja en cours : "{self.title}"')

        self.playing = True
        self._views += 1
        return OpResult.ok(
            f'Lecture de "{self.title}" (vues : {self.views})',
            id=self.id,
            value=self.views,
        )

    def pause(self) -> OpResult:
        """Met la vidéo en pause. INVALID_INPUT si elle n'est pas en lecture."""
        if not self.playing:
            return OpResult.invalid_input(f'"{self.title}" n\'est pas en lecture')

        self.playing = False
        return OpResult.ok(f'Pause de "{self.title}"', id=self.id)

    def add_comment(self, author: str, text: str) -> OpResult:
        """
        Ajoute un commentaire en fin de liste.

        L'existence de l'auteur n'est pas vérifiée ici, c'est la responsabilité
        de l'appelant.

        Returns:
            SUCCESS avec l'id du nouveau commentaire
        """
        comment = Comment(id=self.id_generator.next(), author=author, text=text)
        self.comments.append(comment)
        return OpResult.ok(
            f"Commentaire {comment.id} ajoute par {author}",
            id=comment.id,
            value=comment,
        )

    def find_comment(self, comment_id: int) -> Comment | None:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def like_comment(self, comment_id: int) -> OpResult:
        """
        Ajoute un like a un commentaire.

        Les likes répétés d'un meme utilisateur ne sont pas dédupliqués.
        """
        comment = self.find_comment(comment_id)
        if comment is None:
            return OpResult.not_found(f"Commentaire {comment_id} introuvable")

        likes = comment.like()
        return OpResult.ok(
            f"Like du commentaire {comment_id} (likes : {likes})",
            id=comment_id,
            value=likes,
        )

    def remove_comment(
        self, comment_id: int, requester: str, channel_owner: str
    ) -> OpResult:
        """
        Supprime un commentaire.

        Autorisé uniquement pour l'auteur du commentaire ou le propriétaire
        de la chaîne qui héberge la vidéo.

        Args:
            comment_id: Identifiant du commentaire
            requester: Nom de l'utilisateur demandeur
            channel_owner: Propriétaire de la chaîne hébergeant la vidéo

        Returns:
            SUCCESS, NOT_FOUND ou PERMISSION_DENIED
        """
        comment = self.find_comment(comment_id)
        if comment is None:
            return OpResult.not_found(f"Commentaire {comment_id} introuvable")

        if requester not in (comment.author, channel_owner):
            return OpResult.permission_denied(
                f"{requester} ne peut pas supprimer le commentaire {comment_id}"
            )

        self.comments.remove(comment)
        return OpResult.ok(f"Commentaire {comment_id} supprime", id=comment_id)

    def list_comments(self) -> tuple[Comment, ...]:
        """Commentaires dans l'ordre d'insertion (lecture seule)."""
        return tuple(self.comments)
