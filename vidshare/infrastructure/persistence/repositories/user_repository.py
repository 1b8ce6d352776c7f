"""
Implementation en memoire du repository User.

Implemente l'interface IUserRepository avec une table indexee par nom.
"""

from typing import Optional

from vidshare.core.entities import User
from vidshare.core.ports.repositories import IUserRepository


class InMemoryUserRepository(IUserRepository):
    """Table des utilisateurs par nom."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def get_by_username(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def save(self, user: User) -> User:
        self._users[user.username] = user
        return user
