"""
Generateur d'identifiants du domaine.

Les videos et les commentaires tirent leurs identifiants du meme compteur :
un id n'est jamais reutilise, quel que soit le type d'entite.
"""

import threading


class IdGenerator:
    """
    Compteur strictement croissant et thread-safe.

    Le premier identifiant emis est ``start + 1`` (1 par defaut).

    Example:
        ids = IdGenerator()
        ids.next()  # 1
        ids.next()  # 2
    """

    def __init__(self, start: int = 0) -> None:
        self._counter = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Retourne un identifiant superieur a tous ceux deja emis."""
        with self._lock:
            self._counter += 1
            return self._counter


# Generateur partage par les entites construites sans generateur explicite
default_id_generator = IdGenerator()


def get_default_id_generator() -> IdGenerator:
    """Retourne le generateur partage du processus."""
    return default_id_generator
