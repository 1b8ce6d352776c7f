"""
Base commune des entités.

Certains attributs d'identité (id, nom, propriétaire) sont fixés à la
création : une fois initialisés, toute réaffectation lève AttributeError.
"""

from typing import Any, ClassVar


class Entity:
    """
    Mixin pour les dataclasses d'entités.

    Les sous-classes listent dans ``_read_only`` les attributs qui ne peuvent
    être affectés qu'une seule fois (dans ``__init__`` ou ``__post_init__``).
    """

    _read_only: ClassVar[frozenset[str]] = frozenset()

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._read_only and name in self.__dict__:
            raise AttributeError(
                f"{type(self).__name__}.{name} est en lecture seule"
            )
        super().__setattr__(name, value)
