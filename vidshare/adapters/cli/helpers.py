"""
Utilitaires partages pour les commandes CLI de vidshare.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
"""

from contextlib import contextmanager

from loguru import logger as loguru_logger


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("vidshare")
    try:
        yield
    finally:
        loguru_logger.enable("vidshare")
