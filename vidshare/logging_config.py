"""
Configuration du logging de vidshare via loguru.

Deux familles d'enregistrements cohabitent :
- les événements applicatifs (inscription, upload, playlist...), filtrés par
  le niveau configuré et affichés sur stderr avec leur origine ;
- les mesures de performance émises par ``perf_timer``, reconnaissables à
  leur extra ``operation``. Elles ont leur propre handler, affiché en ligne
  brute ``[PERF] ...`` quel que soit le niveau, car leur activation se
  décide à l'exécution (commande 17) et non par le niveau de log.

Les deux familles sont aussi sérialisées en JSON dans le fichier rotatif.
"""

import sys
from pathlib import Path
from typing import Any, Callable, TextIO, Union

from loguru import logger

Sink = Union[TextIO, Callable[[str], Any]]

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)
PERF_FORMAT = "<magenta>{message}</magenta>"


def is_perf_record(record: dict) -> bool:
    """Vrai pour les mesures émises par perf_timer."""
    return "operation" in record["extra"]


def is_app_record(record: dict) -> bool:
    return not is_perf_record(record)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/vidshare.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    console_sink: Sink = sys.stderr,
    perf_sink: Sink = sys.stderr,
) -> None:
    """Installe les handlers console, performance et fichier.

    Args :
        log_level : Niveau minimum des événements applicatifs en console
        log_file : Fichier JSON rotatif (créé avec son répertoire)
        rotation_size : Taille maximale avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
        console_sink : Destination des événements applicatifs
        perf_sink : Destination des lignes [PERF]
    """
    logger.remove()

    logger.add(
        console_sink,
        level=log_level,
        format=CONSOLE_FORMAT,
        filter=is_app_record,
        colorize=True,
    )

    # Toujours INFO : la bascule se fait a la source, dans PlatformService
    logger.add(
        perf_sink,
        level="INFO",
        format=PERF_FORMAT,
        filter=is_perf_record,
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configure", log_file=str(log_file), level=log_level)
