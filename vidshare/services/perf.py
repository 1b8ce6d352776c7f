"""
Mesure du temps d'exécution des opérations.

Usage:
    with perf_timer("Video.play", enabled=True) as measure:
        video.play()
    measure.microseconds  # durée mesurée
"""

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from loguru import logger


@dataclass
class PerfMeasure:
    """Durée mesurée pour une opération nommée."""

    label: str
    microseconds: int = 0


@contextmanager
def perf_timer(operation: str, enabled: bool = True) -> Iterator[PerfMeasure]:
    """
    Context manager chronometrant le bloc englobe.

    La durée est toujours renseignée dans la mesure retournée ; elle n'est
    journalisée que si enabled est vrai.

    Args:
        operation: Libelle de l'operation mesurée
        enabled: Active la journalisation de la durée
    """
    measure = PerfMeasure(label=operation)
    start = time.perf_counter_ns()
    try:
        yield measure
    finally:
        measure.microseconds = (time.perf_counter_ns() - start) // 1000
        if enabled:
            logger.info(
                f"[PERF] {operation}: {measure.microseconds} us",
                operation=operation,
                microseconds=measure.microseconds,
            )
