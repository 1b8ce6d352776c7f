"""
Couche services applicatifs (cas d'utilisation).

Les services orchestrent la logique du domaine pour realiser les cas
d'utilisation de l'application :
- platform : annuaire, session et commandes de la plateforme
- benchmark : mesure des performances sur l'etat courant
- perf : chronometrage des operations

Les services dependent des ports (interfaces) de core/, jamais des
implementations concretes d'infrastructure/.
"""

from vidshare.services.benchmark import BenchmarkReport, BenchmarkService
from vidshare.services.perf import PerfMeasure, perf_timer
from vidshare.services.platform import PlatformService, Session

__all__ = [
    "BenchmarkReport",
    "BenchmarkService",
    "PerfMeasure",
    "perf_timer",
    "PlatformService",
    "Session",
]
