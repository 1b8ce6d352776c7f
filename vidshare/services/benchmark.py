"""
Service de benchmark des opérations de la plateforme.

Mesure trois scenarios sur l'état courant :
- N recherches de vidéo par id dans la table globale
- M ajouts de commentaires sur la première vidéo de la table
- une recherche par titre

Le scenario des commentaires modifie reellement la première vidéo
(les commentaires ajoutes restent visibles).
"""

from dataclasses import dataclass, field

from loguru import logger

from vidshare.core.ports.repositories import IVideoRepository
from vidshare.services.perf import PerfMeasure, perf_timer

BENCHMARK_AUTHOR = "benchuser"


@dataclass
class BenchmarkReport:
    """Resultats du benchmark, dans l'ordre d'exécution."""

    measures: list[PerfMeasure] = field(default_factory=list)
    search_matches: int = 0

    @property
    def total_microseconds(self) -> int:
        return sum(m.microseconds for m in self.measures)


class BenchmarkService:
    """
    Service de benchmark.

    Example:
        service = BenchmarkService(videos=repo, lookups=1000, comments=100, query="c++")
        report = service.run()
        for measure in report.measures:
            print(measure.label, measure.microseconds)
    """

    def __init__(
        self,
        videos: IVideoRepository,
        lookups: int = 1000,
        comments: int = 100,
        query: str = "c++",
    ) -> None:
        self._videos = videos
        self._lookups = lookups
        self._comments = comments
        self._query = query

    def run(self) -> BenchmarkReport:
        report = BenchmarkReport()

        with perf_timer(f"{self._lookups} video lookups") as measure:
            for _ in range(self._lookups):
                self._videos.get_by_id(1)
        report.measures.append(measure)

        videos = self._videos.list_all()
        if videos and self._comments:
            target = videos[0]
            with perf_timer(f"{self._comments} comment additions") as measure:
                for _ in range(self._comments):
                    target.add_comment(BENCHMARK_AUTHOR, "test comment")
            report.measures.append(measure)

        with perf_timer("Video search") as measure:
            report.search_matches = len(self._videos.search_by_title(self._query))
        report.measures.append(measure)

        logger.debug(
            "Benchmark termine",
            total_us=report.total_microseconds,
            matches=report.search_matches,
        )
        return report
