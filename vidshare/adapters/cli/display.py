"""
Affichage Rich des resultats et listings de la plateforme.

Les messages issus du domaine sont echappes avant affichage : titres et
commentaires peuvent contenir des crochets interpretes comme du markup Rich.
"""

from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vidshare.core.entities import Comment, Video
from vidshare.core.value_objects import OpResult, OpStatus, PlaylistEntry
from vidshare.services.benchmark import BenchmarkReport

# Style d'affichage par statut
STATUS_STYLES = {
    OpStatus.SUCCESS: "green",
    OpStatus.NOT_FOUND: "yellow",
    OpStatus.ALREADY_EXISTS: "yellow",
    OpStatus.PERMISSION_DENIED: "red",
    OpStatus.INVALID_INPUT: "red",
    OpStatus.NOT_LOGGED_IN: "red",
}


def render_result(console: Console, result: OpResult) -> None:
    """Affiche le message d'un resultat, colore selon son statut."""
    console.print(escape(result.message), style=STATUS_STYLES[result.status])


def render_menu(console: Console, entries: Iterable[tuple[int, str, bool]]) -> None:
    """
    Affiche le menu des commandes.

    Args:
        console: Console Rich de sortie
        entries: Tuples (selecteur, libelle, connexion requise)
    """
    table = Table(title="Commandes", show_header=False, box=None)
    table.add_column("Num", style="cyan", justify="right")
    table.add_column("Commande")
    for selector, label, requires_login in entries:
        suffix = " [dim](connexion requise)[/dim]" if requires_login else ""
        table.add_row(str(selector), f"{escape(label)}{suffix}")
    console.print(table)


def render_videos(
    console: Console, title: str, videos: Sequence[Video], show_channel: bool = True
) -> None:
    """Affiche une table de videos (id, titre, chaine, vues)."""
    if not videos:
        console.print("[dim]Aucune video[/dim]")
        return

    table = Table(title=escape(title))
    table.add_column("Id", style="cyan", justify="right")
    table.add_column("Titre")
    if show_channel:
        table.add_column("Chaine")
    table.add_column("Vues", justify="right")
    for video in videos:
        row = [str(video.id), escape(video.title)]
        if show_channel:
            row.append(escape(video.uploader))
        row.append(str(video.views))
        table.add_row(*row)
    console.print(table)


def render_comments(console: Console, title: str, comments: Sequence[Comment]) -> None:
    if not comments:
        console.print("[dim]Aucun commentaire[/dim]")
        return

    table = Table(title=escape(title))
    table.add_column("Id", style="cyan", justify="right")
    table.add_column("Auteur")
    table.add_column("Likes", justify="right")
    table.add_column("Commentaire")
    for comment in comments:
        table.add_row(
            str(comment.id),
            escape(comment.author),
            str(comment.likes),
            escape(comment.text),
        )
    console.print(table)


def render_playlist(
    console: Console, name: str, entries: Sequence[PlaylistEntry], stored: int
) -> None:
    """
    Affiche les entrées résolues d'une playlist (position 1-based, titre, id).

    "(vide)" n'est affiché que si la playlist ne contient aucun id : quand
    tous les ids sont orphelins, seul l'en-tête apparaît.

    Args:
        stored: Nombre d'ids enregistrés dans la playlist, orphelins compris
    """
    console.print(f"[bold]Playlist :[/bold] {escape(name)}")
    if stored == 0:
        console.print("  [dim](vide)[/dim]")
        return
    for entry in entries:
        console.print(f"  \\[{entry.position}] {escape(entry.title)} (id={entry.video_id})")


def render_benchmark(console: Console, report: BenchmarkReport) -> None:
    table = Table(title="Benchmark")
    table.add_column("Operation")
    table.add_column("Duree (us)", justify="right")
    for measure in report.measures:
        table.add_row(escape(measure.label), str(measure.microseconds))
    console.print(table)
    console.print(f"[dim]Resultats de recherche : {report.search_matches}[/dim]")
