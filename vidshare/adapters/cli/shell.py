"""
Boucle interactive de la plateforme.

Lit un selecteur numerique, demande les arguments de la commande, delegue au
PlatformService et affiche le resultat. La boucle ne s'arrete que sur la
commande de sortie ou en fin d'entree : aucune erreur du domaine ne
l'interrompt.
"""

from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt

from vidshare.core.value_objects import OpResult
from vidshare.services.benchmark import BenchmarkService
from vidshare.services.platform import PlatformService

from . import console as default_console
from .display import (
    render_benchmark,
    render_comments,
    render_menu,
    render_playlist,
    render_result,
    render_videos,
)
from .helpers import suppress_loguru

EXIT_SELECTOR = 99


class _ScriptedInput:
    """Lecture Rich où une fin de flux scripté lève EOFError."""

    prompt_suffix = " "

    @classmethod
    def get_input(cls, console, prompt, password, stream=None) -> str:
        value = console.input(prompt, password=password, stream=stream)
        if stream is not None and value == "":
            raise EOFError
        return value


class TextPrompt(_ScriptedInput, Prompt):
    pass


class NumberPrompt(_ScriptedInput, IntPrompt):
    """Prompt entier, redemandé tant que la saisie n'est pas un nombre."""

    validate_error_message = "[red]Entrez un nombre[/red]"


@dataclass(frozen=True)
class MenuCommand:
    """Commande du menu : selecteur, libelle, handler et exigence de session."""

    selector: int
    label: str
    handler: Callable[[], None]
    requires_login: bool = False


class Shell:
    """
    Shell interactif pilotant un PlatformService.

    Example:
        shell = Shell(platform=container.platform_service(),
                      benchmark_factory=container.benchmark_service)
        shell.run()
    """

    def __init__(
        self,
        platform: PlatformService,
        benchmark_factory: Callable[[], BenchmarkService],
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """
        Args:
            platform: Service de plateforme portant l'etat et la session
            benchmark_factory: Fabrique du service de benchmark
            console: Console Rich (console partagee par defaut)
            stream: Flux d'entree ; None pour lire l'entree standard
        """
        self._platform = platform
        self._benchmark_factory = benchmark_factory
        self._console = console if console is not None else default_console
        self._stream = stream
        self._running = False
        self._commands = {
            command.selector: command
            for command in [
                MenuCommand(0, "Afficher le menu", self._show_menu),
                MenuCommand(1, "S'inscrire", self._register),
                MenuCommand(2, "Se connecter", self._login),
                MenuCommand(3, "Se deconnecter", self._logout),
                MenuCommand(4, "Creer une chaine", self._create_channel, True),
                MenuCommand(5, "Uploader une video sur sa chaine", self._upload, True),
                MenuCommand(6, "S'abonner a une chaine", self._subscribe, True),
                MenuCommand(7, "Regarder une video par id", self._watch),
                MenuCommand(8, "Commenter une video", self._comment, True),
                MenuCommand(9, "Liker un commentaire", self._like_comment, True),
                MenuCommand(10, "Lister les commentaires d'une video", self._list_comments),
                MenuCommand(11, "Rechercher des videos par titre", self._search),
                MenuCommand(12, "Creer une playlist", self._create_playlist, True),
                MenuCommand(13, "Ajouter une video a une playlist", self._add_to_playlist, True),
                MenuCommand(14, "Lire une playlist", self._play_playlist, True),
                MenuCommand(15, "Lister toutes les videos", self._list_videos),
                MenuCommand(16, "Lister les uploads d'une chaine", self._list_uploads),
                MenuCommand(17, "Basculer la mesure de performance", self._toggle_perf),
                MenuCommand(18, "Lancer le benchmark", self._benchmark),
                MenuCommand(19, "Se desabonner d'une chaine", self._unsubscribe, True),
                MenuCommand(20, "Supprimer un commentaire", self._remove_comment, True),
                MenuCommand(21, "Mettre une video en pause", self._pause),
                MenuCommand(EXIT_SELECTOR, "Quitter", self._exit),
            ]
        }

    @property
    def commands(self) -> dict[int, MenuCommand]:
        return self._commands

    def run(self) -> None:
        """Boucle principale : une commande entierement traitee avant la suivante."""
        self._running = True
        self._show_menu()
        while self._running:
            try:
                raw = self._read(self._action_label())
            except EOFError:
                break
            if not raw:
                continue
            try:
                selector = int(raw)
            except ValueError:
                self._console.print("[red]Entrez un nombre[/red]")
                continue
            try:
                self.dispatch(selector)
            except EOFError:
                break

    def dispatch(self, selector: int) -> None:
        command = self._commands.get(selector)
        if command is None:
            self._console.print("[yellow]Commande inconnue[/yellow]")
            return
        if command.requires_login and not self._platform.session.is_authenticated:
            render_result(self._console, OpResult.not_logged_in())
            return
        command.handler()

    # ------------------------------------------------------------------
    # Saisie
    # ------------------------------------------------------------------

    def _read(self, label: str) -> str:
        raw = TextPrompt.ask(
            f"[bold]{label}[/bold]", console=self._console, stream=self._stream
        )
        return raw.strip()

    def _read_int(self, label: str) -> int:
        return NumberPrompt.ask(
            f"[bold]{label}[/bold]", console=self._console, stream=self._stream
        )

    def _action_label(self) -> str:
        user = self._platform.current_user
        if user is None:
            return "\nAction>"
        return f"\nAction ({escape(user.username)})>"

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _show_menu(self) -> None:
        render_menu(
            self._console,
            [(c.selector, c.label, c.requires_login) for c in self._commands.values()],
        )

    def _register(self) -> None:
        username = self._read("Nom d'utilisateur :")
        render_result(self._console, self._platform.register(username))

    def _login(self) -> None:
        username = self._read("Nom d'utilisateur :")
        render_result(self._console, self._platform.login(username))

    def _logout(self) -> None:
        render_result(self._console, self._platform.logout())

    def _create_channel(self) -> None:
        name = self._read("Nom de la chaine :")
        if not name:
            render_result(self._console, self._platform.create_channel(name))
            return
        description = self._read("Description :")
        render_result(self._console, self._platform.create_channel(name, description))

    def _upload(self) -> None:
        channel = self._read("Nom de votre chaine :")
        title = self._read("Titre de la video :")
        duration = self._read_int("Duree en secondes :")
        render_result(self._console, self._platform.upload(channel, title, duration))

    def _subscribe(self) -> None:
        channel = self._read("Chaine a suivre :")
        render_result(self._console, self._platform.subscribe(channel))

    def _unsubscribe(self) -> None:
        channel = self._read("Chaine a quitter :")
        render_result(self._console, self._platform.unsubscribe(channel))

    def _watch(self) -> None:
        video_id = self._read_int("Id de la video a regarder :")
        render_result(self._console, self._platform.watch(video_id))

    def _pause(self) -> None:
        video_id = self._read_int("Id de la video a mettre en pause :")
        render_result(self._console, self._platform.pause(video_id))

    def _comment(self) -> None:
        video_id = self._read_int("Id de la video a commenter :")
        text = self._read("Commentaire :")
        render_result(self._console, self._platform.comment(video_id, text))

    def _like_comment(self) -> None:
        video_id = self._read_int("Id de la video :")
        comment_id = self._read_int("Id du commentaire a liker :")
        render_result(self._console, self._platform.like_comment(video_id, comment_id))

    def _remove_comment(self) -> None:
        video_id = self._read_int("Id de la video :")
        comment_id = self._read_int("Id du commentaire a supprimer :")
        render_result(self._console, self._platform.remove_comment(video_id, comment_id))

    def _list_comments(self) -> None:
        video_id = self._read_int("Id de la video :")
        result = self._platform.list_comments(video_id)
        if not result.is_success:
            render_result(self._console, result)
            return
        render_comments(self._console, result.message, result.value)

    def _search(self) -> None:
        query = self._read("Mot-cle :")
        result = self._platform.search(query)
        render_videos(self._console, result.message, result.value)

    def _create_playlist(self) -> None:
        name = self._read("Nom de la playlist :")
        render_result(self._console, self._platform.create_playlist(name))

    def _add_to_playlist(self) -> None:
        name = self._read("Nom de la playlist :")
        video_id = self._read_int("Id de la video a ajouter :")
        render_result(self._console, self._platform.add_to_playlist(name, video_id))

    def _play_playlist(self) -> None:
        name = self._read("Nom de la playlist :")
        result = self._platform.play_playlist(name)
        if result.is_success:
            stored = self._platform.current_user.get_playlist(name).entries
            render_playlist(self._console, name, result.value, stored=len(stored))
        render_result(self._console, result)

    def _list_videos(self) -> None:
        result = self._platform.list_videos()
        render_videos(self._console, "Toutes les videos", result.value)

    def _list_uploads(self) -> None:
        name = self._read("Nom de la chaine :")
        result = self._platform.list_channel_uploads(name)
        if not result.is_success:
            render_result(self._console, result)
            return
        render_videos(self._console, result.message, result.value, show_channel=False)

    def _toggle_perf(self) -> None:
        render_result(self._console, self._platform.toggle_perf_logging())

    def _benchmark(self) -> None:
        self._console.print("[bold cyan]=== BENCHMARK ===[/bold cyan]")
        with suppress_loguru():
            report = self._benchmark_factory().run()
        render_benchmark(self._console, report)

    def _exit(self) -> None:
        self._console.print("Au revoir")
        self._running = False
