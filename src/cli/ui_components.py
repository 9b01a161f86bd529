"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import GitHubUser


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo modo interactivo, nunca con `--json`)."""

    title = Text("userfetch", style="bold cyan")
    subtitle = Text("GitHub users • typed HTTP pipeline", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_user_panel(user: GitHubUser) -> Panel:
    """Panel que presenta un `GitHubUser` obtenido."""

    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold cyan", no_wrap=True)
    table.add_column(style="white")
    table.add_row("Login", user.login)
    table.add_row("Avatar", user.avatar_url)
    table.add_row("Bio", user.bio or Text("(none)", style="dim"))

    return Panel(table, title=Text(user.login, style="bold green"), border_style="green")


def build_error_panel(message: str) -> Panel:
    return Panel(Text(message, style="red"), title=Text("Error", style="bold red"), border_style="red")
