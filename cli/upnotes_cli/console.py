from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def info(msg: str) -> None:
    console.print(f"[bold cyan]•[/] {escape(msg)}")


def ok(msg: str) -> None:
    console.print(f"[bold green]OK[/] {msg}")


def warn(msg: str) -> None:
    console.print(f"[bold yellow]WARN[/] {msg}")


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {msg}")


def rule() -> None:
    console.print("--------------")


def notes(text: str) -> None:
    """Print changelog text verbatim; brackets in version headers are not markup."""
    console.print(escape(text), highlight=False)


def print(*args, **kwargs):
    """Proxy to underlying rich Console.print()."""
    console.print(*args, **kwargs)
