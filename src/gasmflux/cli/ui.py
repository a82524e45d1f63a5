from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from gasmflux.core.models import AudioItem, Uploader

console = Console()

def display_item(item: AudioItem) -> None:
    """Displays a single post in a panel."""
    table = Table.grid(padding=(0, 1))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()
    table.add_row("Uploader", item.uploader.name)
    table.add_row("Description", item.description or "[dim]none[/dim]")
    table.add_row("Audio", item.audio_url or "[dim]not resolved[/dim]")
    table.add_row("Page", item.post_url)
    if item.play_count is not None:
        table.add_row("Plays", str(item.play_count))

    console.print(Panel(table, title=item.title, border_style="blue"))

def display_listing(uploader: Uploader, items: Iterable[AudioItem], with_audio_url: bool = False) -> int:
    """Displays an uploader's posts in a table and returns how many were shown."""
    table = Table(title=f"Uploads by {uploader.name}", show_lines=True)
    table.add_column("#", style="cyan", justify="center")
    table.add_column("Title", style="magenta")
    table.add_column("Plays", style="green", justify="right")
    if with_audio_url:
        table.add_column("Audio")

    count = 0
    for count, item in enumerate(items, 1):
        row = [str(count), item.title, str(item.play_count)]
        if with_audio_url:
            row.append(item.audio_url)
        table.add_row(*row)

    if count == 0:
        console.print(f"[yellow]{uploader.name} has no uploads.[/yellow]")
    else:
        console.print(table)
    return count

def display_stats(uploader: Uploader, uploads: int, plays: int) -> None:
    table = Table.grid(padding=(0, 1))
    table.add_row("[bold cyan]Uploads[/bold cyan]", str(uploads))
    table.add_row("[bold cyan]Plays[/bold cyan]", str(plays))
    console.print(Panel(table, title=uploader.name, subtitle=uploader.url, border_style="green"))

def display_error(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
