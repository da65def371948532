from rich.align import Align
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__


class Banner:
    INSTRUCTIONS = [
        ("message + enter", "Chat"),
        ("/new", "Start a new chat"),
        ("/model <name>", "Switch model"),
        ("/system <message>", "Switch system message"),
        ("/temperature <value>", "Switch temperature"),
        ("/config", "Show current config"),
        ("/help", "Show this help"),
        ("/exit, /quit, CTRL+C", "Exit"),
    ]

    @staticmethod
    def print_instructions(console):
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Command", style="bold yellow", justify="right")
        table.add_column("Action", style="bold bright_white")
        for command, action in Banner.INSTRUCTIONS:
            table.add_row(command, action)

        console.print(Panel(
            Align.center(table),
            title="[bold cyan]Commands[/bold cyan]",
            border_style="bright_blue",
            padding=(1, 5),
        ))

    @staticmethod
    def print_banner(console):
        console.print(Align.center(Text("Mistral Chat", style="bold bright_cyan")))
        console.print(Align.center(Text(f"mistral-client v{__version__}", style="italic dim green")))
        console.print("")
        Banner.print_instructions(console)
