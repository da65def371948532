from rich.console import Console
from rich.live import Live
from rich.markdown import Markdown
from rich.panel import Panel
from rich.rule import Rule
from rich.spinner import Spinner

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from ..config import Config
from ..core.chatbot import COMMANDS
from .banner import Banner


class UI:
    """Terminal interface for the chatbot using Rich"""

    def __init__(self, console: Console = None, session: PromptSession = None):
        self.console = console or Console()
        self.pt_style = Style.from_dict({
            'prompt': 'ansiyellow bold',
        })
        self.session = session or PromptSession(
            history=FileHistory(Config.HISTORY_FILE),
            completer=NestedCompleter.from_nested_dict(COMMANDS),
        )

    def banner(self):
        self.console.clear()
        Banner.print_banner(self.console)

    def help(self):
        Banner.print_instructions(self.console)

    def show_msg(self, title: str, content: str, color: str = "white"):
        self.console.print(Panel(content, title=f"[bold]{title}[/]", border_style=color, padding=(1, 2)))

    def get_input(self, label: str = "YOU") -> str:
        """Read one line; EOF counts as an exit request."""
        self.console.print(f"[bold bright_yellow]◆ {label}[/]")
        try:
            return self.session.prompt([('class:prompt', ' ╰─> ')], style=self.pt_style)
        except EOFError:
            return "/exit"

    def stream_markdown(self, title: str, content_generator) -> str:
        """Render Markdown in real time as tokens arrive."""
        full_response = ""
        self.console.print(Rule(f"[bold bright_cyan]{title}[/bold bright_cyan]", style="bright_blue"))

        with Live(
            Spinner("dots", text="Waiting for response...", style="bright_cyan"),
            console=self.console,
            refresh_per_second=15,
        ) as live:
            for chunk in content_generator:
                full_response += chunk
                live.update(Markdown(full_response, code_theme=Config.CODE_THEME))

            if not full_response:
                live.update("[bold red]✗ Empty response from the model.[/]")

        self.console.print(Rule(style="dim bright_blue"))
        return full_response
