"""
Rich terminal renderer for bank_prompts.
Handles printing of prompts, template catalogs, LLM responses and status messages.
"""
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .constants import APP_NAME, APP_VERSION
from .prompts import BankingTemplate, Prompt


class PromptRenderer:
    """
    Renderer for the command line interface.
    Provides methods for printing prompts, tables and messages.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """
        Initialize the renderer.

        Args:
            console: Optional Rich Console instance
        """
        self._console = console or Console()

    @property
    def console(self) -> Console:
        """Get the Rich console."""
        return self._console

    def print(self, *args, **kwargs) -> None:
        """Print to the console."""
        self._console.print(*args, **kwargs)

    def print_banner(self) -> None:
        """Print the application name and version."""
        self._console.print(f"[bold]{APP_NAME}[/bold] [dim]v{APP_VERSION}[/dim]")
        self._console.print()

    def print_prompt(self, prompt: Prompt, title: str = "Prompt") -> None:
        """
        Print a rendered prompt inside a panel.

        Args:
            prompt: The prompt to show
            title: Panel title
        """
        body = prompt.render() or "(empty prompt)"
        self._console.print(Panel(
            Text(body),
            title=f"{title} ({len(prompt)} sections)",
            border_style="cyan",
        ))

    def print_response(self, content: str, client_name: str) -> None:
        """
        Print an LLM response.

        Args:
            content: Generated text
            client_name: Name of the client that produced it
        """
        self._console.print(Panel(
            Text(content),
            title=f"Response from {client_name}",
            border_style="green",
        ))

    def print_templates(self, templates: list[type[BankingTemplate]]) -> None:
        """
        Print the template catalog as a table.

        Args:
            templates: Template classes to list
        """
        if not templates:
            self._console.print("[dim]No templates available[/dim]")
            return

        table = Table(title="Banking Templates", border_style="cyan")
        table.add_column("Slug", style="bold")
        table.add_column("Name")
        table.add_column("Parameters", style="magenta")

        for template in templates:
            table.add_row(template.slug, template.name, ", ".join(template.parameters()))

        self._console.print(table)

    def print_error(self, message: str, title: str = "Error") -> None:
        """
        Print an error message.

        Args:
            message: Error message
            title: Error title
        """
        self._console.print(f"[bold red]✗ {title}[/bold red]")
        self._console.print(Text(message, style="red"))
        self._console.print()

    def print_success(self, message: str) -> None:
        """Print a success line."""
        self._console.print(f"[bold green]✓[/bold green] {message}")

    def print_info(self, message: str) -> None:
        """Print an informational line."""
        self._console.print(f"[bold blue]ℹ[/bold blue] {message}")
