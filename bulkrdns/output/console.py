"""
Rich console diagnostics for bulkrdns (stderr only)
"""

import socket
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..models import Config, ResolverContext, RunSummary


class ConsoleOutput:
    """
    Diagnostic output on stderr.

    Result lines never go through here, stdout is reserved for them.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def print_header(self, config: Config, context: ResolverContext,
                     items: int):
        """Print run header"""
        content = Text()
        content.append("Resolver: ", style="dim")
        content.append(f"{context.address}", style="bold")
        if context.server_name and context.server_name != context.address:
            content.append(f" ({context.server_name})", style="dim")
        family = 'IPv6' if context.family == socket.AF_INET6 else 'IPv4'
        content.append(f"  {family} {config.protocol.upper()}:{context.port}",
                       style="dim")
        content.append(f"  |  {items} addresses × {config.threads} threads",
                       style="dim")
        if config.direct:
            content.append("  |  direct", style="cyan")
        self.console.print(content)

    def print_summary(self, summary: RunSummary, elapsed: float):
        """Print run counters"""
        content = Text()
        content.append("Done: ", style="bold green")
        content.append(f"{summary.resolved}/{summary.items} resolved", style="dim")
        content.append(f", {summary.names} names", style="dim")
        content.append(f" in {elapsed:.2f}s", style="dim")
        self.console.print(content)

    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {escape(message)}", highlight=False)

    def print_warning(self, message: str):
        """Print warning message"""
        self.console.print(f"[yellow]Warning:[/] {escape(message)}", highlight=False)
