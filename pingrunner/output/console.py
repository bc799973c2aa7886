"""
Rich console output for PingRunner - with real-time per-probe printing
"""

from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..models import PingResponse
from .. import __version__


class ConsoleOutput:
    """
    Rich console output for ping responses.
    
    Features:
    - Real-time per-probe output
    - Summary panel once probing ends
    """
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._table_header_printed = False
    
    def print_header(self, target: str, command: str,
                     resolved_ip: Optional[str] = None,
                     ptr: Optional[str] = None, probes: int = 1):
        """Print probe header"""
        content = Text()
        content.append("PingRunner", style="bold cyan")
        content.append(f" v{__version__}\n", style="dim")
        content.append("Target: ", style="dim")
        content.append(target, style="bold")
        if resolved_ip and resolved_ip != target:
            content.append(f" ({resolved_ip})", style="dim")
        if ptr:
            content.append(f" [{ptr}]", style="dim")
        content.append("\n")
        content.append(f"Command: ping{command}", style="dim")
        content.append(f"  |  Probes: {probes}", style="dim")
        
        panel = Panel(content, border_style="cyan", padding=(0, 1))
        self.console.print(panel)
        self.console.print()
    
    def print_table_header(self):
        """Print the table header row"""
        if self._table_header_printed:
            return
        
        header = Text()
        header.append(f"{'Time':<12}  ", style="bold magenta")
        header.append(f"{'Target':<20}  ", style="bold magenta")
        header.append(f"{'Status':<6}  ", style="bold magenta")
        header.append(f"{'Seq':>5}  ", style="bold magenta")
        header.append(f"{'TTL':>4}  ", style="bold magenta")
        header.append(f"{'RTT (ms)':>10}", style="bold magenta")
        
        self.console.print("─" * 66)
        self.console.print(header)
        self.console.print("─" * 66)
        self._table_header_printed = True
    
    def print_response(self, response: PingResponse):
        """Print a single response in real-time"""
        self.print_table_header()
        
        line = Text()
        line.append(f"{self._format_time(response.timestamp):<12}  ", style="dim")
        line.append(f"{(response.target or '-'):<20}  ")
        if response.success:
            line.append(f"{'ok':<6}  ", style="green")
            line.append(f"{response.icmp_seq:>5}  ")
            line.append(f"{response.ttl:>4}  ")
            line.append(f"{response.duration:>10.3f}")
        else:
            line.append(f"{'fail':<6}  ", style="red")
            line.append(f"{'-':>5}  ", style="dim")
            line.append(f"{'-':>4}  ", style="dim")
            line.append(f"{'-':>10}", style="dim")
        
        self.console.print(line)
        
        if response.err_out:
            self.console.print(f"  [dim red]{response.err_out.strip()}[/]", highlight=False)
    
    def print_separator(self):
        self.console.print("─" * 66)
    
    def print_summary(self, responses: list[PingResponse]):
        """Print summary panel"""
        succeeded = [r for r in responses if r.success]
        content = Text()
        
        if succeeded:
            avg = sum(r.duration for r in succeeded) / len(succeeded)
            content.append("Reachable: ", style="bold green")
            content.append(f"{len(succeeded)}/{len(responses)} probes answered", style="dim")
            content.append(f", {avg:.1f}ms avg", style="dim")
        else:
            content.append("Unreachable: ", style="bold red")
            content.append(f"0/{len(responses)} probes answered", style="dim")
        
        panel = Panel(
            content,
            title=Text("Summary", style="bold"),
            border_style="green" if succeeded else "red",
            padding=(0, 1)
        )
        self.console.print()
        self.console.print(panel)
    
    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {message}")
    
    def print_warning(self, message: str):
        """Print warning message"""
        self.console.print(f"[yellow]Warning:[/] {message}")
    
    def _format_time(self, timestamp_ms: int) -> str:
        return datetime.fromtimestamp(timestamp_ms / 1000).strftime('%H:%M:%S.%f')[:-3]
