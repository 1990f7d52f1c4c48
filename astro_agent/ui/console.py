"""Rich console wrapper and formatting utilities."""

from rich.console import Console
from rich.markup import escape

# Global console instance
console = Console()
err_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success line with a green check mark.

    The message may contain Rich markup; escape any user-supplied parts.
    """
    console.print(f"[green]✓[/green] {message}")


def print_warning(message: str) -> None:
    """Print a yellow warning line. The message is printed literally."""
    console.print(f"[yellow]{escape(message)}[/yellow]")


def print_error(message: str) -> None:
    """Print a red error line to stderr. The message is printed literally."""
    err_console.print(f"[red]{escape(message)}[/red]", highlight=False)


def format_size(num_bytes: int) -> str:
    """
    Format a byte count for display.

    Args:
        num_bytes: Size in bytes

    Returns:
        Human readable size, e.g. "512 B", "1.5 KB", "2.0 MB"
    """
    if num_bytes < 1024:
        return f"{num_bytes} B"
    kb = num_bytes / 1024
    if kb < 1024:
        return f"{kb:.1f} KB"
    return f"{kb / 1024:.1f} MB"
