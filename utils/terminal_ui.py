"""Terminal UI utilities using Rich library for formatted output."""

from typing import Dict, List, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from config import Config
from utils.theme import Theme, set_theme

# Initialize theme from config; Config.validate() reports bad values
set_theme(Config.THEME if Config.THEME in ("dark", "light") else "dark")

# Global console instance with theme support
console = Console(theme=Theme.get_rich_theme())

PREVIEW_LENGTH = 80


def _get_colors():
    """Get current theme colors."""
    return Theme.get_colors()


def _preview(text: str, max_length: int = PREVIEW_LENGTH) -> str:
    text = " ".join(text.split())
    if len(text) > max_length:
        text = text[:max_length] + "..."
    return escape(text)


def print_prompts(prompts: Sequence, max_length: int = PREVIEW_LENGTH) -> None:
    """Print resolved prompts as a table.

    Args:
        prompts: Resolved prompts (objects with raw/label/function)
        max_length: Characters of label and content shown per row
    """
    colors = _get_colors()
    table = Table(box=box.ROUNDED, border_style=colors.text_muted, show_lines=False)
    table.add_column("#", style=colors.text_secondary, justify="right")
    table.add_column("Label", style="prompt.label", overflow="fold")
    table.add_column("Content", style=colors.text_primary, overflow="fold")
    table.add_column("Fn", style="prompt.function", justify="center")

    for index, prompt in enumerate(prompts, start=1):
        marker = "✓" if prompt.function is not None else ""
        table.add_row(
            str(index),
            _preview(prompt.label, max_length),
            _preview(prompt.raw, max_length),
            marker,
        )

    console.print(table)


def print_provider_map(provider_map: Dict[str, List[str]], max_length: int = 40) -> None:
    """Print the provider -> prompt labels mapping.

    Args:
        provider_map: Mapping returned by read_provider_prompt_map
        max_length: Characters shown per prompt label
    """
    colors = _get_colors()
    table = Table(box=box.SIMPLE, border_style=colors.text_muted, padding=(0, 2))
    table.add_column("Provider", style=f"{colors.primary} bold")
    table.add_column("Prompts", style=colors.text_primary)

    for provider_id, labels in provider_map.items():
        table.add_row(provider_id, "\n".join(_preview(label, max_length) for label in labels))

    console.print(table)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message.

    Args:
        message: Error message
        title: Error title (default: "Error")
    """
    colors = _get_colors()
    console.print(
        Panel(
            f"[{colors.error}]{escape(message)}[/{colors.error}]",
            title=f"[bold {colors.error}]{title}[/bold {colors.error}]",
            border_style=colors.error,
            box=box.ROUNDED,
        )
    )


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: Success message
    """
    colors = _get_colors()
    console.print(f"[{colors.success}]✓ {message}[/{colors.success}]")


def print_info(message: str) -> None:
    """Print an info message.

    Args:
        message: Info message
    """
    colors = _get_colors()
    console.print(f"[{colors.text_secondary}]{message}[/{colors.text_secondary}]")


def print_log_location(log_file: str) -> None:
    """Print log file location.

    Args:
        log_file: Path to log file
    """
    colors = _get_colors()
    console.print(f"[{colors.text_muted}]Logs: {log_file}[/{colors.text_muted}]")
