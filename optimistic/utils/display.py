"""
Rich rendering helpers for container state.

Centralizes the symbols and styles used by the CLI so a pending value always
looks the same wherever it is printed.
"""

from typing import Any

from rich.text import Text

from optimistic.core.value import OptimisticValue, Pending, Resolved

__all__ = ["SYMBOLS", "STYLE", "format_payload", "describe"]

# Colorblind-friendly symbols and styles
SYMBOLS = {
    "resolved": "✓ ",
    "pending": "… ",
    "error": "[bold red]![/bold red] ",
    "success": "[bold green]✓[/bold green] ",
}

STYLE = {
    "header": "bold cyan",
    "dim": "dim",
    "resolved": "green",
    "pending": "yellow",
    "error": "red",
    "op": "magenta",
}


def format_payload(value: Any, max_len: int = 60) -> str:
    text = repr(value)
    if len(text) > max_len:
        text = text[: max_len - 1] + "…"
    return text


def describe(c: OptimisticValue[Any]) -> Text:
    """Return a one-line styled description such as ``… 3 (fallback 1)``."""
    match c:
        case Resolved(value):
            return Text(SYMBOLS["resolved"] + format_payload(value), style=STYLE["resolved"])
        case Pending(value, fallback):
            txt = Text(SYMBOLS["pending"] + format_payload(value), style=STYLE["pending"])
            txt.append(f" (fallback {format_payload(fallback)})", style=STYLE["dim"])
            return txt
    raise TypeError(f"expected Resolved or Pending, got {type(c).__name__}")
