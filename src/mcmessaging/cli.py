"""Operator CLI for previewing catalog messages."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mcmessaging.config import get_settings
from mcmessaging.errors import ConfigurationError
from mcmessaging.source import MessageSource, create_message_source
from mcmessaging.text import ClickableText

app = typer.Typer(
    name="mcmsg",
    help="Preview clickable chat messages from a message file. Defaults come from MCMSG_* settings.",
    add_completion=False,
    rich_markup_mode="rich",
)

FILE_OPTION_HELP = "YAML message file (default: MCMSG_MESSAGES_FILE)"


def _load_source(**overrides: object) -> MessageSource:
    settings = get_settings(log_profile="console", **overrides)
    try:
        return create_message_source(settings)
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc


@app.command()
def render(
    key: str = typer.Argument(..., help="Message key, e.g. welcome.title"),
    params: Optional[list[str]] = typer.Argument(None, help="Values for {1}, {2}, ..."),
    messages_file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the chat component JSON"),
    hover_link: Optional[str] = typer.Option(None, "--hover-link", help="Hover prefix for links"),
    hover_command: Optional[str] = typer.Option(None, "--hover-command", help="Hover prefix for commands"),
    no_style_prefix: bool = typer.Option(
        False, "--no-style-prefix", help="Leave color codes before a tag outside the clickable text"
    ),
) -> None:
    """Render one message key."""
    source = _load_source(
        messages_file=messages_file,
        hover_link=hover_link,
        hover_command=hover_command,
        capture_style_prefix=False if no_style_prefix else None,
    )
    component = source.get_component(key, *(params or []))
    if as_json:
        typer.echo(component.to_json_str())
        return

    typer.echo(component.to_plain_text())
    for segment in component.segments():
        if isinstance(segment, ClickableText):
            typer.echo(f"  [{segment.click_event.action.value}] {segment.click_event.value} ({segment.hover_text})")


@app.command()
def keys(
    messages_file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
) -> None:
    """List message keys."""
    source = _load_source(messages_file=messages_file)
    table = Table("key", "template")
    for key in source.store.keys():  # type: ignore[attr-defined]
        table.add_row(escape(key), escape(source.store.lookup(key) or ""))
    Console().print(table)
