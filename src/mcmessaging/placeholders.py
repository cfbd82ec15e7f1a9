"""Positional placeholder substitution."""

from __future__ import annotations


def substitute(template: str, *params: str) -> str:
    """Replace `{1}`, `{2}`, ... with the matching positional parameter."""

    message = template
    for index, value in enumerate(params, start=1):
        message = message.replace(f"{{{index}}}", str(value))
    return message
