"""mc-messaging - clickable chat markup for game servers."""

from .catalog import MessageCatalog
from .clickable import ClickableMarkupParser, parse_clickable_components
from .delivery import Messenger
from .source import MessageSource
from .text import RichText, clickable, concat, plain_text
from .title import Title, TitleDisplayer, TitleTimes

__version__ = "0.1.0"

__all__ = [
    "ClickableMarkupParser",
    "MessageCatalog",
    "MessageSource",
    "Messenger",
    "RichText",
    "Title",
    "TitleDisplayer",
    "TitleTimes",
    "clickable",
    "concat",
    "parse_clickable_components",
    "plain_text",
]
