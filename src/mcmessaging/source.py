"""Template lookup and rendering shared by every sender."""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from mcmessaging.catalog import MessageCatalog, TemplateStore
from mcmessaging.clickable import ClickableMarkupParser
from mcmessaging.config import Settings
from mcmessaging.errors import ConfigurationError
from mcmessaging.placeholders import substitute
from mcmessaging.text import RichText


class MessageSource:
    """Resolves message keys into strings and rich text components."""

    def __init__(
        self,
        store: TemplateStore,
        *,
        hover_messages: Mapping[str, str] | None = None,
        parser: ClickableMarkupParser | None = None,
    ) -> None:
        self.store = store
        self.hover_messages = dict(hover_messages or {})
        self.parser = parser or ClickableMarkupParser()

    def get_string(self, key: str, *params: str) -> str:
        """Look up `key` and fill its placeholders; unknown keys come back as-is."""

        template = self.store.lookup(key)
        if template is None:
            logger.warning("Message not found for key:{}", key)
            return key
        return substitute(template, *params)

    def get_component(self, key: str, *params: str) -> RichText:
        return self.parser.parse(self.get_string(key, *params), self.hover_messages)


def create_message_source(settings: Settings) -> MessageSource:
    """Load the configured catalog; failures surface here, at startup."""

    if settings.messages_file is None:
        raise ConfigurationError("messages_file is not configured. Set MCMSG_MESSAGES_FILE.")
    return MessageSource(
        MessageCatalog.from_file(settings.messages_file),
        hover_messages=settings.hover_messages(),
        parser=ClickableMarkupParser(capture_style_prefix=settings.capture_style_prefix),
    )
