"""YAML-backed message catalog."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any, Protocol

import yaml
from loguru import logger

from mcmessaging.errors import MessageFileError

KEY_SEPARATOR = "."


class TemplateStore(Protocol):
    """Anything that resolves a message key to its raw template."""

    def lookup(self, key: str) -> str | None: ...


class MessageCatalog:
    """Message templates loaded once from a YAML file.

    Keys are dotted paths into nested mappings, e.g. `welcome.title`.
    """

    def __init__(self, messages: Mapping[Any, Any] | None = None, *, path: Path | None = None) -> None:
        self.path = path
        self._messages = _normalize_keys(messages or {})

    @classmethod
    def from_file(cls, path: Path | str) -> MessageCatalog:
        """Load a catalog, raising `MessageFileError` if the file is unusable."""

        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise MessageFileError(f"Error loading message file: {path}") from exc
        catalog = cls(_load_mapping(content, source=str(path)), path=path)
        logger.debug("catalog.loaded path={} keys={}", path, len(catalog.keys()))
        return catalog

    @classmethod
    def from_text(cls, content: str) -> MessageCatalog:
        return cls(_load_mapping(content, source="<text>"))

    def lookup(self, key: str) -> str | None:
        node: Any = self._messages
        for part in key.split(KEY_SEPARATOR):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return _as_message(node)

    def keys(self) -> list[str]:
        """Every leaf key in dotted form, in file order."""

        return list(_iter_keys(self._messages, prefix=""))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None


def _load_mapping(content: str, *, source: str) -> dict[Any, Any]:
    try:
        payload = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise MessageFileError(f"Error loading message file: {source}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise MessageFileError(f"Message file must contain a mapping at top level: {source}")
    return payload


def _normalize_keys(node: Mapping[Any, Any]) -> dict[str, Any]:
    return {
        str(key): _normalize_keys(value) if isinstance(value, Mapping) else value for key, value in node.items()
    }


def _as_message(node: Any) -> str | None:
    if node is None or isinstance(node, Mapping):
        return None
    if isinstance(node, list):
        return "\n".join(str(item) for item in node)
    if isinstance(node, bool):
        return str(node).lower()
    return str(node)


def _iter_keys(node: Mapping[Any, Any], *, prefix: str) -> Iterator[str]:
    for key, value in node.items():
        path = f"{prefix}{key}"
        if isinstance(value, Mapping):
            yield from _iter_keys(value, prefix=f"{path}{KEY_SEPARATOR}")
        elif value is not None:
            yield path
