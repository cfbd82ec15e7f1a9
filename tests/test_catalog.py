from pathlib import Path

import pytest

from mcmessaging.catalog import MessageCatalog
from mcmessaging.errors import ConfigurationError, MessageFileError

MESSAGES = """
welcome: "Welcome {1}!"
rules:
  title: "Server rules"
  link: "Read them <link=https://example.com/rules>here</link>"
errors:
  404: "Not found"
motd:
  - "Line one"
  - "Line two"
maintenance: false
empty:
"""


def test_load_and_lookup_dotted_keys(tmp_path: Path) -> None:
    path = tmp_path / "messages.yml"
    path.write_text(MESSAGES, encoding="utf-8")

    catalog = MessageCatalog.from_file(path)

    assert catalog.path == path
    assert catalog.lookup("welcome") == "Welcome {1}!"
    assert catalog.lookup("rules.title") == "Server rules"
    assert catalog.lookup("errors.404") == "Not found"


def test_lookup_of_section_or_missing_key_is_none() -> None:
    catalog = MessageCatalog.from_text(MESSAGES)

    assert catalog.lookup("rules") is None
    assert catalog.lookup("rules.missing") is None
    assert catalog.lookup("welcome.nested") is None
    assert catalog.lookup("empty") is None


def test_list_values_join_as_lines() -> None:
    catalog = MessageCatalog.from_text(MESSAGES)

    assert catalog.lookup("motd") == "Line one\nLine two"


def test_scalar_values_are_stringified() -> None:
    catalog = MessageCatalog.from_text(MESSAGES)

    assert catalog.lookup("maintenance") == "false"


def test_keys_lists_leaves_in_file_order() -> None:
    catalog = MessageCatalog.from_text(MESSAGES)

    assert catalog.keys() == ["welcome", "rules.title", "rules.link", "errors.404", "motd", "maintenance"]
    assert "rules.link" in catalog
    assert "rules" not in catalog


def test_missing_file_raises_message_file_error(tmp_path: Path) -> None:
    with pytest.raises(MessageFileError) as exc_info:
        MessageCatalog.from_file(tmp_path / "nope.yml")

    assert isinstance(exc_info.value, ConfigurationError)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_invalid_yaml_raises_message_file_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.yml"
    path.write_text("welcome: [unclosed\n", encoding="utf-8")

    with pytest.raises(MessageFileError):
        MessageCatalog.from_file(path)


def test_non_mapping_top_level_is_rejected() -> None:
    with pytest.raises(MessageFileError):
        MessageCatalog.from_text("- just\n- a list\n")


def test_empty_file_is_an_empty_catalog(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    catalog = MessageCatalog.from_file(path)

    assert catalog.keys() == []
    assert catalog.lookup("anything") is None
