"""Escaping and serialization primitives for tag markup."""

import html
import re
from collections.abc import Mapping

AttributeValue = str | int | float | bool | None

_TAG_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9\-]*$")
_ATTRIBUTE_NAME_PATTERN = re.compile(r"^[^\s\"'>/=\x00-\x1f]+$")


def escape_attribute(value: str) -> str:
    """Escape a value for a double-quoted HTML attribute."""
    return html.escape(value, quote=True)


def escape_text(value: str) -> str:
    """Escape raw text content for an HTML body context."""
    return html.escape(value, quote=False)


def is_valid_tag_name(name: str) -> bool:
    return bool(_TAG_NAME_PATTERN.match(name))


def is_valid_attribute_name(name: str) -> bool:
    return bool(_ATTRIBUTE_NAME_PATTERN.match(name))


def render_attributes(attributes: Mapping[str, AttributeValue]) -> str:
    """
    Serialize attributes in insertion order.

    ``True`` renders a bare attribute, ``None`` and ``False`` are dropped.
    The result starts with a space unless it is empty.
    """
    parts: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(name)
            continue
        parts.append(f'{name}="{escape_attribute(str(value))}"')
    return "".join(f" {part}" for part in parts)


def limit(text: str, max_length: int | None, end: str = "...") -> str:
    """Truncate text to max_length characters, appending end when cut."""
    if max_length is None or len(text) <= max_length:
        return text
    return text[:max_length].rstrip() + end
