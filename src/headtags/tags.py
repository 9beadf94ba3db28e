"""Tag definitions: custom elements, meta, link, title, script and style."""

from collections.abc import Mapping
from typing import Any

from headtags.exceptions import ValidationError
from headtags.markup import (
    AttributeValue,
    escape_text,
    is_valid_attribute_name,
    is_valid_tag_name,
    limit,
    render_attributes,
)
from headtags.types import (
    DEFAULT_TITLE_SEPARATOR,
    PLACEMENT_FOOTER,
    PLACEMENT_HEAD,
    TagKind,
)

_META_KEY_ATTRIBUTES = ("name", "http-equiv", "property", "itemprop")


def _normalize_attributes(
    attributes: Mapping[str, AttributeValue] | None,
) -> dict[str, AttributeValue]:
    """Copy attributes in order, dropping unset values and stringifying numbers."""
    result: dict[str, AttributeValue] = {}
    for name, value in (attributes or {}).items():
        if not isinstance(name, str) or not is_valid_attribute_name(name):
            raise ValidationError(f"Invalid attribute name: {name!r}")
        if value is None or value is False:
            continue
        result[name] = value if isinstance(value, (str, bool)) else str(value)
    return result


class Tag:
    """An arbitrary HTML element with ordered attributes."""

    kind: TagKind = "custom"

    def __init__(
        self,
        tag_name: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        *,
        content: str | None = None,
        self_closing: bool = False,
        placement: str = PLACEMENT_HEAD,
    ) -> None:
        if not is_valid_tag_name(tag_name):
            raise ValidationError(f"Invalid tag name: {tag_name!r}")
        attrs = _normalize_attributes(attributes)
        if not attrs and content is None:
            raise ValidationError(f"<{tag_name}> requires attributes or content")
        self._tag_name = tag_name.lower()
        self._attributes = attrs
        self._content = content
        self._self_closing = self_closing
        self._placement = placement

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def content(self) -> str | None:
        return self._content

    def placement(self) -> str:
        return self._placement

    def get_attributes(self) -> dict[str, AttributeValue]:
        return dict(self._attributes)

    def to_html(self) -> str:
        attrs = render_attributes(self._attributes)
        if self._self_closing:
            return f"<{self._tag_name}{attrs}>"
        content = escape_text(self._content) if self._content else ""
        return f"<{self._tag_name}{attrs}>{content}</{self._tag_name}>"

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": self._tag_name, **self._attributes}
        if self._content:
            result["content"] = self._content
        return result

    def __html__(self) -> str:
        return self.to_html()

    def __str__(self) -> str:
        return self.to_html()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._tag_name!r}, {self._attributes!r})"


class Meta(Tag):
    """A ``<meta>`` element.

    Needs ``content`` alongside one of name/http-equiv/property/itemprop,
    or a ``charset`` attribute on its own.
    """

    kind: TagKind = "meta"

    def __init__(
        self,
        attributes: Mapping[str, AttributeValue],
        *,
        placement: str = PLACEMENT_HEAD,
    ) -> None:
        attrs = _normalize_attributes(attributes)
        has_key = any(key in attrs for key in _META_KEY_ATTRIBUTES)
        if "charset" not in attrs and not (has_key and "content" in attrs):
            raise ValidationError(
                "Meta tag requires 'content' with one of "
                f"{', '.join(_META_KEY_ATTRIBUTES)}, or 'charset'"
            )
        super().__init__("meta", attrs, self_closing=True, placement=placement)


class Link(Tag):
    """A ``<link>`` element. Requires ``rel`` and ``href``."""

    kind: TagKind = "link"

    def __init__(
        self,
        attributes: Mapping[str, AttributeValue],
        *,
        placement: str = PLACEMENT_HEAD,
    ) -> None:
        attrs = _normalize_attributes(attributes)
        missing = [key for key in ("rel", "href") if key not in attrs]
        if missing:
            raise ValidationError(f"Link tag is missing {', '.join(missing)}")
        super().__init__("link", attrs, self_closing=True, placement=placement)


class Style(Link):
    """A stylesheet link."""

    def __init__(
        self,
        href: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        *,
        placement: str = PLACEMENT_HEAD,
    ) -> None:
        super().__init__(
            {"rel": "stylesheet", "href": href, **(attributes or {})},
            placement=placement,
        )


class Script(Tag):
    """An external ``<script>``, rendered in the footer unless told otherwise."""

    def __init__(
        self,
        src: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        *,
        placement: str = PLACEMENT_FOOTER,
    ) -> None:
        super().__init__(
            "script",
            {"src": src, **(attributes or {})},
            content="",
            placement=placement,
        )


class Title:
    """The document title, composed from prepended fragments and the main text."""

    kind: TagKind = "title"

    def __init__(
        self,
        title: str | None = None,
        *,
        separator: str = DEFAULT_TITLE_SEPARATOR,
        max_length: int | None = None,
        placement: str = PLACEMENT_HEAD,
    ) -> None:
        self._title = title
        self._prepends: list[str] = []
        self._separator = separator
        self._max_length: int | None = None
        self._placement = placement
        self.set_max_length(max_length)

    def set_title(self, title: str | None) -> None:
        self._title = title

    def prepend(self, text: str) -> None:
        self._prepends.append(text)

    def set_separator(self, separator: str) -> None:
        self._separator = separator

    def set_max_length(self, max_length: int | None) -> None:
        if max_length is not None and max_length <= 0:
            raise ValueError("max_length must be a positive integer")
        self._max_length = max_length

    def get_title(self) -> str | None:
        return self._title

    def get_prepends(self) -> list[str]:
        return list(self._prepends)

    def get_separator(self) -> str:
        return self._separator

    def compose(self) -> str:
        """Join prepends and the (truncated) title with the separator."""
        title = limit(self._title, self._max_length) if self._title else None
        parts = [part for part in (*self._prepends, title) if part]
        return self._separator.join(parts)

    def placement(self) -> str:
        return self._placement

    def get_attributes(self) -> dict[str, AttributeValue]:
        return {}

    def to_html(self) -> str:
        text = self.compose()
        if not text:
            return ""
        return f"<title>{escape_text(text)}</title>"

    def to_dict(self) -> dict[str, Any]:
        return {"tag": "title", "content": self.compose()}

    def __html__(self) -> str:
        return self.to_html()

    def __str__(self) -> str:
        return self.to_html()

    def __repr__(self) -> str:
        return f"Title({self.compose()!r})"
