"""Base package implementation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from headtags.contracts import TagInterface
from headtags.markup import AttributeValue
from headtags.placements import PlacementsBag
from headtags.tags import Link, Meta, Script, Style
from headtags.types import PLACEMENT_FOOTER, PLACEMENT_HEAD

P = TypeVar("P", bound="Package")


class Package:
    """A named bundle of tags.

    Tags are stored per placement with the same add-or-replace rules the
    registry uses, so a package can be built up incrementally:

        package = Package("jquery")
        package.add_script("jquery.js", "https://code.jquery.com/jquery.min.js")
    """

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Package name must not be empty")
        self._name = name
        self._placements = PlacementsBag()

    def get_name(self) -> str:
        return self._name

    def add_tag(self: P, name: str, tag: TagInterface) -> P:
        self._placements.get_bag(tag.placement()).add_or_replace(name, tag)
        return self

    def add_meta(
        self: P,
        name: str,
        attributes: Mapping[str, AttributeValue],
        *,
        placement: str = PLACEMENT_HEAD,
    ) -> P:
        return self.add_tag(name, Meta(attributes, placement=placement))

    def add_link(
        self: P,
        name: str,
        attributes: Mapping[str, AttributeValue],
        *,
        placement: str = PLACEMENT_HEAD,
    ) -> P:
        return self.add_tag(name, Link(attributes, placement=placement))

    def add_script(
        self: P,
        name: str,
        src: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        *,
        placement: str = PLACEMENT_FOOTER,
    ) -> P:
        return self.add_tag(name, Script(src, attributes, placement=placement))

    def add_style(
        self: P,
        name: str,
        href: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        *,
        placement: str = PLACEMENT_HEAD,
    ) -> P:
        return self.add_tag(name, Style(href, attributes, placement=placement))

    def get_tags(self) -> dict[str, dict[str, TagInterface]]:
        return {
            placement_name: dict(placement.items())
            for placement_name, placement in self._placements.all().items()
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"
