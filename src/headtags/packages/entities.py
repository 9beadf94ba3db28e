"""Ready-made packages for social sharing metadata."""

from __future__ import annotations

from collections.abc import Mapping

from headtags.markup import AttributeValue
from headtags.packages.package import Package

_OG_IMAGE_PROPERTIES = ("secure_url", "type", "width", "height", "alt")


class OpenGraphPackage(Package):
    """OpenGraph ``og:*`` properties."""

    def __init__(self, name: str = "open_graph", prefix: str = "og:") -> None:
        super().__init__(name)
        self._prefix = prefix
        self._images = 0
        self._alternate_locales = 0

    def _property(self, key: str, content: AttributeValue) -> OpenGraphPackage:
        prop = f"{self._prefix}{key}"
        return self.add_meta(prop, {"property": prop, "content": content})

    def set_type(self, type: str) -> OpenGraphPackage:
        return self._property("type", type)

    def set_title(self, title: str) -> OpenGraphPackage:
        return self._property("title", title)

    def set_description(self, description: str) -> OpenGraphPackage:
        return self._property("description", description)

    def set_site_name(self, site_name: str) -> OpenGraphPackage:
        return self._property("site_name", site_name)

    def set_url(self, url: str) -> OpenGraphPackage:
        return self._property("url", url)

    def set_locale(self, locale: str) -> OpenGraphPackage:
        return self._property("locale", locale)

    def add_alternate_locale(self, *locales: str) -> OpenGraphPackage:
        for locale in locales:
            self._alternate_locales += 1
            prop = f"{self._prefix}locale:alternate"
            self.add_meta(
                f"{prop}:{self._alternate_locales}",
                {"property": prop, "content": locale},
            )
        return self

    def add_image(
        self,
        url: str,
        properties: Mapping[str, AttributeValue] | None = None,
    ) -> OpenGraphPackage:
        """Add an image; properties may hold secure_url, type, width, height, alt."""
        unsupported = [key for key in (properties or {}) if key not in _OG_IMAGE_PROPERTIES]
        if unsupported:
            raise ValueError(f"Unsupported image property: {unsupported[0]!r}")
        self._images += 1
        base = f"{self._prefix}image"
        self.add_meta(f"{base}:{self._images}", {"property": base, "content": url})
        for key, value in (properties or {}).items():
            if value is None or value is False:
                continue
            prop = f"{base}:{key}"
            self.add_meta(
                f"{prop}:{self._images}", {"property": prop, "content": value}
            )
        return self


class TwitterCardPackage(Package):
    """Twitter card ``twitter:*`` metadata."""

    def __init__(self, name: str = "twitter_cards", prefix: str = "twitter:") -> None:
        super().__init__(name)
        self._prefix = prefix

    def _meta(self, key: str, content: AttributeValue) -> TwitterCardPackage:
        meta_name = f"{self._prefix}{key}"
        return self.add_meta(meta_name, {"name": meta_name, "content": content})

    @staticmethod
    def _handle(username: str) -> str:
        return username if username.startswith("@") else f"@{username}"

    def set_type(self, type: str) -> TwitterCardPackage:
        """Card type: summary, summary_large_image, app or player."""
        return self._meta("card", type)

    def set_site(self, username: str) -> TwitterCardPackage:
        return self._meta("site", self._handle(username))

    def set_creator(self, username: str) -> TwitterCardPackage:
        return self._meta("creator", self._handle(username))

    def set_title(self, title: str) -> TwitterCardPackage:
        return self._meta("title", title)

    def set_description(self, description: str) -> TwitterCardPackage:
        return self._meta("description", description)

    def set_image(self, url: str, alt: str | None = None) -> TwitterCardPackage:
        self._meta("image", url)
        if alt:
            self._meta("image:alt", alt)
        return self

    def add_meta_value(self, key: str, value: AttributeValue) -> TwitterCardPackage:
        """Set any other ``twitter:{key}`` value."""
        return self._meta(key, value)
