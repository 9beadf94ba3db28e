"""TagRegistry - the public facade for building a page's head and footer tags.

Provides:
- Well-known SEO setters/getters keyed into the head placement
- Title composition (separator + prepended fragments)
- Generic meta/link/script/style/custom tag insertion
- Package inclusion with per-registry idempotency
- Rendering of any placement to markup
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from headtags.contracts import (
    PackageInterface,
    PackageResolver,
    Paginator,
    TagInterface,
    TokenSource,
)
from headtags.exceptions import ValidationError
from headtags.markup import AttributeValue, limit
from headtags.placements import Placement, PlacementsBag
from headtags.tags import Link, Meta, Script, Style, Title
from headtags.types import (
    PLACEMENT_FOOTER,
    PLACEMENT_HEAD,
    GeoMetaInformation,
    MetaConfig,
)

logger = logging.getLogger(__name__)

TITLE_KEY = "title"

WEBMASTER_TAGS: dict[str, str] = {
    "google": "google-site-verification",
    "yandex": "yandex-verification",
    "bing": "msvalidate.01",
    "alexa": "alexaVerifyID",
    "pinterest": "p:domain_verify",
    "facebook": "facebook-domain-verification",
}


class TagRegistry:
    """Registry of the tags for one page.

    Build one per request/page, populate it while the page is assembled,
    render it once. Not safe for concurrent mutation.

    Usage:
        meta = TagRegistry()
        meta.set_title("Home").prepend_title("Site").set_title_separator(" - ")
        meta.set_description("Welcome")
        html = meta.to_html()
    """

    def __init__(
        self,
        *,
        config: MetaConfig | None = None,
        package_resolver: PackageResolver | None = None,
        token_source: TokenSource | None = None,
    ) -> None:
        self._config = config or MetaConfig()
        self._package_resolver = package_resolver
        self._token_source = token_source
        self._placements = PlacementsBag()
        self._registered_packages: set[str] = set()
        self._title = Title(
            separator=self._config.title_separator,
            max_length=self._config.title_max_length,
        )
        self.head().add_or_replace(TITLE_KEY, self._title)

    @property
    def config(self) -> MetaConfig:
        return self._config

    # =========================================================================
    # Title
    # =========================================================================

    def set_title(self, title: str) -> TagRegistry:
        self._title.set_title(title)
        return self

    def prepend_title(self, text: str) -> TagRegistry:
        self._title.prepend(text)
        return self

    def set_title_separator(self, separator: str) -> TagRegistry:
        self._title.set_separator(separator)
        return self

    def get_title(self) -> Title:
        return self._title

    # =========================================================================
    # Well-known meta tags
    # =========================================================================

    def set_description(self, description: str) -> TagRegistry:
        content = limit(description, self._config.description_max_length)
        return self.add_meta("description", {"name": "description", "content": content})

    def get_description(self) -> TagInterface | None:
        return self.get_meta("description")

    def set_keywords(self, keywords: str | Sequence[str]) -> TagRegistry:
        """Set keywords from a string or a sequence joined with commas.

        An empty value writes nothing and keeps any existing keywords tag.
        """
        if not isinstance(keywords, str):
            keywords = ",".join(word for word in keywords if word.strip())
        if not keywords.strip():
            return self
        content = limit(keywords, self._config.keywords_max_length)
        return self.add_meta("keywords", {"name": "keywords", "content": content})

    def get_keywords(self) -> TagInterface | None:
        return self.get_meta("keywords")

    def set_robots(self, behavior: str) -> TagRegistry:
        return self.add_meta("robots", {"name": "robots", "content": behavior})

    def get_robots(self) -> TagInterface | None:
        return self.get_meta("robots")

    def set_content_type(self, type: str, charset: str = "utf-8") -> TagRegistry:
        return self.add_meta(
            "content-type",
            {"http-equiv": "Content-Type", "content": f"{type}; charset={charset}"},
            check_name_attribute=False,
        )

    def get_content_type(self) -> TagInterface | None:
        return self.get_meta("content-type")

    def set_viewport(self, viewport: str) -> TagRegistry:
        return self.add_meta("viewport", {"name": "viewport", "content": viewport})

    def get_viewport(self) -> TagInterface | None:
        return self.get_meta("viewport")

    def set_charset(self, charset: str = "utf-8") -> TagRegistry:
        return self.add_meta("charset", {"charset": charset}, check_name_attribute=False)

    def get_charset(self) -> TagInterface | None:
        return self.get_meta("charset")

    def add_csrf_token(self, token: str | None = None) -> TagRegistry:
        """Add the csrf-token meta, taking the token from the token source if not given."""
        if token is None:
            if self._token_source is None:
                raise ValueError("No CSRF token given and no token source configured")
            token = self._token_source.get_token()
        return self.add_meta("csrf-token", {"name": "csrf-token", "content": token})

    def get_csrf_token(self) -> TagInterface | None:
        return self.get_meta("csrf-token")

    def set_geo(self, geo: GeoMetaInformation) -> TagRegistry:
        self.add_meta("geo.position", {"name": "geo.position", "content": geo.position})
        if geo.placename:
            self.add_meta(
                "geo.placename", {"name": "geo.placename", "content": geo.placename}
            )
        if geo.region:
            self.add_meta("geo.region", {"name": "geo.region", "content": geo.region})
        return self.add_meta("ICBM", {"name": "ICBM", "content": geo.icbm})

    def add_webmaster(self, kind: str, content: str) -> TagRegistry:
        """Add a site verification tag, e.g. ``add_webmaster("google", "abc")``."""
        meta_name = WEBMASTER_TAGS.get(kind)
        if meta_name is None:
            raise ValueError(
                f"Unknown webmaster {kind!r}, expected one of {sorted(WEBMASTER_TAGS)}"
            )
        return self.add_meta(
            f"webmaster:{kind}", {"name": meta_name, "content": content}
        )

    # =========================================================================
    # Well-known link tags
    # =========================================================================

    def set_canonical(self, url: str) -> TagRegistry:
        return self.add_link("canonical", {"rel": "canonical", "href": url})

    def get_canonical(self) -> TagInterface | None:
        return self.get_meta("canonical")

    def set_prev_href(self, url: str) -> TagRegistry:
        return self.add_link("prev", {"rel": "prev", "href": url})

    def get_prev_href(self) -> TagInterface | None:
        return self.get_meta("prev")

    def set_next_href(self, url: str) -> TagRegistry:
        return self.add_link("next", {"rel": "next", "href": url})

    def get_next_href(self) -> TagInterface | None:
        return self.get_meta("next")

    def set_pagination_links(self, paginator: Paginator) -> TagRegistry:
        """Write prev/next links for the directions that have a URL."""
        prev_url = paginator.previous_page_url()
        if prev_url:
            self.set_prev_href(prev_url)
        next_url = paginator.next_page_url()
        if next_url:
            self.set_next_href(next_url)
        return self

    def set_hreflang(self, lang: str, url: str) -> TagRegistry:
        return self.add_link(
            f"hreflang:{lang}", {"rel": "alternate", "hreflang": lang, "href": url}
        )

    def get_hreflang(self, lang: str) -> TagInterface | None:
        return self.get_meta(f"hreflang:{lang}")

    def set_favicon(
        self, href: str, attributes: Mapping[str, AttributeValue] | None = None
    ) -> TagRegistry:
        return self.add_link("favicon", {"rel": "icon", "href": href, **(attributes or {})})

    def get_favicon(self) -> TagInterface | None:
        return self.get_meta("favicon")

    # =========================================================================
    # Generic tags
    # =========================================================================

    def add_link(self, name: str, attributes: Mapping[str, AttributeValue]) -> TagRegistry:
        return self.add_tag(name, Link(attributes))

    def add_meta(
        self,
        name: str,
        attributes: Mapping[str, AttributeValue],
        check_name_attribute: bool = True,
    ) -> TagRegistry:
        if check_name_attribute and not attributes.get("name"):
            raise ValidationError(f"Meta tag {name!r} requires a 'name' attribute")
        return self.add_tag(name, Meta(attributes))

    def add_script(
        self,
        name: str,
        src: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        placement: str = PLACEMENT_FOOTER,
    ) -> TagRegistry:
        return self.add_tag(name, Script(src, attributes, placement=placement))

    def add_style(
        self,
        name: str,
        href: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        placement: str = PLACEMENT_HEAD,
    ) -> TagRegistry:
        return self.add_tag(name, Style(href, attributes, placement=placement))

    def add_tag(self, name: str, tag: TagInterface) -> TagRegistry:
        """Store tag under name in the placement the tag names."""
        self._check_reserved_key(name, tag)
        self.placement(tag.placement()).add_or_replace(name, tag)
        return self

    def _check_reserved_key(self, name: str, tag: TagInterface) -> None:
        if name == TITLE_KEY and tag is not self._title:
            raise ValidationError(
                f"{TITLE_KEY!r} is reserved for the document title, use set_title()"
            )

    def get_meta(self, name: str) -> TagInterface | None:
        """Find a tag by name, looking in the head placement first."""
        head = self.head()
        tag = head.get(name)
        if tag is not None:
            return tag
        for placement in self._placements.all().values():
            if placement is head:
                continue
            tag = placement.get(name)
            if tag is not None:
                return tag
        return None

    def remove_tag(self, name: str) -> TagRegistry:
        """Remove name from every placement. The title cannot be removed."""
        if name == TITLE_KEY:
            return self
        for placement in self._placements.all().values():
            placement.remove(name)
        return self

    def reset(self) -> None:
        """Remove every tag except the title."""
        for placement in self._placements.all().values():
            for name in placement.names():
                if placement.get(name) is not self._title:
                    placement.remove(name)
        head = self.head()
        if head.get(TITLE_KEY) is not self._title:
            head.add_or_replace(TITLE_KEY, self._title)

    # =========================================================================
    # Placements
    # =========================================================================

    def placement(self, name: str) -> Placement:
        return self._placements.get_bag(name)

    def get_placements(self) -> dict[str, Placement]:
        return self._placements.all()

    def head(self) -> Placement:
        return self.placement(PLACEMENT_HEAD)

    def footer(self) -> Placement:
        return self.placement(PLACEMENT_FOOTER)

    # =========================================================================
    # Packages
    # =========================================================================

    def include_packages(
        self, packages: str | PackageInterface | Iterable[str | PackageInterface]
    ) -> TagRegistry:
        """Resolve and register one or more packages by name or instance."""
        if isinstance(packages, (str, PackageInterface)):
            packages = [packages]
        for item in packages:
            if isinstance(item, str):
                package = (
                    self._package_resolver.get_package(item)
                    if self._package_resolver is not None
                    else None
                )
                if package is None:
                    logger.warning("Package %r is not registered, skipping", item)
                    continue
            else:
                package = item
            self.register_package(package)
        return self

    def register_package(self, package: PackageInterface) -> TagRegistry:
        """Merge a package's tags once per registry lifetime."""
        name = package.get_name()
        if name in self._registered_packages:
            logger.debug("Package %r already registered, skipping", name)
            return self
        groups = package.get_tags()
        for placement_name, tags in groups.items():
            for key, tag in tags.items():
                self._check_reserved_key(key, tag)
                if tag.placement() != placement_name:
                    raise ValidationError(
                        f"Package {name!r} groups {key!r} under {placement_name!r} "
                        f"but the tag belongs to {tag.placement()!r}"
                    )
        for placement_name, tags in groups.items():
            placement = self.placement(placement_name)
            for key, tag in tags.items():
                placement.add_or_replace(key, tag)
        self._registered_packages.add(name)
        logger.debug("Registered package %r", name)
        return self

    def get_registered_packages(self) -> set[str]:
        return set(self._registered_packages)

    # =========================================================================
    # Defaults
    # =========================================================================

    def apply_defaults(self) -> TagRegistry:
        """Write the defaults from the registry's config."""
        config = self._config
        if config.charset:
            self.set_charset(config.charset)
        if config.title:
            self.set_title(config.title)
        if config.description:
            self.set_description(config.description)
        if config.keywords:
            self.set_keywords(config.keywords)
        if config.viewport:
            self.set_viewport(config.viewport)
        if config.robots:
            self.set_robots(config.robots)
        if config.csrf_token:
            self.add_csrf_token()
        if config.packages:
            self.include_packages(config.packages)
        return self

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, placement: str = PLACEMENT_HEAD) -> str:
        """Render one placement. Unknown placements render as an empty string."""
        if not self._placements.has(placement):
            return ""
        return self._placements.get_bag(placement).to_html()

    def to_html(self) -> str:
        return self.render(PLACEMENT_HEAD)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Serialize every placement to a list of tag dicts."""
        result: dict[str, list[dict[str, Any]]] = {}
        for name, placement in self._placements.all().items():
            result[name] = [
                tag.to_dict() if hasattr(tag, "to_dict") else {"html": tag.to_html()}
                for tag in placement
            ]
        return result

    def __html__(self) -> str:
        return self.to_html()

    def __str__(self) -> str:
        return self.to_html()
