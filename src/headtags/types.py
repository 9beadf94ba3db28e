"""Core types for headtags."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

TagKind = Literal["title", "meta", "link", "custom"]

PLACEMENT_HEAD = "head"
PLACEMENT_FOOTER = "footer"

DEFAULT_TITLE_SEPARATOR = " | "


@dataclass(frozen=True, slots=True)
class MetaConfig:
    """Defaults applied to a registry by ``TagRegistry.apply_defaults``."""

    title: str | None = None
    title_separator: str = DEFAULT_TITLE_SEPARATOR
    title_max_length: int | None = None
    description: str | None = None
    description_max_length: int | None = None
    keywords: str | Sequence[str] | None = None
    keywords_max_length: int | None = None
    charset: str | None = None
    viewport: str | None = None
    robots: str | None = None
    csrf_token: bool = False
    packages: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("title_max_length", "description_max_length", "keywords_max_length"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be a positive integer")


@dataclass(frozen=True, slots=True)
class GeoMetaInformation:
    """Geographic position of the page subject."""

    latitude: float | str
    longitude: float | str
    placename: str | None = None
    region: str | None = None  # ISO 3166-2, e.g. "US-NY"

    @property
    def position(self) -> str:
        return f"{self.latitude};{self.longitude}"

    @property
    def icbm(self) -> str:
        return f"{self.latitude}, {self.longitude}"
