"""Protocols for tags and for the collaborators the registry consumes."""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from headtags.markup import AttributeValue


@runtime_checkable
class Htmlable(Protocol):
    """Anything that can render itself to an HTML string."""

    def to_html(self) -> str:
        """Render to markup."""
        ...


@runtime_checkable
class TagInterface(Htmlable, Protocol):
    """A single renderable element."""

    def placement(self) -> str:
        """Name of the placement the tag belongs to."""
        ...

    def get_attributes(self) -> dict[str, AttributeValue]:
        """Ordered attribute mapping."""
        ...


@runtime_checkable
class Paginator(Protocol):
    """Source of pagination URLs. Either URL is None on the first/last page."""

    def previous_page_url(self) -> str | None:
        """URL of the previous page."""
        ...

    def next_page_url(self) -> str | None:
        """URL of the next page."""
        ...


@runtime_checkable
class TokenSource(Protocol):
    """Source of the CSRF token for the current request."""

    def get_token(self) -> str:
        """Return the token."""
        ...


@runtime_checkable
class PackageInterface(Protocol):
    """A named bundle of preconfigured tags."""

    def get_name(self) -> str:
        """Identity used to make registration idempotent."""
        ...

    def get_tags(self) -> Mapping[str, Mapping[str, TagInterface]]:
        """Tags keyed by name, grouped by placement name."""
        ...


@runtime_checkable
class PackageResolver(Protocol):
    """Resolves package names to packages."""

    def get_package(self, name: str) -> PackageInterface | None:
        """Return the package registered under name, if any."""
        ...
