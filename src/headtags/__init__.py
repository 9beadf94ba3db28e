"""headtags - HTML head and footer tag management for Python."""

# Contracts
from headtags.contracts import (
    Htmlable,
    PackageInterface,
    PackageResolver,
    Paginator,
    TagInterface,
    TokenSource,
)

# Errors
from headtags.exceptions import MetaTagsError, ValidationError

# Packages
from headtags.packages import (
    OpenGraphPackage,
    Package,
    PackageManager,
    TwitterCardPackage,
)
from headtags.placements import Placement, PlacementsBag

# Registry API
from headtags.registry import TagRegistry

# Tags
from headtags.tags import Link, Meta, Script, Style, Tag, Title

# Core types
from headtags.types import (
    PLACEMENT_FOOTER,
    PLACEMENT_HEAD,
    GeoMetaInformation,
    MetaConfig,
    TagKind,
)

__version__ = "0.1.0"

__all__ = [
    "PLACEMENT_FOOTER",
    "PLACEMENT_HEAD",
    "GeoMetaInformation",
    "Htmlable",
    "Link",
    "Meta",
    "MetaConfig",
    "MetaTagsError",
    "OpenGraphPackage",
    "Package",
    "PackageInterface",
    "PackageManager",
    "PackageResolver",
    "Paginator",
    "Placement",
    "PlacementsBag",
    "Script",
    "Style",
    "Tag",
    "TagInterface",
    "TagKind",
    "TagRegistry",
    "Title",
    "TokenSource",
    "TwitterCardPackage",
    "ValidationError",
]
