"""Placements: ordered, name-keyed tag collections for one output location."""

from collections.abc import Iterator

from headtags.contracts import TagInterface
from headtags.exceptions import ValidationError
from headtags.types import PLACEMENT_HEAD


class Placement:
    """Ordered mapping of tag name to tag.

    Replacing an existing name keeps its position; new names are appended.
    """

    def __init__(self, name: str = PLACEMENT_HEAD) -> None:
        self._name = name
        self._entries: dict[str, TagInterface] = {}

    @property
    def name(self) -> str:
        return self._name

    def add_or_replace(self, name: str, tag: TagInterface) -> None:
        """Store tag under name. The tag must belong to this placement."""
        if tag.placement() != self._name:
            raise ValidationError(
                f"Tag {name!r} belongs to placement {tag.placement()!r}, "
                f"not {self._name!r}"
            )
        self._entries[name] = tag

    def get(self, name: str) -> TagInterface | None:
        return self._entries.get(name)

    def has(self, name: str) -> bool:
        return name in self._entries

    def remove(self, name: str) -> None:
        self._entries.pop(name, None)

    def clear(self) -> None:
        self._entries.clear()

    def names(self) -> list[str]:
        return list(self._entries)

    def all(self) -> list[TagInterface]:
        return list(self._entries.values())

    def items(self) -> list[tuple[str, TagInterface]]:
        return list(self._entries.items())

    def to_html(self) -> str:
        """Render every tag in insertion order, one per line."""
        rendered = (tag.to_html() for tag in self._entries.values())
        return "\n".join(html for html in rendered if html)

    def __html__(self) -> str:
        return self.to_html()

    def __str__(self) -> str:
        return self.to_html()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TagInterface]:
        return iter(list(self._entries.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        return f"Placement({self._name!r}, {self.names()!r})"


class PlacementsBag:
    """Lazily created placements, keyed by name."""

    def __init__(self) -> None:
        self._bags: dict[str, Placement] = {}

    def get_bag(self, name: str) -> Placement:
        """Return the placement for name, creating it on first access."""
        bag = self._bags.get(name)
        if bag is None:
            bag = self._bags[name] = Placement(name)
        return bag

    def has(self, name: str) -> bool:
        return name in self._bags

    def all(self) -> dict[str, Placement]:
        return dict(self._bags)
