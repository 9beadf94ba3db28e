"""In-process package registry."""

from __future__ import annotations

import logging
from collections.abc import Callable

from headtags.contracts import PackageInterface
from headtags.packages.package import Package

logger = logging.getLogger(__name__)


class PackageManager:
    """Keeps packages by name and resolves them for ``include_packages``.

    One manager is typically shared by the whole process; it holds package
    definitions only, never per-page tag state.
    """

    def __init__(self) -> None:
        self._packages: dict[str, PackageInterface] = {}

    def register(self, package: PackageInterface) -> None:
        """Register a package, replacing any package with the same name."""
        name = package.get_name()
        if name in self._packages:
            logger.debug("Replacing package definition %r", name)
        self._packages[name] = package

    def create(
        self, name: str, configure: Callable[[Package], None] | None = None
    ) -> Package:
        """Create, optionally configure, and register a new package."""
        package = Package(name)
        if configure is not None:
            configure(package)
        self.register(package)
        return package

    def get_package(self, name: str) -> PackageInterface | None:
        return self._packages.get(name)

    def has(self, name: str) -> bool:
        return name in self._packages

    def all(self) -> dict[str, PackageInterface]:
        return dict(self._packages)
