"""Shared pytest fixtures."""

from dataclasses import dataclass

import pytest

from headtags import PackageManager, TagRegistry


@dataclass
class FakePaginator:
    """Paginator with fixed URLs."""

    previous: str | None = None
    next: str | None = None

    def previous_page_url(self) -> str | None:
        return self.previous

    def next_page_url(self) -> str | None:
        return self.next


@dataclass
class FakeTokenSource:
    """Token source returning a fixed token."""

    token: str = "secret-token"

    def get_token(self) -> str:
        return self.token


@pytest.fixture
def registry() -> TagRegistry:
    """Create a fresh TagRegistry for each test."""
    return TagRegistry()


@pytest.fixture
def package_manager() -> PackageManager:
    """Create a package manager with a jquery package registered."""
    manager = PackageManager()
    manager.create(
        "jquery",
        lambda package: package.add_script(
            "jquery.js", "https://code.jquery.com/jquery.min.js"
        ),
    )
    return manager
