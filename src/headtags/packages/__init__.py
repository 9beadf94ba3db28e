"""Tag packages: named bundles of tags registered as a unit."""

from headtags.packages.entities import OpenGraphPackage, TwitterCardPackage
from headtags.packages.manager import PackageManager
from headtags.packages.package import Package

__all__ = [
    "OpenGraphPackage",
    "Package",
    "PackageManager",
    "TwitterCardPackage",
]
