"""Treemap layout for package and file views."""

from .treemap import layout_package_files, layout_packages, squarify

__all__ = [
    "squarify",
    "layout_packages",
    "layout_package_files",
]
