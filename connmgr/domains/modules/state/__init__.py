"""Module bar key state exports."""

from .browsing import BrowsingState

__all__ = ["BrowsingState"]
