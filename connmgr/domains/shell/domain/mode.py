"""Top-level interaction modes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Browsing:
    """Arrow keys move the module bar hover."""

    name = "browsing"
    label = "Browsing"


@dataclass(frozen=True)
class TreeNavigating:
    """Keys drive the project/environment/connection tree."""

    name = "tree"
    label = "Tree"


@dataclass(frozen=True)
class ConfirmPending:
    """Quit confirmation is showing; ``previous`` is restored on cancel."""

    previous: Browsing | TreeNavigating

    name = "confirm"
    label = "Confirm quit"


Mode = Union[Browsing, TreeNavigating, ConfirmPending]

BROWSING = Browsing()
TREE_NAVIGATING = TreeNavigating()
