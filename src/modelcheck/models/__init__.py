"""Models validated by modelcheck."""

from .resource import BaseResource

__all__ = [
    "BaseResource",
]
