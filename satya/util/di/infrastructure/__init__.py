"""Swappable infrastructure components.

Production implementations are imported here so that
``PersistenceProvider.__subclasses__()`` and friends can find them.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider
from .platform import PlatformProvider, ProdPlatformProvider

__all__ = [
    "PersistenceProvider",
    "PlatformProvider",
    "ProdPersistenceProvider",
    "ProdPlatformProvider",
]
