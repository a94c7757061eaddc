"""Mock DI components.

Importing this package registers the mock subclasses that
``satya.util.di.get_provider`` selects from.
"""

from .persistence import MockPersistenceProvider
from .platform import MockPlatformProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockPlatformProvider",
    "build_test_container",
]
