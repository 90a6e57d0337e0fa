"""Mock providers for testing."""

from .config import MockConfigProvider
from .container import build_test_container

__all__ = [
    "MockConfigProvider",
    "build_test_container",
]
