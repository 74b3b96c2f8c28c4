"""Mock providers for testing."""

from .api import MockApiProvider
from .channel import MockChannelProvider
from .feedback import MockFeedbackProvider
from .container import build_test_container

__all__ = [
    "MockApiProvider",
    "MockChannelProvider",
    "MockFeedbackProvider",
    "build_test_container",
]
