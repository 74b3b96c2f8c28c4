"""Infrastructure providers."""

# Import bases
from .api import ApiProvider
from .channel import ChannelProvider
from .feedback import FeedbackProvider

# Import implementations (needed for __subclasses__())
from .api import ProdApiProvider  # noqa: F401
from .channel import ProdChannelProvider  # noqa: F401
from .feedback import ProdFeedbackProvider  # noqa: F401

__all__ = [
    "ApiProvider",
    "ChannelProvider",
    "FeedbackProvider",
    "ProdApiProvider",
    "ProdChannelProvider",
    "ProdFeedbackProvider",
]
