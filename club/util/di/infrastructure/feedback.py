"""User feedback providers."""

from dishka import Scope, provide

from club.domain.service.acknowledger import Acknowledger, LogfireAcknowledger
from club.util.di.base import ProviderBase


class FeedbackProvider(ProviderBase):
    """Acknowledgement component base."""

    __mock_component__ = "feedback"


class ProdFeedbackProvider(FeedbackProvider):
    """Acknowledgements written to the log, for headless clients."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_acknowledger(self) -> Acknowledger:
        return LogfireAcknowledger()
