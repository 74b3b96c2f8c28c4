"""Provider metadata shared by production and test wiring."""

from typing import ClassVar, Literal, Type

from dishka import Provider

# Infrastructure a test may swap between a real and an in-memory version:
#   api       REST repositories (in-memory server when mocked)
#   channel   socket.io push channel (test-driven channel when mocked)
#   feedback  acknowledgements (recorded instead of logged when mocked)
Component = Literal["api", "channel", "feedback"]


class ProviderBase(Provider):
    """Provider carrying its component name and mock flag.

    A base declaring ``__mock_component__`` is never instantiated itself;
    its subclasses are the production and mock variants.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def is_mockable(base: Type[ProviderBase]) -> bool:
    return bool(base.__subclasses__())


def component_of(base: Type[ProviderBase]) -> Component | None:
    """Component name of a mockable base, None for concrete providers."""
    if not is_mockable(base):
        return None
    return base.__mock_component__
