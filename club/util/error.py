"""Errors raised while wiring the client together.

These surface at start-up, before any request is made, and are never
absorbed by the mutator.
"""


class UtilError(Exception):
    """Base error for configuration and wiring problems."""

    pass


class ConfigurationError(UtilError):
    """A setting is missing or unusable."""

    def __init__(self, setting: str, problem: str):
        self.setting = setting
        super().__init__(f"{setting}: {problem}")


class DependencyInjectionError(UtilError):
    """The provider graph cannot be assembled as requested."""

    pass
