"""User-visible acknowledgements (toasts)."""

from abc import ABC, abstractmethod
from typing import Literal

import logfire
from pydantic import BaseModel

Level = Literal["success", "error", "info"]


class Acknowledgement(BaseModel):
    """One toast shown to the user."""

    level: Level
    message: str


class Acknowledger(ABC):
    """Surface short-lived feedback to the user.

    The mutator calls this at most once per outcome: one ``error`` per failed
    mutation, at most one ``success`` per successful one.
    """

    @abstractmethod
    def success(self, message: str) -> None:
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        pass

    @abstractmethod
    def info(self, message: str) -> None:
        pass


class LogfireAcknowledger(Acknowledger):
    """Writes acknowledgements to the log, for headless clients."""

    def success(self, message: str) -> None:
        logfire.info("{toast}", toast=message, toast_level="success")

    def error(self, message: str) -> None:
        logfire.error("{toast}", toast=message, toast_level="error")

    def info(self, message: str) -> None:
        logfire.info("{toast}", toast=message, toast_level="info")


class RecordingAcknowledger(Acknowledger):
    """Keeps every acknowledgement in order, for tests and UI adapters."""

    def __init__(self) -> None:
        self.history: list[Acknowledgement] = []

    def success(self, message: str) -> None:
        self.history.append(Acknowledgement(level="success", message=message))

    def error(self, message: str) -> None:
        self.history.append(Acknowledgement(level="error", message=message))

    def info(self, message: str) -> None:
        self.history.append(Acknowledgement(level="info", message=message))

    def messages(self, level: Level | None = None) -> list[str]:
        return [ack.message for ack in self.history if level is None or ack.level == level]

    def clear(self) -> None:
        self.history.clear()
