"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ApiError(AdapterError):
    """REST call failed.

    ``status_code`` is None when no response arrived (timeout, refused
    connection). ``message`` carries the server's own message field when
    the envelope had one.
    """

    def __init__(self, method: str, path: str, status_code: int | None, message: str | None = None):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.message = message
        status = status_code if status_code is not None else "no response"
        super().__init__(f"{method} {path} failed ({status}): {message or 'no message'}")

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401


class ChannelError(AdapterError):
    """Push channel could not be opened."""

    pass
