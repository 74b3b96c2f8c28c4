"""Logfire setup for client processes.

Client code calls logfire directly:

    logfire.info("Comment liked", comment_id=comment_id)

    with logfire.span("view.fetch", view="CommentThread"):
        ...

Mutations open a ``mutation.<action>`` span and REST calls an ``api.call``
span, so one user action shows up as a single trace.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Optional

import httpx
import logfire

from club.config import Settings


def _service_version() -> str:
    try:
        return version("club-sync")
    except PackageNotFoundError:
        return "0.0.0+local"


def configure_logfire(settings: Settings) -> None:
    """Configure logfire from ``settings.observability``.

    Nothing leaves the machine unless a token is set or
    OBSERVABILITY__SEND_TO_LOGFIRE is true.
    """
    observability = settings.observability
    send = observability.resolve_send()

    options = {
        "service_name": settings.service_name,
        "service_version": _service_version(),
        "environment": settings.environment,
        "send_to_logfire": send,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
            min_log_level="debug" if settings.debug else "info",
        ),
    }
    if observability.logfire_token:
        options["token"] = observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_httpx(client: Optional[httpx.AsyncClient] = None) -> None:
    """Trace outbound REST calls.

    Args:
        client: Instrument only this client; all clients when omitted
    """
    if client is None:
        logfire.instrument_httpx()
    else:
        logfire.instrument_httpx(client)
    logfire.debug("httpx instrumented", scoped=client is not None)
