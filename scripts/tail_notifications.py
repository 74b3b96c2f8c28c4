#!/usr/bin/env python3
"""Log in and follow the notification feed until interrupted.

Usage:
    API__BASE_URL=https://club.example.org/api \
    CHANNEL__URL=https://club.example.org \
    python scripts/tail_notifications.py ada@example.org
"""

import argparse
import asyncio
import getpass
import sys

import logfire

from club.application.session import Session
from club.application.view import NotificationFeedFactory
from club.config import Settings
from club.util.di.container import client_scope
from club.util.logging import get_logger, setup_logging
from club.util.observability import configure_logfire, instrument_httpx

logger = get_logger(__name__)


async def tail(email: str, password: str) -> int:
    async with client_scope() as request:
        session = await request.get(Session)
        if not await session.login(email, password):
            return 1

        try:
            async with (await request.get(NotificationFeedFactory)).create() as feed:
                for notification in reversed(feed.notifications):
                    logger.info(
                        f"[{notification.type.value}] {notification.title}: {notification.message}"
                    )
                logger.info(f"{feed.unread_count} unread, following push channel")
                await asyncio.Event().wait()
        finally:
            await session.logout()
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Follow club notifications")
    parser.add_argument("email")
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()

    password = getpass.getpass()
    try:
        return asyncio.run(tail(args.email, password))
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logfire.error(
            "Notification tail failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
