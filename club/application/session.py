"""Authenticated session."""

from typing import Optional

import logfire

from club.adapter.error import AdapterError, ApiError, ChannelError
from club.application.listener import RealtimeListener
from club.application.mutator import OptimisticMutator, failure_message
from club.domain.error import DomainError
from club.domain.model.notification import Notification
from club.domain.model.user import SessionUser
from club.domain.repository.auth import AuthRepository, CredentialStore
from club.domain.service.channel import PushChannel
from club.domain.subscription import SubscriptionGroup
from club.domain.value import PushEvent, UserId


class Session:
    """The logged-in user and the push channel tied to them.

    Created once per process and injected into every view. Login or a
    successful ``load`` opens the push channel; logout, or any request
    refused with 401, closes it and drops every listener registered on it.
    """

    def __init__(
        self,
        auth: AuthRepository,
        credentials: CredentialStore,
        listener: RealtimeListener,
        mutator: OptimisticMutator,
    ) -> None:
        self._auth = auth
        self._credentials = credentials
        self._listener = listener
        self._acknowledger = mutator.acknowledger
        self._subscriptions = SubscriptionGroup()
        self.user: Optional[SessionUser] = None
        mutator.on_unauthorized(self.expire)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self) -> Optional[UserId]:
        return self.user.id if self.user else None

    @property
    def is_admin(self) -> bool:
        return self.user is not None and self.user.is_admin

    @property
    def channel(self) -> PushChannel:
        return self._listener.channel

    def is_mine(self, author_id: Optional[str]) -> bool:
        return self.user is not None and author_id == self.user.id

    def has_liked(self, likes: list[UserId]) -> bool:
        return self.user is not None and self.user.id in likes

    async def login(self, email: str, password: str) -> bool:
        """Log in and open the push channel.

        Logging in over an existing session replaces it: the previous user's
        channel, listeners and token are torn down first. A failed attempt
        leaves the existing session untouched.

        Returns:
            True if the credentials were accepted
        """
        with logfire.span("session.login"):
            try:
                token, user = await self._auth.login(email, password)
            except (AdapterError, DomainError) as e:
                logfire.warn("Login failed", error=str(e))
                self._acknowledger.error(failure_message(e, "Login failed"))
                return False

            if self.user is not None:
                logfire.info("Replacing session", previous=self.user.id, user_id=user.id)
                await self._end()

            self._credentials.set_token(token)
            self.user = user
            self._acknowledger.success("Login successful")
            await self._open_channel(token)
            return True

    async def load(self) -> bool:
        """Resume a session from a stored token.

        A refused token is cleared; other failures keep it for a later retry.

        Returns:
            True if a user was resolved
        """
        token = self._credentials.get_token()
        if not token:
            return False

        with logfire.span("session.load"):
            try:
                user = await self._auth.me()
            except (AdapterError, DomainError) as e:
                logfire.warn("Could not resume session", error=str(e))
                if isinstance(e, ApiError) and e.is_unauthorized:
                    self._credentials.clear()
                return False

            self.user = user
            await self._open_channel(token)
            return True

    async def logout(self) -> None:
        await self._end()
        self._acknowledger.success("Logged out successfully")

    async def expire(self) -> None:
        """Authentication was lost; tear down without a success toast."""
        if self.user is None:
            return
        logfire.warn("Session expired", user_id=self.user.id)
        await self._end()

    async def _open_channel(self, token: str) -> None:
        """Connect with ``token`` and hold exactly one notification subscription."""
        self._subscriptions.dispose()
        try:
            await self.channel.connect(token)
        except ChannelError:
            # Fetch-only mode: views still work, just without live updates
            self._acknowledger.error("Failed to connect to server")
            return
        self._subscriptions.add(
            self._listener.listen(PushEvent.NOTIFICATION, self._announce)
        )

    async def _end(self) -> None:
        self._subscriptions.dispose()
        await self.channel.disconnect()
        self.channel.clear()
        self._credentials.clear()
        self.user = None

    def _announce(self, notification: Notification) -> None:
        self._acknowledger.success(notification.message)
