"""Application layer DI providers."""

from dishka import Scope, provide

from club.application.listener import RealtimeListener
from club.application.mutator import OptimisticMutator
from club.application.session import Session
from club.application.view import (
    CommentThreadFactory,
    Dashboard,
    DraftPosts,
    EditRequests,
    MyPosts,
    NotificationFeedFactory,
    PendingPosts,
)
from club.config import FeedSettings
from club.domain.repository import (
    AuthRepository,
    CommentRepository,
    CredentialStore,
    NotificationRepository,
    PostRepository,
)
from club.domain.service import Acknowledger, PushChannel
from club.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed.

    The mutator, listener and session live for the whole process; views are
    request-scoped so each screen gets its own store.
    """

    @provide(scope=Scope.APP)
    def get_mutator(self, acknowledger: Acknowledger) -> OptimisticMutator:
        return OptimisticMutator(acknowledger)

    @provide(scope=Scope.APP)
    def get_listener(self, channel: PushChannel) -> RealtimeListener:
        return RealtimeListener(channel)

    @provide(scope=Scope.APP)
    def get_session(
        self,
        auth: AuthRepository,
        credentials: CredentialStore,
        listener: RealtimeListener,
        mutator: OptimisticMutator,
    ) -> Session:
        """Provide the session shared by every view."""
        return Session(auth, credentials, listener, mutator)

    # Views
    @provide(scope=Scope.REQUEST)
    def get_comment_thread_factory(
        self,
        comments: CommentRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
    ) -> CommentThreadFactory:
        return CommentThreadFactory(comments, mutator, listener, session)

    @provide(scope=Scope.REQUEST)
    def get_notification_feed_factory(
        self,
        notifications: NotificationRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
        settings: FeedSettings,
    ) -> NotificationFeedFactory:
        return NotificationFeedFactory(notifications, mutator, listener, session, settings)

    @provide(scope=Scope.REQUEST)
    def get_my_posts(
        self,
        posts: PostRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
    ) -> MyPosts:
        return MyPosts(posts, mutator, listener, session)

    @provide(scope=Scope.REQUEST)
    def get_draft_posts(
        self,
        posts: PostRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
    ) -> DraftPosts:
        return DraftPosts(posts, mutator, listener, session)

    @provide(scope=Scope.REQUEST)
    def get_pending_posts(
        self,
        posts: PostRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
    ) -> PendingPosts:
        return PendingPosts(posts, mutator, listener, session)

    @provide(scope=Scope.REQUEST)
    def get_edit_requests(
        self,
        posts: PostRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
    ) -> EditRequests:
        return EditRequests(posts, mutator, listener, session)

    @provide(scope=Scope.REQUEST)
    def get_dashboard(
        self,
        posts: PostRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
    ) -> Dashboard:
        return Dashboard(posts, mutator, listener, session)
