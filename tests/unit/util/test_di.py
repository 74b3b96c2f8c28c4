"""Unit tests for provider selection and the test container."""

import pytest

from club.adapter.memory import InMemoryPushChannel
from club.adapter.socket import SocketIOPushChannel
from club.application.session import Session
from club.application.view import Dashboard, MyPosts
from club.domain.service import Acknowledger, PushChannel
from club.domain.service.acknowledger import LogfireAcknowledger, RecordingAcknowledger
from club.util.di import (
    ChannelProvider,
    ProdApplicationProvider,
    ProdChannelProvider,
    get_provider,
)
from club.util.error import DependencyInjectionError
from tests.di import MockChannelProvider, build_test_container
from tests.harness import create_env_fixture

# Unit test fixtures
unit_env = create_env_fixture()
live_channel_env = create_env_fixture(unmock={"channel", "feedback"})


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_used_directly(self):
        assert get_provider(ProdApplicationProvider) is ProdApplicationProvider

    def test_selects_by_mock_flag(self):
        assert get_provider(ChannelProvider, use_mock=True) is MockChannelProvider
        assert get_provider(ChannelProvider, use_mock=False) is ProdChannelProvider

    def test_unknown_component_is_rejected(self):
        with pytest.raises(DependencyInjectionError):
            build_test_container(unmock={"database"})


@pytest.mark.asyncio
class TestContainer:
    """Tests for resolving the object graph."""

    async def test_mocked_graph(self, unit_env):
        session = await unit_env.get(Session)

        assert isinstance(await unit_env.get(PushChannel), InMemoryPushChannel)
        assert isinstance(await unit_env.get(Acknowledger), RecordingAcknowledger)
        assert session.channel is await unit_env.get(PushChannel)

    async def test_views_share_one_session(self, unit_env):
        session = await unit_env.get(Session)
        mine = await unit_env.get(MyPosts)
        dashboard = await unit_env.get(Dashboard)

        assert mine._session is session
        assert dashboard._session is session

    async def test_unmocked_channel_and_feedback(self, live_channel_env):
        assert isinstance(await live_channel_env.get(PushChannel), SocketIOPushChannel)
        assert isinstance(await live_channel_env.get(Acknowledger), LogfireAcknowledger)
