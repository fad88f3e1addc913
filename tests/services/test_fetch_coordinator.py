"""
Tests for the Dashboard Fetch Coordinator

Tests partial-failure behaviour of the four-channel fetch:
- Channel isolation on errors and timeouts
- Fallback values
- Concurrent execution
"""
import asyncio
import pytest


def _coordinator(port, timeout=1.0, alert_limit=50):
    from hostdash.api.services.fetch_coordinator import DashboardFetchCoordinator
    return DashboardFetchCoordinator(port, timeout_seconds=timeout, alert_limit=alert_limit)


class TestFetchAll:
    """Happy path"""

    @pytest.mark.asyncio
    async def test_all_channels_ok(self, user, make_order, make_service, make_alert):
        from tests.mocks import MockDashboardDataPort
        from hostdash.api.models.dashboard import ChannelName, ChannelStatus
        from hostdash.api.repositories.profile_repository import ProfileEntity

        profile = ProfileEntity(id="user_001", display_name="Stored", email="stored@example.com")
        port = MockDashboardDataPort(
            orders=[make_order()],
            services=[make_service()],
            alerts=[make_alert()],
            profile=profile
        )

        snapshot = await _coordinator(port).fetch_all(user)

        assert len(snapshot.orders) == 1
        assert len(snapshot.services) == 1
        assert len(snapshot.alerts) == 1
        assert snapshot.profile is profile
        assert snapshot.degraded_channels == []
        assert all(r.status == ChannelStatus.OK for r in snapshot.channels.values())
        assert set(snapshot.channels) == set(ChannelName)

    @pytest.mark.asyncio
    async def test_channels_keyed_by_user_and_alert_limit(self, user):
        from tests.mocks import MockDashboardDataPort

        port = MockDashboardDataPort()
        await _coordinator(port, alert_limit=7).fetch_all(user)

        calls = {c["channel"]: c for c in port.call_history}
        assert set(calls) == {"orders", "services", "alerts", "profile"}
        assert all(c["user_id"] == "user_001" for c in calls.values())
        assert calls["alerts"]["limit"] == 7

    @pytest.mark.asyncio
    async def test_channels_run_concurrently(self, user):
        from tests.mocks import MockDashboardDataPort

        port = MockDashboardDataPort()
        for channel in ("orders", "services", "alerts", "profile"):
            port.delay(channel, 0.2)

        loop = asyncio.get_running_loop()
        start = loop.time()
        await _coordinator(port).fetch_all(user)

        # Sequential execution would take ~0.8s
        assert loop.time() - start < 0.6


class TestPartialFailure:
    """One channel failing never affects the others"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("channel", ["orders", "services", "alerts"])
    async def test_failed_list_channel_is_empty(self, user, make_order, make_service, make_alert, channel):
        from tests.mocks import MockDashboardDataPort
        from hostdash.api.models.dashboard import ChannelName, ChannelStatus

        port = MockDashboardDataPort(
            orders=[make_order()],
            services=[make_service()],
            alerts=[make_alert()]
        ).fail(channel)

        snapshot = await _coordinator(port).fetch_all(user)

        assert getattr(snapshot, channel) == []
        assert snapshot.degraded_channels == [ChannelName(channel)]
        assert snapshot.channels[ChannelName(channel)].status == ChannelStatus.FAILED
        assert "RuntimeError" in snapshot.channels[ChannelName(channel)].error

        for other in {"orders", "services", "alerts"} - {channel}:
            assert len(getattr(snapshot, other)) == 1

    @pytest.mark.asyncio
    async def test_failed_profile_uses_default(self, user):
        from tests.mocks import MockDashboardDataPort
        from hostdash.api.models.dashboard import ChannelName

        port = MockDashboardDataPort().fail("profile")
        snapshot = await _coordinator(port).fetch_all(user)

        assert snapshot.profile.display_name == "Test Client"
        assert snapshot.profile.email == "client@example.com"
        assert snapshot.degraded_channels == [ChannelName.PROFILE]

    @pytest.mark.asyncio
    async def test_missing_profile_is_not_degraded(self, user):
        from tests.mocks import MockDashboardDataPort
        from hostdash.api.models.dashboard import ChannelName, ChannelStatus

        snapshot = await _coordinator(MockDashboardDataPort()).fetch_all(user)

        assert snapshot.channels[ChannelName.PROFILE].status == ChannelStatus.MISSING
        assert snapshot.degraded_channels == []
        assert snapshot.profile.id == "user_001"

    @pytest.mark.asyncio
    async def test_timeout_is_a_failure(self, user, make_order):
        from tests.mocks import MockDashboardDataPort
        from hostdash.api.models.dashboard import ChannelName

        port = MockDashboardDataPort(orders=[make_order()]).delay("services", 5)
        snapshot = await _coordinator(port, timeout=0.05).fetch_all(user)

        assert snapshot.services == []
        assert len(snapshot.orders) == 1
        assert snapshot.degraded_channels == [ChannelName.SERVICES]
        assert "timed out" in snapshot.channels[ChannelName.SERVICES].error

    @pytest.mark.asyncio
    async def test_all_channels_fail(self, user):
        from tests.mocks import MockDashboardDataPort

        port = MockDashboardDataPort()
        for channel in ("orders", "services", "alerts", "profile"):
            port.fail(channel, ConnectionError("store offline"))

        snapshot = await _coordinator(port).fetch_all(user)

        assert snapshot.orders == [] and snapshot.services == [] and snapshot.alerts == []
        assert snapshot.profile.display_name == "Test Client"
        assert len(snapshot.degraded_channels) == 4

    @pytest.mark.asyncio
    async def test_synchronous_raise_is_isolated(self, user, make_order):
        """A collaborator that raises before returning an awaitable"""
        from unittest.mock import MagicMock
        from tests.mocks import MockDashboardDataPort
        from hostdash.api.models.dashboard import ChannelName

        port = MockDashboardDataPort(orders=[make_order()])
        port.get_alerts = MagicMock(side_effect=KeyError("alerts"))

        snapshot = await _coordinator(port).fetch_all(user)

        assert len(snapshot.orders) == 1
        assert snapshot.degraded_channels == [ChannelName.ALERTS]

    @pytest.mark.asyncio
    async def test_channel_cancelled_on_its_own(self, user, make_order):
        from tests.mocks import MockDashboardDataPort
        from hostdash.api.models.dashboard import ChannelName

        port = MockDashboardDataPort(orders=[make_order()]).fail("profile", asyncio.CancelledError())
        snapshot = await _coordinator(port).fetch_all(user)

        assert len(snapshot.orders) == 1
        assert snapshot.degraded_channels == [ChannelName.PROFILE]

    @pytest.mark.asyncio
    async def test_caller_cancellation_propagates(self, user):
        from tests.mocks import MockDashboardDataPort

        port = MockDashboardDataPort().delay("orders", 5)
        task = asyncio.create_task(_coordinator(port, timeout=10).fetch_all(user))
        await asyncio.sleep(0.05)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task


class TestDefaultProfile:
    """Synthesised profile"""

    def test_uses_identity(self, user):
        from hostdash.api.services.fetch_coordinator import default_profile

        profile = default_profile(user)

        assert profile.id == "user_001"
        assert profile.display_name == "Test Client"
        assert profile.email == "client@example.com"

    def test_identity_without_name_or_email(self):
        from hostdash.api.models.identity import CurrentUser
        from hostdash.api.services.fetch_coordinator import default_profile

        profile = default_profile(CurrentUser(id="anon"))

        assert profile.display_name == "User"
        assert profile.email == ""

    def test_default_preferences(self, user):
        from hostdash.api.services.fetch_coordinator import default_profile

        prefs = default_profile(user).preferences

        assert prefs.email_notifications is True
        assert prefs.sms_notifications is True
        assert prefs.maintenance_alerts is True
        assert prefs.marketing_emails is False
