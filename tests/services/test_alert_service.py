"""
Tests for Alert Service inbox operations
"""
import pytest


@pytest.fixture
def alert_repository():
    from hostdash.api.infrastructure.memory import MemoryAlertRepository
    return MemoryAlertRepository()


@pytest.fixture
def alert_service(alert_repository):
    from hostdash.api.services.alert_service import AlertService
    return AlertService(alert_repository)


class TestMarkAsRead:
    """Tests for mark_as_read"""

    @pytest.mark.asyncio
    async def test_marks_alert_read(self, alert_service, alert_repository, make_alert):
        alert = await alert_repository.create(make_alert())

        updated = await alert_service.mark_as_read("user_001", alert.id)

        assert updated.read is True
        assert updated.read_at is not None

    @pytest.mark.asyncio
    async def test_repeat_is_noop(self, alert_service, alert_repository, make_alert):
        alert = await alert_repository.create(make_alert())

        first = await alert_service.mark_as_read("user_001", alert.id)
        first_read_at = first.read_at
        second = await alert_service.mark_as_read("user_001", alert.id)

        assert second.read is True
        assert second.read_at == first_read_at

    @pytest.mark.asyncio
    async def test_unknown_alert(self, alert_service):
        from hostdash.api.core.errors import AlertNotFoundError

        with pytest.raises(AlertNotFoundError):
            await alert_service.mark_as_read("user_001", "alr_missing")

    @pytest.mark.asyncio
    async def test_other_users_alert(self, alert_service, alert_repository, make_alert):
        from hostdash.api.core.errors import AlertNotFoundError

        alert = await alert_repository.create(make_alert(user_id="user_002"))

        with pytest.raises(AlertNotFoundError):
            await alert_service.mark_as_read("user_001", alert.id)

        assert (await alert_repository.get_by_id(alert.id)).read is False


class TestCreateAlert:
    """Tests for create_alert"""

    @pytest.mark.asyncio
    async def test_creates_unread_alert(self, alert_service):
        from hostdash.api.repositories.alert_repository import AlertPriority, AlertType

        alert = await alert_service.create_alert(
            "user_001",
            "Renewal due",
            "Your VPS renews soon",
            type=AlertType.RENEWAL,
            priority=AlertPriority.HIGH
        )

        assert alert.id.startswith("alr_")
        assert alert.read is False
        assert alert.type == AlertType.RENEWAL
        assert alert.priority == AlertPriority.HIGH
        assert alert.created_by == "admin"
        assert alert.action_url is None
        assert alert.action_text is None

    @pytest.mark.asyncio
    async def test_action_link_stored_when_given(self, alert_service):
        alert = await alert_service.create_alert(
            "user_001", "Invoice", "Invoice ready",
            action_url="/billing", action_text="View invoice"
        )

        assert alert.action_url == "/billing"
        assert alert.action_text == "View invoice"

    @pytest.mark.asyncio
    async def test_accepts_plain_string_type(self, alert_service):
        from hostdash.api.repositories.alert_repository import AlertType

        alert = await alert_service.create_alert("user_001", "t", "m", type="warning")

        assert alert.type == AlertType.WARNING

    @pytest.mark.asyncio
    async def test_invalid_type_rejected(self, alert_service):
        with pytest.raises(ValueError):
            await alert_service.create_alert("user_001", "t", "m", type="urgent")


class TestSendBulkAlerts:
    """Tests for send_bulk_alerts"""

    @pytest.mark.asyncio
    async def test_one_alert_per_user(self, alert_service, alert_repository):
        ids = await alert_service.send_bulk_alerts(
            ["user_001", "user_002", "user_003"],
            "Maintenance",
            "Scheduled maintenance tonight"
        )

        assert len(ids) == 3
        assert len(set(ids)) == 3
        for user_id in ("user_001", "user_002", "user_003"):
            alerts = await alert_repository.get_by_user(user_id)
            assert len(alerts) == 1
            assert alerts[0].title == "Maintenance"

    @pytest.mark.asyncio
    async def test_empty_recipient_list(self, alert_service):
        assert await alert_service.send_bulk_alerts([], "t", "m") == []
