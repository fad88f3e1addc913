"""
Tests for Demo Data seeding
"""
import pytest
from datetime import timedelta


@pytest.fixture
def repositories():
    from hostdash.api.infrastructure.memory import (
        MemoryOrderRepository,
        MemoryServiceRepository,
        MemoryAlertRepository,
        MemoryProfileRepository,
    )
    return (
        MemoryOrderRepository(),
        MemoryServiceRepository(),
        MemoryAlertRepository(),
        MemoryProfileRepository(),
    )


@pytest.fixture
def demo_service(repositories):
    from hostdash.api.services.demo_data_service import DemoDataService
    return DemoDataService(*repositories)


class TestSeed:
    """Tests for DemoDataService.seed"""

    @pytest.mark.asyncio
    async def test_summary(self, demo_service, user, now):
        summary = await demo_service.seed(user, now)

        assert summary.orders == 3
        assert summary.services == 3
        assert summary.alerts == 4
        assert summary.profile_created is True

    @pytest.mark.asyncio
    async def test_records_relative_to_now(self, demo_service, repositories, user, now):
        from hostdash.api.core.temporal import normalize_timestamp

        orders_repo, services_repo, _, _ = repositories
        await demo_service.seed(user, now)

        orders = await orders_repo.get_by_user(user.id)
        assert all(now - timedelta(days=7) <= normalize_timestamp(o.created_at) <= now for o in orders)

        expiries = sorted(normalize_timestamp(s.expiry_date) - now for s in await services_repo.get_by_user(user.id))
        assert expiries == [timedelta(days=25), timedelta(days=30), timedelta(days=340)]

    @pytest.mark.asyncio
    async def test_seeded_dashboard_figures(self, demo_service, repositories, user, now):
        from hostdash.api.adapters import RepositoryDashboardDataAdapter
        from hostdash.api.services.dashboard_service import DashboardService

        await demo_service.seed(user, now)
        service = DashboardService(RepositoryDashboardDataAdapter(*repositories), timeout_seconds=1.0)

        result = await service.compute_dashboard_stats(user, "30d", now)

        assert result.stats.total_orders == 3
        assert result.stats.total_spent == pytest.approx(692.96)
        assert result.stats.success_rate == pytest.approx(100 / 3)
        assert result.stats.active_services == 2
        assert result.stats.expiring_services == 2
        assert result.stats.unread_alerts == 2
        assert result.profile.display_name == "Test Client"

    @pytest.mark.asyncio
    async def test_existing_profile_kept(self, demo_service, repositories, user, now):
        from hostdash.api.repositories.profile_repository import ProfileEntity

        profiles = repositories[3]
        await profiles.create(ProfileEntity(id=user.id, display_name="Existing", email="keep@example.com"))

        summary = await demo_service.seed(user, now)

        assert summary.profile_created is False
        assert (await profiles.get_by_id(user.id)).display_name == "Existing"

    @pytest.mark.asyncio
    async def test_seeding_twice_adds_records(self, demo_service, repositories, user, now):
        await demo_service.seed(user, now)
        second = await demo_service.seed(user, now)

        assert second.profile_created is False
        assert len(await repositories[0].get_by_user(user.id)) == 6
