"""
Pytest Configuration and Shared Fixtures

Provides common fixtures for backend testing without
external dependencies (identity provider, document store).
"""
import os
import sys
import pytest
from typing import Generator
from datetime import datetime, timezone

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app modules
os.environ["APP_ENV"] = "testing"
os.environ["APP_MODE"] = "develop"
os.environ["DEBUG"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-minimum-32-characters-for-testing"
os.environ["JWT_ALGORITHM"] = "HS256"
os.environ["DASHBOARD_FETCH_TIMEOUT_SECONDS"] = "2.0"


# Fixed clock for the aggregation engine
FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def user():
    """Caller identity as the identity provider hands it over"""
    from hostdash.api.models.identity import CurrentUser
    return CurrentUser(id="user_001", email="client@example.com", display_name="Test Client")


# ==================== Record Factories ====================

@pytest.fixture
def make_order():
    from hostdash.api.repositories.order_repository import OrderEntity, OrderStatus

    def _make(total_amount=10.0, status=OrderStatus.COMPLETED, created_at=FIXED_NOW, user_id="user_001", **kwargs):
        return OrderEntity(
            id=kwargs.pop("id", ""),
            user_id=user_id,
            total_amount=total_amount,
            status=status,
            created_at=created_at,
            **kwargs
        )
    return _make


@pytest.fixture
def make_service():
    from hostdash.api.repositories.service_repository import ServiceEntity, ServiceStatus

    def _make(status=ServiceStatus.ACTIVE, expiry_date=None, user_id="user_001", **kwargs):
        return ServiceEntity(
            id=kwargs.pop("id", ""),
            user_id=user_id,
            name=kwargs.pop("name", "VPS"),
            status=status,
            expiry_date=expiry_date,
            **kwargs
        )
    return _make


@pytest.fixture
def make_alert():
    from hostdash.api.repositories.alert_repository import AlertEntity

    def _make(read=False, user_id="user_001", **kwargs):
        return AlertEntity(
            id=kwargs.pop("id", ""),
            user_id=user_id,
            title=kwargs.pop("title", "Notice"),
            message=kwargs.pop("message", "Something happened"),
            read=read,
            **kwargs
        )
    return _make


# ==================== Mock Collaborator Fixtures ====================

@pytest.fixture
def mock_data_port():
    """Provide an empty mock data collaborator"""
    from tests.mocks import MockDashboardDataPort
    port = MockDashboardDataPort()
    yield port
    port.reset()


@pytest.fixture
def identity_provider():
    from tests.mocks import MockIdentityProvider
    return MockIdentityProvider()


# ==================== FastAPI Test Client ====================

@pytest.fixture
def test_app():
    """FastAPI application backed by fresh in-memory repositories"""
    from hostdash.api.main import app

    app.state.testing = True
    return app


@pytest.fixture
def client(test_app) -> Generator:
    """Provide FastAPI test client"""
    from fastapi.testclient import TestClient

    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def authenticated_client(client, identity_provider) -> Generator:
    """Provide test client carrying a valid bearer token for user_001"""
    client.headers.update(identity_provider.auth_headers())
    yield client


# ==================== Cleanup Fixtures ====================

@pytest.fixture(autouse=True)
def reset_singletons():
    """Fresh container and services for every test"""
    yield
    from hostdash.api.core.container import Container
    from hostdash.api.services.dashboard_service import reset_dashboard_service
    from hostdash.api.services.alert_service import reset_alert_service
    from hostdash.api.services.demo_data_service import reset_demo_data_service

    Container.reset()
    reset_dashboard_service()
    reset_alert_service()
    reset_demo_data_service()


# ==================== Markers ====================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "api: API endpoint tests")
