"""
Dependency Injection Container
Centralized container for the repositories and data adapter shared by the
dashboard services.
"""
from typing import Optional, Dict, Any, Callable
import logging

from .config import api_settings

# Repository interfaces
from ..repositories import (
    OrderRepository,
    ServiceRepository,
    AlertRepository,
    ProfileRepository
)

# Port interfaces
from ..ports import DashboardDataPort

# Infrastructure implementations
from ..infrastructure.memory import (
    MemoryOrderRepository,
    MemoryServiceRepository,
    MemoryAlertRepository,
    MemoryProfileRepository
)

from ..adapters import RepositoryDashboardDataAdapter

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency Injection Container.

    Manages the lifecycle of application dependencies and provides
    factory methods for creating them.
    """

    _instance: Optional["Container"] = None

    def __init__(self):
        self._singletons: Dict[str, Any] = {}
        self._factories: Dict[str, Callable] = {}

        self._register_defaults()

    @classmethod
    def get_instance(cls) -> "Container":
        """Get singleton container instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset container (for testing)"""
        cls._instance = None

    def _register_defaults(self) -> None:
        """Register default factory methods"""
        # Repositories
        self.register_factory("order_repository", self._create_order_repository)
        self.register_factory("service_repository", self._create_service_repository)
        self.register_factory("alert_repository", self._create_alert_repository)
        self.register_factory("profile_repository", self._create_profile_repository)

        # Ports/Adapters
        self.register_factory("dashboard_data", self._create_dashboard_data_adapter)

    def register_factory(self, name: str, factory: Callable) -> None:
        """Register a factory method"""
        self._factories[name] = factory

    def register_singleton(self, name: str, instance: Any) -> None:
        """Register a singleton instance"""
        self._singletons[name] = instance

    def get(self, name: str) -> Any:
        """Get a dependency by name"""
        if name in self._singletons:
            return self._singletons[name]

        if name in self._factories:
            instance = self._factories[name]()
            self._singletons[name] = instance
            return instance

        raise KeyError(f"Dependency '{name}' not registered")

    # ==================== Repository Factories ====================

    def _create_order_repository(self) -> OrderRepository:
        if api_settings.APP_ENV == "production":
            logger.warning("Persistent order repository not configured, using memory")
        return MemoryOrderRepository()

    def _create_service_repository(self) -> ServiceRepository:
        return MemoryServiceRepository()

    def _create_alert_repository(self) -> AlertRepository:
        return MemoryAlertRepository()

    def _create_profile_repository(self) -> ProfileRepository:
        return MemoryProfileRepository()

    # ==================== Adapter Factories ====================

    def _create_dashboard_data_adapter(self) -> DashboardDataPort:
        """Dashboard reads go through the same repositories the writers use"""
        return RepositoryDashboardDataAdapter(
            orders=self.order_repository,
            services=self.service_repository,
            alerts=self.alert_repository,
            profiles=self.profile_repository
        )

    # ==================== Convenience Properties ====================

    @property
    def order_repository(self) -> OrderRepository:
        return self.get("order_repository")

    @property
    def service_repository(self) -> ServiceRepository:
        return self.get("service_repository")

    @property
    def alert_repository(self) -> AlertRepository:
        return self.get("alert_repository")

    @property
    def profile_repository(self) -> ProfileRepository:
        return self.get("profile_repository")

    @property
    def dashboard_data(self) -> DashboardDataPort:
        return self.get("dashboard_data")


# Global container instance
def get_container() -> Container:
    """Get the global container instance"""
    return Container.get_instance()
