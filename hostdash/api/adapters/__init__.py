"""
Adapters
Implementations of the ports.
"""
from .repository_data_adapter import RepositoryDashboardDataAdapter

__all__ = [
    "RepositoryDashboardDataAdapter",
]
