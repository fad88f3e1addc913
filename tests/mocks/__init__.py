"""
Mock Collaborators for Testing

Provides lightweight doubles that don't require external services.
"""
from .mock_data_port import MockDashboardDataPort
from .mock_identity_provider import MockIdentityProvider

__all__ = [
    "MockDashboardDataPort",
    "MockIdentityProvider",
]
