"""
Ports Layer
Abstract interfaces for external collaborators.
"""
from .dashboard_data_port import DashboardDataPort

__all__ = [
    "DashboardDataPort",
]
