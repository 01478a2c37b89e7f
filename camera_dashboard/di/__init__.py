from .base_container import BaseContainer
from .container import DIContainer
from .session import DashboardSession

__all__ = [
    "BaseContainer",
    "DIContainer",
    "DashboardSession",
]
