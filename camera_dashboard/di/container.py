# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import CameraProvider, HttpProvider


class DIContainer(BaseContainer):
    """
    Dependency injection container for one dashboard session.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Settings
    2. HTTP client and camera repository (HttpProvider) - depend on settings
    3. Notification sink and camera data provider (CameraProvider) - depend on the repository
    
    Anything registered on the container before setup() is kept, which is
    how tests swap in a stub repository or transport.
    """
    
    def __init__(self, settings: Optional[Settings] = None, auto_setup: bool = True) -> None:
        super().__init__()
        self.register_singleton(Settings, settings or get_settings())
        if auto_setup:
            self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: settings → http/repository → state
        """
        HttpProvider.register(self)
        CameraProvider.register(self)
