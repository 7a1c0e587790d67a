"""Core configuration and factory components."""

from app.core.config import Settings, get_settings
from app.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
]
