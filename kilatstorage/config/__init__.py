from .settings import ACL, Credentials, StorageSettings, Settings, get_settings
from .logger import configure_logging, get_logger

__all__ = [
    "ACL",
    "Credentials",
    "StorageSettings",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
