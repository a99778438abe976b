from .config import Settings, get_settings, reset_settings
from .security import hash_password
from .logging import configure_logging, log_with_fields

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "hash_password",
    "configure_logging",
    "log_with_fields",
]
