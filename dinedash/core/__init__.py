from .config import AssetStorageConfig, Settings, get_settings
from .security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)

__all__ = [
    "AssetStorageConfig",
    "Settings",
    "get_settings",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
]
