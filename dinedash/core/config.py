# Standard library imports
import os
from dataclasses import dataclass
from typing import Final, List, Optional

# Local application imports
from ..domain.constants.media_constants import ASSET_FOLDER


@dataclass(frozen=True)
class AssetStorageConfig:
    """
    Credentials and location of the remote asset service (Cloudinary).

    Built once at start-up and injected into the transcoding gateway.
    """
    cloud_name: str
    api_key: str
    api_secret: str
    api_base_url: str = "https://api.cloudinary.com"
    folder: str = ASSET_FOLDER

    @property
    def upload_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/v1_1/{self.cloud_name}/image/upload"


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "dinedash")
        
        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )
        
        # Cloudinary Configuration
        self.cloud_name: Final[str] = os.getenv("CLOUD_NAME", "")
        self.cloud_api_key: Final[str] = os.getenv("CLOUD_API_KEY", "")
        self.cloud_api_secret: Final[str] = os.getenv("CLOUD_API_SECRET", "")
        self.cloudinary_api_base: Final[str] = os.getenv(
            "CLOUDINARY_API_BASE",
            "https://api.cloudinary.com"
        )
        
        # Whole-request timeout for remote image uploads
        self.upload_timeout_seconds: Final[float] = float(
            os.getenv("UPLOAD_TIMEOUT_SECONDS", "120")
        )
        
        # Local staging directory for inbound images (created on first upload)
        self.image_staging_dir: Final[str] = os.getenv("IMAGE_STAGING_DIR", "uploads")
        
        # Server Configuration
        self.port: Final[int] = int(os.getenv("PORT", "4000"))
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]
    
    def asset_storage_config(self) -> AssetStorageConfig:
        """
        Build the immutable remote asset service configuration
        
        Returns:
            AssetStorageConfig with Cloudinary credentials
        """
        return AssetStorageConfig(
            cloud_name=self.cloud_name,
            api_key=self.cloud_api_key,
            api_secret=self.cloud_api_secret,
            api_base_url=self.cloudinary_api_base,
        )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
