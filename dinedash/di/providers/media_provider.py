from typing import TYPE_CHECKING
from ...core.config import AssetStorageConfig, get_settings
from ...application.services.image_pipeline import ImagePipeline
from ...infrastructure.external.cloudinary_client import CloudinaryGateway
from ...infrastructure.storage.staging_store import StagingStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MediaProvider:
    """Image ingestion provider - staging store, Cloudinary gateway and the pipeline joining them"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register media components as singletons.
        The asset storage config is built once here and injected into the gateway.
        """
        settings = get_settings()
        
        config = settings.asset_storage_config()
        container.register_singleton(AssetStorageConfig, config)
        
        container.register_singleton(StagingStore, StagingStore(settings.image_staging_dir))
        container.register_singleton(CloudinaryGateway, CloudinaryGateway(config=config))
        
        container.register_singleton(
            ImagePipeline,
            ImagePipeline(
                staging_store=container.get(StagingStore),
                gateway=container.get(CloudinaryGateway),
            )
        )
