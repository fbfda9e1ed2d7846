# Standard library imports
from typing import Optional, TYPE_CHECKING

# Local application imports
from ..dto.image_dto import ImageUpload

if TYPE_CHECKING:
    from ...infrastructure.storage.staging_store import StagingStore
    from ...infrastructure.external.cloudinary_client import CloudinaryGateway


class ImagePipeline:
    """
    Two-stage image ingestion: local staging, then remote transcoding.
    
    Produces the permanent image URL for a catalog entity. Nothing is written
    to the catalog here, so a failure at either stage leaves the graph untouched.
    """
    
    def __init__(self, staging_store: "StagingStore", gateway: "CloudinaryGateway") -> None:
        self.staging_store = staging_store
        self.gateway = gateway
    
    async def ingest(self, image: Optional[ImageUpload]) -> Optional[str]:
        """
        Stage and transcode an inbound image
        
        Args:
            image: Inbound image, or None when the request carried no file
            
        Returns:
            Durable image URL, or None if no image was supplied
            
        Raises:
            ImageValidationError: If the file type is not allowed
            RemoteUploadError: If the remote upload fails
        """
        if image is None:
            return None
        
        staged = await self.staging_store.stage(image.filename, image.read)
        # The gateway discards the staged file on every exit path
        return await self.gateway.upload(staged)
