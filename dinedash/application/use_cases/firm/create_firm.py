# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.vendor_repository import VendorRepository
from ....domain.repositories.firm_repository import FirmRepository
from ....domain.models.firm import Firm
from ....domain.exceptions import ParentLinkError, ValidationError, VendorNotFoundError
from ...dto.firm_dto import FirmCreateRequest, FirmCreatedResponse
from ...dto.image_dto import ImageUpload
from ...dto.vendor_dto import VendorContext
from ...services.image_pipeline import ImagePipeline

logger = logging.getLogger(__name__)


class CreateFirmUseCase:
    """Use case for creating a firm and linking it to its owning vendor"""
    
    def __init__(
        self,
        vendor_repository: VendorRepository,
        firm_repository: FirmRepository,
        image_pipeline: ImagePipeline,
    ) -> None:
        self.vendor_repository = vendor_repository
        self.firm_repository = firm_repository
        self.image_pipeline = image_pipeline
    
    async def execute(
        self,
        context: VendorContext,
        request: FirmCreateRequest,
        image: Optional[ImageUpload] = None,
    ) -> FirmCreatedResponse:
        """
        Create a new firm for the authenticated vendor
        
        The firm record and the vendor's firm reference are two separate
        writes. If the second one fails the firm stays persisted without a
        vendor back-reference and ParentLinkError is raised; nothing is
        rolled back.
        
        Args:
            context: Authenticated vendor identity
            request: Firm attributes
            image: Optional inbound image
            
        Returns:
            FirmCreatedResponse with the new firm ID
            
        Raises:
            VendorNotFoundError: If the vendor does not exist
            ValidationError: If the firm attributes are invalid
            ImageValidationError: If the image type is not allowed
            RemoteUploadError: If the image upload fails
            ParentLinkError: If the firm was saved but could not be linked
        """
        vendor = await self.vendor_repository.find_by_id(context.vendor_id)
        if vendor is None:
            raise VendorNotFoundError(context.vendor_id)
        
        # Build the record first so an invalid payload never reaches the image upload
        try:
            firm = Firm(
                id=None,
                vendor_id=vendor.id or context.vendor_id,
                firm_name=request.firm_name,
                area=request.area,
                category=list(request.category),
                region=list(request.region),
                offer=request.offer,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e
        
        firm.image_url = await self.image_pipeline.ingest(image)
        
        saved_firm = await self.firm_repository.create(firm)
        logger.info(f"Created firm {saved_firm.id} ({saved_firm.firm_name!r}) for vendor {firm.vendor_id}")
        
        try:
            linked = await self.vendor_repository.add_firm(firm.vendor_id, saved_firm.id or "")
        except Exception as e:
            logger.error(
                f"Firm {saved_firm.id} saved but vendor {firm.vendor_id} link failed: {e}",
                exc_info=True
            )
            raise ParentLinkError("vendor", firm.vendor_id, "firm", saved_firm.id or "", e) from e
        
        if not linked:
            logger.error(f"Firm {saved_firm.id} saved but vendor {firm.vendor_id} no longer exists")
            raise ParentLinkError(
                "vendor", firm.vendor_id, "firm", saved_firm.id or "",
                VendorNotFoundError(firm.vendor_id),
            )
        
        return FirmCreatedResponse(
            message="Firm added successfully",
            firm_id=saved_firm.id or "",
        )
