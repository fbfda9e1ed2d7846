# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.firm_repository import FirmRepository
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product import Product
from ....domain.exceptions import FirmNotFoundError, ParentLinkError, ValidationError
from ...dto.image_dto import ImageUpload
from ...dto.product_dto import ProductCreateRequest, ProductResponse, to_product_response
from ...services.image_pipeline import ImagePipeline

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Use case for creating a product and linking it to its owning firm"""
    
    def __init__(
        self,
        firm_repository: FirmRepository,
        product_repository: ProductRepository,
        image_pipeline: ImagePipeline,
    ) -> None:
        self.firm_repository = firm_repository
        self.product_repository = product_repository
        self.image_pipeline = image_pipeline
    
    async def execute(
        self,
        firm_id: str,
        request: ProductCreateRequest,
        image: Optional[ImageUpload] = None,
    ) -> ProductResponse:
        """
        Create a new product under a firm
        
        Same two-write sequence as firm creation: product record first, then
        the firm's product reference. A failed second write leaves the product
        persisted and raises ParentLinkError.
        
        Args:
            firm_id: ID of the owning firm
            request: Product attributes
            image: Optional inbound image
            
        Returns:
            ProductResponse for the created product
            
        Raises:
            FirmNotFoundError: If the firm does not exist
            ValidationError: If the product attributes are invalid
            ImageValidationError: If the image type is not allowed
            RemoteUploadError: If the image upload fails
            ParentLinkError: If the product was saved but could not be linked
        """
        firm = await self.firm_repository.find_by_id(firm_id)
        if firm is None:
            raise FirmNotFoundError(firm_id)
        
        try:
            product = Product(
                id=None,
                firm_id=firm.id or firm_id,
                product_name=request.product_name,
                price=request.price,
                category=list(request.category),
                bestseller=request.bestseller,
                description=request.description,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e
        
        product.image_url = await self.image_pipeline.ingest(image)
        
        saved_product = await self.product_repository.create(product)
        logger.info(f"Created product {saved_product.id} ({saved_product.product_name!r}) for firm {product.firm_id}")
        
        try:
            linked = await self.firm_repository.add_product(product.firm_id, saved_product.id or "")
        except Exception as e:
            logger.error(
                f"Product {saved_product.id} saved but firm {product.firm_id} link failed: {e}",
                exc_info=True
            )
            raise ParentLinkError("firm", product.firm_id, "product", saved_product.id or "", e) from e
        
        if not linked:
            logger.error(f"Product {saved_product.id} saved but firm {product.firm_id} no longer exists")
            raise ParentLinkError(
                "firm", product.firm_id, "product", saved_product.id or "",
                FirmNotFoundError(product.firm_id),
            )
        
        return to_product_response(saved_product)
