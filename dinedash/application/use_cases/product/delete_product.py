# Standard library imports
import logging

# Local application imports
from ....domain.repositories.firm_repository import FirmRepository
from ....domain.repositories.product_repository import ProductRepository
from ....domain.exceptions import ParentLinkError, ProductNotFoundError

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Use case for deleting a product and removing it from its firm's product list"""
    
    def __init__(self, firm_repository: FirmRepository, product_repository: ProductRepository) -> None:
        self.firm_repository = firm_repository
        self.product_repository = product_repository
    
    async def execute(self, product_id: str) -> None:
        """
        Delete a product by ID
        
        Args:
            product_id: ID of the product to delete
            
        Raises:
            ProductNotFoundError: If no product has this ID
            ParentLinkError: If the product was deleted but the firm reference was not removed
        """
        deleted_product = await self.product_repository.delete(product_id)
        if deleted_product is None:
            raise ProductNotFoundError(product_id)
        logger.info(f"Deleted product {product_id}")
        
        try:
            unlinked = await self.firm_repository.remove_product(deleted_product.firm_id, product_id)
        except Exception as e:
            logger.error(
                f"Product {product_id} deleted but firm {deleted_product.firm_id} unlink failed: {e}",
                exc_info=True
            )
            raise ParentLinkError("firm", deleted_product.firm_id, "product", product_id, e) from e
        
        if not unlinked:
            logger.warning(f"Owning firm {deleted_product.firm_id} of deleted product {product_id} not found")
