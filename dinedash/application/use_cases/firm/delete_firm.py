# Standard library imports
import logging

# Local application imports
from ....domain.repositories.vendor_repository import VendorRepository
from ....domain.repositories.firm_repository import FirmRepository
from ....domain.repositories.product_repository import ProductRepository
from ....domain.exceptions import FirmNotFoundError, ParentLinkError

logger = logging.getLogger(__name__)


class DeleteFirmUseCase:
    """
    Use case for deleting a firm.
    
    Removes the firm record, the products it owns, and the firm reference on
    the owning vendor. Remote image assets are left in place.
    """
    
    def __init__(
        self,
        vendor_repository: VendorRepository,
        firm_repository: FirmRepository,
        product_repository: ProductRepository,
    ) -> None:
        self.vendor_repository = vendor_repository
        self.firm_repository = firm_repository
        self.product_repository = product_repository
    
    async def execute(self, firm_id: str) -> None:
        """
        Delete a firm by ID
        
        Args:
            firm_id: ID of the firm to delete
            
        Raises:
            FirmNotFoundError: If no firm has this ID
            ParentLinkError: If the firm was deleted but the vendor reference was not removed
        """
        deleted_firm = await self.firm_repository.delete(firm_id)
        if deleted_firm is None:
            raise FirmNotFoundError(firm_id)
        
        removed_products = await self.product_repository.delete_by_firm(firm_id)
        logger.info(f"Deleted firm {firm_id} and {removed_products} product(s)")
        
        try:
            unlinked = await self.vendor_repository.remove_firm(deleted_firm.vendor_id, firm_id)
        except Exception as e:
            logger.error(
                f"Firm {firm_id} deleted but vendor {deleted_firm.vendor_id} unlink failed: {e}",
                exc_info=True
            )
            raise ParentLinkError("vendor", deleted_firm.vendor_id, "firm", firm_id, e) from e
        
        if not unlinked:
            logger.warning(f"Owning vendor {deleted_firm.vendor_id} of deleted firm {firm_id} not found")
