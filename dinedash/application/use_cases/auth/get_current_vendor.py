# Local application imports
from ....domain.repositories.vendor_repository import VendorRepository
from ....domain.exceptions import VendorNotFoundError
from ...dto.vendor_dto import VendorContext, VendorResponse


class GetCurrentVendorUseCase:
    """Use case for loading the authenticated vendor's profile"""
    
    def __init__(self, vendor_repository: VendorRepository) -> None:
        self.vendor_repository = vendor_repository
    
    async def execute(self, context: VendorContext) -> VendorResponse:
        vendor = await self.vendor_repository.find_by_id(context.vendor_id)
        if vendor is None:
            raise VendorNotFoundError(context.vendor_id)
        
        return VendorResponse(
            id=vendor.id or "",
            username=vendor.username,
            email=vendor.email,
            firm_ids=vendor.firm_ids,
        )
