# Local application imports
from ....domain.repositories.vendor_repository import VendorRepository
from ....domain.models.vendor import Vendor
from ....domain.exceptions import ValidationError, VendorAlreadyExistsError
from ....core.security import hash_password
from ...dto.auth_dto import VendorRegistrationRequest
from ...dto.vendor_dto import VendorResponse


class RegisterVendorUseCase:
    """Use case for registering a new vendor account"""
    
    def __init__(self, vendor_repository: VendorRepository) -> None:
        self.vendor_repository = vendor_repository
    
    async def execute(self, request: VendorRegistrationRequest) -> VendorResponse:
        """
        Register a new vendor
        
        The email lookup gives the common case a clear error; the repository
        still rejects a duplicate that slips in between lookup and insert.
        
        Args:
            request: Registration request with vendor details
            
        Returns:
            VendorResponse with created vendor information
            
        Raises:
            VendorAlreadyExistsError: If a vendor with this email already exists
            ValidationError: If the vendor attributes are invalid
        """
        existing_vendor = await self.vendor_repository.find_by_email(request.email)
        if existing_vendor is not None:
            raise VendorAlreadyExistsError(request.email)
        
        try:
            new_vendor = Vendor(
                id=None,  # Will be set by repository
                username=request.username,
                email=request.email,
                hashed_password=hash_password(request.password),
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e
        
        saved_vendor = await self.vendor_repository.create(new_vendor)
        
        return VendorResponse(
            id=saved_vendor.id or "",
            username=saved_vendor.username,
            email=saved_vendor.email,
            firm_ids=saved_vendor.firm_ids,
        )
