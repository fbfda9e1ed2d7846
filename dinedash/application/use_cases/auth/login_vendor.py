# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.vendor_repository import VendorRepository
from ....core.security import verify_password, create_access_token
from ...dto.auth_dto import VendorLoginRequest, TokenResponse


class LoginVendorUseCase:
    """Use case for authenticating a vendor and issuing an access token"""
    
    def __init__(self, vendor_repository: VendorRepository) -> None:
        self.vendor_repository = vendor_repository
    
    async def execute(self, request: VendorLoginRequest) -> Optional[TokenResponse]:
        """
        Authenticate vendor and generate access token
        
        Args:
            request: Login request with email and password
            
        Returns:
            TokenResponse if authentication successful, None otherwise
        """
        vendor = await self.vendor_repository.find_by_email(request.email)
        if vendor is None:
            return None
        
        if not verify_password(request.password, vendor.hashed_password):
            return None
        
        return TokenResponse(access_token=create_access_token(vendor.id or "", vendor.email))
