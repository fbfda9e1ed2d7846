# Local application imports
from ....core.security import decode_access_token
from ...dto.vendor_dto import VendorContext


class AuthenticateVendorUseCase:
    """
    Use case for turning a bearer token into an authenticated vendor context.
    
    Only the token is checked here; whether the vendor still exists is decided
    by the catalog operation that receives the context.
    """
    
    def execute(self, token: str) -> VendorContext:
        """
        Decode a vendor access token
        
        Args:
            token: JWT access token
            
        Returns:
            VendorContext for the token's subject
            
        Raises:
            ValueError: If token is invalid or expired
        """
        claims = decode_access_token(token)
        return VendorContext(vendor_id=claims["sub"], email=claims.get("email", ""))
