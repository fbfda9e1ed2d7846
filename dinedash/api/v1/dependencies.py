# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, UploadFile, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.dto.image_dto import ImageUpload
from ...application.dto.vendor_dto import VendorContext
from ...application.use_cases.auth.authenticate_vendor import AuthenticateVendorUseCase
from ...di.container import get_container


security_scheme = HTTPBearer(auto_error=True)


async def get_vendor_context(
    credentials: HTTPAuthorizationCredentials = Depends(security_scheme),
) -> VendorContext:
    """
    FastAPI dependency resolving the calling vendor from a bearer token
    
    Args:
        credentials: HTTP Bearer token credentials
        
    Returns:
        VendorContext passed on to catalog use cases
        
    Raises:
        HTTPException: If the token is invalid or expired
    """
    container = get_container()
    authenticate_use_case = container.get(AuthenticateVendorUseCase)
    
    try:
        return authenticate_use_case.execute(credentials.credentials)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exception)
        )


def to_image_upload(image: Optional[UploadFile]) -> Optional[ImageUpload]:
    """Wrap an optional multipart file; a part without a file name counts as no image."""
    if image is None or not image.filename:
        return None
    return ImageUpload(filename=image.filename, read=image.read)
