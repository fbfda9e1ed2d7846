# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import VendorRegistrationRequest, VendorLoginRequest, TokenResponse
from ...application.dto.vendor_dto import VendorContext, VendorResponse
from ...application.use_cases.auth.register_vendor import RegisterVendorUseCase
from ...application.use_cases.auth.login_vendor import LoginVendorUseCase
from ...application.use_cases.auth.get_current_vendor import GetCurrentVendorUseCase
from ...di.container import get_container
from ...domain.exceptions import NotFoundError, ValidationError
from .dependencies import get_vendor_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["vendors"])


@router.post("/register", response_model=VendorResponse, status_code=status.HTTP_201_CREATED)
async def register_vendor(request: VendorRegistrationRequest) -> VendorResponse:
    """
    Register a new vendor
    
    Args:
        request: Vendor registration request
        
    Returns:
        VendorResponse with created vendor information
    """
    container = get_container()
    register_use_case = container.get(RegisterVendorUseCase)
    
    try:
        return await register_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    except Exception:
        logger.exception("Failed to register vendor")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.post("/login", response_model=TokenResponse)
async def login_vendor(request: VendorLoginRequest) -> TokenResponse:
    """
    Authenticate vendor and get access token
    
    Args:
        request: Vendor login request
        
    Returns:
        TokenResponse with access token
    """
    container = get_container()
    login_use_case = container.get(LoginVendorUseCase)
    
    token_response = await login_use_case.execute(request)
    if token_response is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    return token_response


@router.get("/me", response_model=VendorResponse)
async def get_me(vendor: VendorContext = Depends(get_vendor_context)) -> VendorResponse:
    """Get the authenticated vendor's profile, including its firm references"""
    container = get_container()
    get_vendor_use_case = container.get(GetCurrentVendorUseCase)
    
    try:
        return await get_vendor_use_case.execute(vendor)
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.user_message
        )
