from .auth_dto import VendorRegistrationRequest, VendorLoginRequest, TokenResponse
from .vendor_dto import VendorContext, VendorResponse
from .image_dto import ImageUpload
from .firm_dto import FirmCreateRequest, FirmCreatedResponse
from .product_dto import ProductCreateRequest, ProductResponse, FirmProductsResponse

__all__ = [
    "VendorRegistrationRequest",
    "VendorLoginRequest",
    "TokenResponse",
    "VendorContext",
    "VendorResponse",
    "ImageUpload",
    "FirmCreateRequest",
    "FirmCreatedResponse",
    "ProductCreateRequest",
    "ProductResponse",
    "FirmProductsResponse",
]
