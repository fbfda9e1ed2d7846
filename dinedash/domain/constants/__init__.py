"""Constants for domain model field names and media rules"""

from .vendor_fields import VendorFields
from .firm_fields import FirmFields
from .product_fields import ProductFields
from .media_constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    ALLOWED_IMAGE_FORMATS,
    ASSET_FOLDER,
    TARGET_FORMAT,
    MAX_IMAGE_WIDTH,
    WIDTH_CROP_MODE,
    AUTO_QUALITY,
    AUTO_FETCH_FORMAT,
)

__all__ = [
    "VendorFields",
    "FirmFields",
    "ProductFields",
    "ALLOWED_IMAGE_EXTENSIONS",
    "ALLOWED_IMAGE_FORMATS",
    "ASSET_FOLDER",
    "TARGET_FORMAT",
    "MAX_IMAGE_WIDTH",
    "WIDTH_CROP_MODE",
    "AUTO_QUALITY",
    "AUTO_FETCH_FORMAT",
]
