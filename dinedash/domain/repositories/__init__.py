from .vendor_repository import VendorRepository
from .firm_repository import FirmRepository
from .product_repository import ProductRepository

__all__ = ["VendorRepository", "FirmRepository", "ProductRepository"]
