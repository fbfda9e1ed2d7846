from .vendor import Vendor
from .firm import Firm
from .product import Product

__all__ = ["Vendor", "Firm", "Product"]
