from .vendor_controller import router as vendor_router
from .firm_controller import router as firm_router
from .product_controller import router as product_router


__all__ = ["vendor_router", "firm_router", "product_router"]
