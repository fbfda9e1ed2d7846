from typing import TYPE_CHECKING
from ...domain.repositories.vendor_repository import VendorRepository
from ...domain.repositories.firm_repository import FirmRepository
from ...domain.repositories.product_repository import ProductRepository
from ...infrastructure.db.mongo_vendor_repository import MongoVendorRepository
from ...infrastructure.db.mongo_firm_repository import MongoFirmRepository
from ...infrastructure.db.mongo_product_repository import MongoProductRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """Register the Mongo catalog repositories against their domain interfaces"""
        container.register_singleton(
            VendorRepository,
            MongoVendorRepository(vendor_collection=container.get("vendor_collection"))
        )
        
        container.register_singleton(
            FirmRepository,
            MongoFirmRepository(firm_collection=container.get("firm_collection"))
        )
        
        container.register_singleton(
            ProductRepository,
            MongoProductRepository(product_collection=container.get("product_collection"))
        )
