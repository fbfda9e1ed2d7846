from typing import TYPE_CHECKING
from ...domain.repositories.vendor_repository import VendorRepository
from ...domain.repositories.firm_repository import FirmRepository
from ...domain.repositories.product_repository import ProductRepository
from ...application.services.image_pipeline import ImagePipeline
from ...application.use_cases.firm.create_firm import CreateFirmUseCase
from ...application.use_cases.firm.delete_firm import DeleteFirmUseCase
from ...application.use_cases.product.create_product import CreateProductUseCase
from ...application.use_cases.product.list_products_by_firm import ListProductsByFirmUseCase
from ...application.use_cases.product.delete_product import DeleteProductUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CatalogProvider:
    """Catalog use case provider - firm and product creation, lookup and deletion"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all catalog use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateFirmUseCase,
            lambda: CreateFirmUseCase(
                vendor_repository=container.get(VendorRepository),
                firm_repository=container.get(FirmRepository),
                image_pipeline=container.get(ImagePipeline),
            )
        )
        
        container.register_factory(
            DeleteFirmUseCase,
            lambda: DeleteFirmUseCase(
                vendor_repository=container.get(VendorRepository),
                firm_repository=container.get(FirmRepository),
                product_repository=container.get(ProductRepository),
            )
        )
        
        container.register_factory(
            CreateProductUseCase,
            lambda: CreateProductUseCase(
                firm_repository=container.get(FirmRepository),
                product_repository=container.get(ProductRepository),
                image_pipeline=container.get(ImagePipeline),
            )
        )
        
        container.register_factory(
            ListProductsByFirmUseCase,
            lambda: ListProductsByFirmUseCase(
                firm_repository=container.get(FirmRepository),
                product_repository=container.get(ProductRepository),
            )
        )
        
        container.register_factory(
            DeleteProductUseCase,
            lambda: DeleteProductUseCase(
                firm_repository=container.get(FirmRepository),
                product_repository=container.get(ProductRepository),
            )
        )
