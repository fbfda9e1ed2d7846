from .create_product import CreateProductUseCase
from .list_products_by_firm import ListProductsByFirmUseCase
from .delete_product import DeleteProductUseCase

__all__ = [
    "CreateProductUseCase",
    "ListProductsByFirmUseCase",
    "DeleteProductUseCase",
]
