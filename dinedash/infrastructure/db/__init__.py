from .mongo_connection import (
    get_database,
    close_database,
    get_vendor_collection,
    get_firm_collection,
    get_product_collection,
)
from .mongo_vendor_repository import MongoVendorRepository
from .mongo_firm_repository import MongoFirmRepository
from .mongo_product_repository import MongoProductRepository

__all__ = [
    "get_database",
    "close_database",
    "get_vendor_collection",
    "get_firm_collection",
    "get_product_collection",
    "MongoVendorRepository",
    "MongoFirmRepository",
    "MongoProductRepository",
]
