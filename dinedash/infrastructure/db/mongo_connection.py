# Standard library imports
from typing import Any, Optional

# External package imports
from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the MongoDB client (call on application shutdown)."""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None


def get_vendor_collection() -> AsyncIOMotorCollection:
    """
    Get vendors collection from MongoDB
    
    Returns:
        MongoDB collection for vendors
    """
    return get_database()["vendors"]


def get_firm_collection() -> AsyncIOMotorCollection:
    """
    Get firms collection from MongoDB
    
    Returns:
        MongoDB collection for firms
    """
    return get_database()["firms"]


def get_product_collection() -> AsyncIOMotorCollection:
    """
    Get products collection from MongoDB
    
    Returns:
        MongoDB collection for products
    """
    return get_database()["products"]


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Convert an ID string to ObjectId, or None if it is not a valid ObjectId."""
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None
