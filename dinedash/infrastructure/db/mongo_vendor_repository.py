# Standard library imports
from typing import Optional, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.vendor_repository import VendorRepository
from ...domain.models.vendor import Vendor
from ...domain.constants import VendorFields
from ...domain.exceptions import VendorAlreadyExistsError
from .mongo_connection import get_vendor_collection, parse_object_id


class MongoVendorRepository(VendorRepository):
    """MongoDB implementation of VendorRepository"""
    
    def __init__(self, vendor_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.vendor_collection = vendor_collection if vendor_collection is not None else get_vendor_collection()
        self._email_index_ready = False
    
    async def find_by_id(self, vendor_id: str) -> Optional[Vendor]:
        """
        Find vendor by ID
        
        Args:
            vendor_id: Vendor ID to search for
            
        Returns:
            Vendor domain model if found, None otherwise
        """
        object_id = parse_object_id(vendor_id)
        if object_id is None:
            return None
        
        try:
            document = await self.vendor_collection.find_one({VendorFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding vendor by ID: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_vendor(document)
    
    async def find_by_email(self, email: str) -> Optional[Vendor]:
        """
        Find vendor by email address
        
        Args:
            email: Email address to search for
            
        Returns:
            Vendor domain model if found, None otherwise
        """
        if not email:
            return None
        
        try:
            document = await self.vendor_collection.find_one({VendorFields.EMAIL: email})
        except Exception as e:
            raise RuntimeError(f"Error finding vendor by email: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_vendor(document)
    
    async def _ensure_email_index(self) -> None:
        if self._email_index_ready:
            return
        await self.vendor_collection.create_index(VendorFields.EMAIL, unique=True)
        self._email_index_ready = True
    
    async def create(self, vendor: Vendor) -> Vendor:
        """
        Insert a new vendor
        
        Email uniqueness is enforced by a unique index, so of two concurrent
        registrations with the same email only one is stored.
        
        Args:
            vendor: Vendor domain model without an ID
            
        Returns:
            Stored Vendor domain model with ID set
            
        Raises:
            VendorAlreadyExistsError: If the email is already registered
        """
        try:
            await self._ensure_email_index()
            result = await self.vendor_collection.insert_one(self._vendor_to_dict(vendor))
            document = await self.vendor_collection.find_one({VendorFields.MONGO_ID: result.inserted_id})
        except DuplicateKeyError as e:
            raise VendorAlreadyExistsError(vendor.email) from e
        except Exception as e:
            raise RuntimeError(f"Error creating vendor: {str(e)}")
        
        if document is None:
            raise RuntimeError("Vendor was created but could not be retrieved")
        return self._document_to_vendor(document)
    
    async def add_firm(self, vendor_id: str, firm_id: str) -> bool:
        object_id = parse_object_id(vendor_id)
        if object_id is None:
            return False
        
        result = await self.vendor_collection.update_one(
            {VendorFields.MONGO_ID: object_id},
            {"$addToSet": {VendorFields.FIRM_IDS: firm_id}}
        )
        return result.matched_count > 0
    
    async def remove_firm(self, vendor_id: str, firm_id: str) -> bool:
        object_id = parse_object_id(vendor_id)
        if object_id is None:
            return False
        
        result = await self.vendor_collection.update_one(
            {VendorFields.MONGO_ID: object_id},
            {"$pull": {VendorFields.FIRM_IDS: firm_id}}
        )
        return result.matched_count > 0
    
    def _document_to_vendor(self, document: Dict[str, Any]) -> Vendor:
        """
        Convert MongoDB document to Vendor domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Vendor domain model
        """
        if not document or VendorFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return Vendor(
            id=str(document[VendorFields.MONGO_ID]),
            username=document.get(VendorFields.USERNAME, ""),
            email=document.get(VendorFields.EMAIL, ""),
            hashed_password=document.get(VendorFields.HASHED_PASSWORD, ""),
            firm_ids=[str(firm_id) for firm_id in document.get(VendorFields.FIRM_IDS, [])],
        )
    
    def _vendor_to_dict(self, vendor: Vendor) -> Dict[str, Any]:
        return {
            VendorFields.USERNAME: vendor.username,
            VendorFields.EMAIL: vendor.email,
            VendorFields.HASHED_PASSWORD: vendor.hashed_password,
            VendorFields.FIRM_IDS: list(vendor.firm_ids),
        }
