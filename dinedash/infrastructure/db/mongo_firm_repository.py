# Standard library imports
from typing import Optional, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.firm_repository import FirmRepository
from ...domain.models.firm import Firm
from ...domain.constants import FirmFields
from .mongo_connection import get_firm_collection, parse_object_id


class MongoFirmRepository(FirmRepository):
    """MongoDB implementation of FirmRepository"""
    
    def __init__(self, firm_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.firm_collection = firm_collection if firm_collection is not None else get_firm_collection()
    
    async def find_by_id(self, firm_id: str) -> Optional[Firm]:
        """
        Find firm by ID
        
        Args:
            firm_id: The firm ID to find
            
        Returns:
            Firm domain model if found, None otherwise
        """
        object_id = parse_object_id(firm_id)
        if object_id is None:
            return None
        
        try:
            document = await self.firm_collection.find_one({FirmFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding firm by ID: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_firm(document)
    
    async def create(self, firm: Firm) -> Firm:
        """
        Insert a new firm
        
        Args:
            firm: Firm domain model without an ID
            
        Returns:
            Stored Firm domain model with ID set
        """
        try:
            result = await self.firm_collection.insert_one(self._firm_to_dict(firm))
            document = await self.firm_collection.find_one({FirmFields.MONGO_ID: result.inserted_id})
        except Exception as e:
            raise RuntimeError(f"Error creating firm: {str(e)}")
        
        if document is None:
            raise RuntimeError("Firm was created but could not be retrieved")
        return self._document_to_firm(document)
    
    async def delete(self, firm_id: str) -> Optional[Firm]:
        """
        Delete firm by ID
        
        Args:
            firm_id: The firm ID to delete
            
        Returns:
            The deleted Firm, or None if no firm matched
        """
        object_id = parse_object_id(firm_id)
        if object_id is None:
            return None
        
        try:
            document = await self.firm_collection.find_one_and_delete({FirmFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting firm: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_firm(document)
    
    async def add_product(self, firm_id: str, product_id: str) -> bool:
        object_id = parse_object_id(firm_id)
        if object_id is None:
            return False
        
        result = await self.firm_collection.update_one(
            {FirmFields.MONGO_ID: object_id},
            {"$addToSet": {FirmFields.PRODUCT_IDS: product_id}}
        )
        return result.matched_count > 0
    
    async def remove_product(self, firm_id: str, product_id: str) -> bool:
        object_id = parse_object_id(firm_id)
        if object_id is None:
            return False
        
        result = await self.firm_collection.update_one(
            {FirmFields.MONGO_ID: object_id},
            {"$pull": {FirmFields.PRODUCT_IDS: product_id}}
        )
        return result.matched_count > 0
    
    def _document_to_firm(self, document: Dict[str, Any]) -> Firm:
        """
        Convert MongoDB document to Firm domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Firm domain model
        """
        if not document or FirmFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return Firm(
            id=str(document[FirmFields.MONGO_ID]),
            vendor_id=str(document.get(FirmFields.VENDOR_ID, "")),
            firm_name=document.get(FirmFields.FIRM_NAME, ""),
            area=document.get(FirmFields.AREA),
            category=list(document.get(FirmFields.CATEGORY) or []),
            region=list(document.get(FirmFields.REGION) or []),
            offer=document.get(FirmFields.OFFER),
            image_url=document.get(FirmFields.IMAGE_URL),
            product_ids=[str(product_id) for product_id in document.get(FirmFields.PRODUCT_IDS, [])],
        )
    
    def _firm_to_dict(self, firm: Firm) -> Dict[str, Any]:
        return {
            FirmFields.VENDOR_ID: firm.vendor_id,
            FirmFields.FIRM_NAME: firm.firm_name,
            FirmFields.AREA: firm.area,
            FirmFields.CATEGORY: list(firm.category),
            FirmFields.REGION: list(firm.region),
            FirmFields.OFFER: firm.offer,
            FirmFields.IMAGE_URL: firm.image_url,
            FirmFields.PRODUCT_IDS: list(firm.product_ids),
        }
