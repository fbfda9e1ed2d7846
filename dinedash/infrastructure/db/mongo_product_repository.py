# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.product_repository import ProductRepository
from ...domain.models.product import Product
from ...domain.constants import ProductFields
from .mongo_connection import get_product_collection, parse_object_id


class MongoProductRepository(ProductRepository):
    """MongoDB implementation of ProductRepository"""
    
    def __init__(self, product_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.product_collection = product_collection if product_collection is not None else get_product_collection()
    
    async def find_by_firm(self, firm_id: str) -> List[Product]:
        """
        Find all products owned by a firm
        
        Args:
            firm_id: The owning firm ID
            
        Returns:
            List of Product domain models
        """
        if not firm_id:
            return []
        
        try:
            cursor = self.product_collection.find({ProductFields.FIRM_ID: firm_id})
            products = []
            async for document in cursor:
                products.append(self._document_to_product(document))
            return products
        except Exception as e:
            raise RuntimeError(f"Error listing products for firm: {str(e)}")
    
    async def create(self, product: Product) -> Product:
        """
        Insert a new product
        
        Args:
            product: Product domain model without an ID
            
        Returns:
            Stored Product domain model with ID set
        """
        try:
            result = await self.product_collection.insert_one(self._product_to_dict(product))
            document = await self.product_collection.find_one({ProductFields.MONGO_ID: result.inserted_id})
        except Exception as e:
            raise RuntimeError(f"Error creating product: {str(e)}")
        
        if document is None:
            raise RuntimeError("Product was created but could not be retrieved")
        return self._document_to_product(document)
    
    async def delete(self, product_id: str) -> Optional[Product]:
        object_id = parse_object_id(product_id)
        if object_id is None:
            return None
        
        try:
            document = await self.product_collection.find_one_and_delete({ProductFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting product: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_product(document)
    
    async def delete_by_firm(self, firm_id: str) -> int:
        if not firm_id:
            return 0
        
        try:
            result = await self.product_collection.delete_many({ProductFields.FIRM_ID: firm_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting products for firm: {str(e)}")
        return result.deleted_count
    
    def _document_to_product(self, document: Dict[str, Any]) -> Product:
        if not document or ProductFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return Product(
            id=str(document[ProductFields.MONGO_ID]),
            firm_id=str(document.get(ProductFields.FIRM_ID, "")),
            product_name=document.get(ProductFields.PRODUCT_NAME, ""),
            price=str(document.get(ProductFields.PRICE, "")),
            category=list(document.get(ProductFields.CATEGORY) or []),
            bestseller=bool(document.get(ProductFields.BESTSELLER, False)),
            description=document.get(ProductFields.DESCRIPTION),
            image_url=document.get(ProductFields.IMAGE_URL),
        )
    
    def _product_to_dict(self, product: Product) -> Dict[str, Any]:
        return {
            ProductFields.FIRM_ID: product.firm_id,
            ProductFields.PRODUCT_NAME: product.product_name,
            ProductFields.PRICE: product.price,
            ProductFields.CATEGORY: list(product.category),
            ProductFields.BESTSELLER: product.bestseller,
            ProductFields.DESCRIPTION: product.description,
            ProductFields.IMAGE_URL: product.image_url,
        }
