from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.product import Product


class ProductRepository(ABC):
    """Repository interface - defines contract for product data access"""
    
    @abstractmethod
    async def find_by_firm(self, firm_id: str) -> List[Product]:
        """Find all products owned by a firm"""
        pass
    
    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Insert a new product and return it with its ID"""
        pass
    
    @abstractmethod
    async def delete(self, product_id: str) -> Optional[Product]:
        """Delete product by ID, returning the removed product or None if absent"""
        pass
    
    @abstractmethod
    async def delete_by_firm(self, firm_id: str) -> int:
        """Delete all products owned by a firm, returning the number removed"""
        pass
