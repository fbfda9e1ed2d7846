from abc import ABC, abstractmethod
from typing import Optional
from ..models.firm import Firm


class FirmRepository(ABC):
    """Repository interface - defines contract for firm data access"""
    
    @abstractmethod
    async def find_by_id(self, firm_id: str) -> Optional[Firm]:
        """Find firm by ID"""
        pass
    
    @abstractmethod
    async def create(self, firm: Firm) -> Firm:
        """Insert a new firm and return it with its ID"""
        pass
    
    @abstractmethod
    async def delete(self, firm_id: str) -> Optional[Firm]:
        """Delete firm by ID, returning the removed firm or None if absent"""
        pass
    
    @abstractmethod
    async def add_product(self, firm_id: str, product_id: str) -> bool:
        """Atomically add a product reference; False if the firm no longer exists"""
        pass
    
    @abstractmethod
    async def remove_product(self, firm_id: str, product_id: str) -> bool:
        """Atomically remove a product reference; False if the firm no longer exists"""
        pass
