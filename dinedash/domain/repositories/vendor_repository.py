from abc import ABC, abstractmethod
from typing import Optional
from ..models.vendor import Vendor


class VendorRepository(ABC):
    """Repository interface - defines contract for vendor data access"""
    
    @abstractmethod
    async def find_by_id(self, vendor_id: str) -> Optional[Vendor]:
        """Find vendor by ID"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Vendor]:
        """Find vendor by email address"""
        pass
    
    @abstractmethod
    async def create(self, vendor: Vendor) -> Vendor:
        """Insert a new vendor; raises VendorAlreadyExistsError for a taken email"""
        pass
    
    @abstractmethod
    async def add_firm(self, vendor_id: str, firm_id: str) -> bool:
        """Atomically add a firm reference; False if the vendor no longer exists"""
        pass
    
    @abstractmethod
    async def remove_firm(self, vendor_id: str, firm_id: str) -> bool:
        """Atomically remove a firm reference; False if the vendor no longer exists"""
        pass
