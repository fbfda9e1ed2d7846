# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Firm:
    """
    Pure domain model for Firm (outlet) entity.
    
    vendor_id is set at creation and never changes. image_url only ever holds
    a URL returned by the remote asset service.
    """
    id: Optional[str]
    vendor_id: str
    firm_name: str
    area: Optional[str] = None
    category: List[str] = field(default_factory=list)
    region: List[str] = field(default_factory=list)
    offer: Optional[str] = None
    image_url: Optional[str] = None
    product_ids: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.vendor_id:
            raise ValueError("Owning vendor ID is required")
        if not self.firm_name or len(self.firm_name.strip()) < 1:
            raise ValueError("Firm name is required")
