# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Product:
    """Pure domain model for Product entity, owned by exactly one firm."""
    id: Optional[str]
    firm_id: str
    product_name: str
    price: str
    category: List[str] = field(default_factory=list)
    bestseller: bool = False
    description: Optional[str] = None
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.firm_id:
            raise ValueError("Owning firm ID is required")
        if not self.product_name or len(self.product_name.strip()) < 1:
            raise ValueError("Product name is required")
        if self.price is None or len(str(self.price).strip()) < 1:
            raise ValueError("Price is required")
