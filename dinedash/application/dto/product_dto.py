from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ProductCreateRequest(BaseModel):
    """DTO for product creation request (descriptive attributes only)"""
    product_name: str
    price: str
    category: List[str] = []
    bestseller: bool = False
    description: Optional[str] = None


class ProductResponse(BaseModel):
    """DTO for product response"""
    id: str
    firm_id: str
    product_name: str
    price: str
    category: List[str] = []
    bestseller: bool = False
    description: Optional[str] = None
    image_url: Optional[str] = None


class FirmProductsResponse(BaseModel):
    """DTO for a firm's display name and its products"""
    model_config = ConfigDict(populate_by_name=True)
    
    firm_display_name: str = Field(alias="firmDisplayName")
    products: List[ProductResponse]


def to_product_response(product) -> ProductResponse:
    """Convert a Product domain model to its response DTO"""
    return ProductResponse(
        id=product.id or "",
        firm_id=product.firm_id,
        product_name=product.product_name,
        price=product.price,
        category=list(product.category),
        bestseller=product.bestseller,
        description=product.description,
        image_url=product.image_url,
    )
