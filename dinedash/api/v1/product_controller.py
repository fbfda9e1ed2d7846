# Standard library imports
import logging
from typing import List, Optional

# External package imports
from fastapi import APIRouter, File, Form, HTTPException, Response, UploadFile, status

# Local application imports
from ...application.dto.product_dto import (
    FirmProductsResponse,
    ProductCreateRequest,
    ProductResponse,
)
from ...application.use_cases.product.create_product import CreateProductUseCase
from ...application.use_cases.product.list_products_by_firm import ListProductsByFirmUseCase
from ...application.use_cases.product.delete_product import DeleteProductUseCase
from ...di.container import get_container
from ...domain.exceptions import NotFoundError, ValidationError
from .dependencies import to_image_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.post("/{firm_id}", response_model=ProductResponse)
async def add_product(
    firm_id: str,
    product_name: str = Form(..., alias="productName"),
    price: str = Form(...),
    category: List[str] = Form([]),
    bestseller: bool = Form(False),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
) -> ProductResponse:
    """
    Create a product under a firm, with an optional image
    
    Args:
        firm_id: ID of the owning firm
        
    Returns:
        The created product record
    """
    container = get_container()
    create_product_use_case = container.get(CreateProductUseCase)
    
    try:
        request = ProductCreateRequest(
            product_name=product_name,
            price=price,
            category=category,
            bestseller=bestseller,
            description=description,
        )
        return await create_product_use_case.execute(
            firm_id=firm_id,
            request=request,
            image=to_image_upload(image),
        )
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.user_message
        )
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    except Exception:
        logger.exception(f"Failed to create product for firm {firm_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.get("/{firm_id}", response_model=FirmProductsResponse)
async def get_products_by_firm(firm_id: str) -> FirmProductsResponse:
    """List a firm's products along with the firm's name"""
    container = get_container()
    list_products_use_case = container.get(ListProductsByFirmUseCase)
    
    try:
        return await list_products_use_case.execute(firm_id)
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.user_message
        )
    except Exception:
        logger.exception(f"Failed to list products for firm {firm_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_product(product_id: str) -> Response:
    """Delete a product and remove it from its firm's product list"""
    container = get_container()
    delete_product_use_case = container.get(DeleteProductUseCase)
    
    try:
        await delete_product_use_case.execute(product_id)
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.user_message
        )
    except Exception:
        logger.exception(f"Failed to delete product {product_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
