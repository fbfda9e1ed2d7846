# Standard library imports
import logging
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status

# Local application imports
from ...application.dto.firm_dto import FirmCreateRequest, FirmCreatedResponse
from ...application.dto.vendor_dto import VendorContext
from ...application.use_cases.firm.create_firm import CreateFirmUseCase
from ...application.use_cases.firm.delete_firm import DeleteFirmUseCase
from ...di.container import get_container
from ...domain.exceptions import NotFoundError, ValidationError
from .dependencies import get_vendor_context, to_image_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["firms"])


@router.post("", response_model=FirmCreatedResponse)
async def add_firm(
    firm_name: str = Form(..., alias="firmName"),
    area: Optional[str] = Form(None),
    category: List[str] = Form([]),
    region: List[str] = Form([]),
    offer: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    vendor: VendorContext = Depends(get_vendor_context),
) -> FirmCreatedResponse:
    """
    Create a firm for the authenticated vendor, with an optional image
    
    The image is staged locally, transcoded on Cloudinary and only its
    permanent URL is stored on the firm.
    """
    container = get_container()
    create_firm_use_case = container.get(CreateFirmUseCase)
    
    try:
        request = FirmCreateRequest(
            firm_name=firm_name,
            area=area,
            category=category,
            region=region,
            offer=offer,
        )
        return await create_firm_use_case.execute(
            context=vendor,
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
        logger.exception(f"Failed to create firm for vendor {vendor.vendor_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.delete("/{firm_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_firm(firm_id: str) -> Response:
    """Delete a firm, its products and the vendor's reference to it"""
    container = get_container()
    delete_firm_use_case = container.get(DeleteFirmUseCase)
    
    try:
        await delete_firm_use_case.execute(firm_id)
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.user_message
        )
    except Exception:
        logger.exception(f"Failed to delete firm {firm_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
