from typing import List
from pydantic import BaseModel, EmailStr


class VendorContext(BaseModel):
    """Authenticated vendor identity handed to catalog operations"""
    vendor_id: str
    email: str = ""


class VendorResponse(BaseModel):
    """DTO for vendor response (no password)"""
    id: str
    username: str
    email: EmailStr
    firm_ids: List[str] = []
