from typing import List, Optional
from pydantic import BaseModel


class FirmCreateRequest(BaseModel):
    """DTO for firm creation request (descriptive attributes only)"""
    firm_name: str
    area: Optional[str] = None
    category: List[str] = []
    region: List[str] = []
    offer: Optional[str] = None


class FirmCreatedResponse(BaseModel):
    """DTO for firm creation confirmation"""
    message: str
    firm_id: str
