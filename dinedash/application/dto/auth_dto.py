from pydantic import BaseModel, EmailStr, Field


class VendorRegistrationRequest(BaseModel):
    """DTO for vendor registration request"""
    username: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=8, max_length=256)


class VendorLoginRequest(BaseModel):
    """DTO for vendor login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"
