# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings


def hash_password(plain_password: str) -> str:
    """
    Hash a vendor password using bcrypt
    
    Args:
        plain_password: The plain text password to hash
        
    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(vendor_id: str, email: str) -> str:
    """
    Issue a signed access token for a vendor
    
    Args:
        vendor_id: Vendor ID, stored in the standard "sub" claim
        email: Vendor email, carried for display purposes
        
    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    issued_at = int(time.time())
    payload: Dict[str, Any] = {
        "sub": vendor_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + settings.access_token_expire_minutes * 60,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate an access token
    
    Args:
        token: The JWT token string to decode
        
    Returns:
        Dictionary containing decoded token claims
        
    Raises:
        ValueError: If token is invalid, expired or has no subject
    """
    settings = get_settings()
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
    
    if not claims.get("sub"):
        raise ValueError("Invalid token: missing vendor ID")
    return claims
