# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Vendor:
    """
    Pure domain model for Vendor entity.
    
    A vendor owns firms (outlets). The firm_ids list is the vendor-side
    back-reference; it is maintained by the catalog use cases, never derived.
    """
    id: Optional[str]
    username: str
    email: str
    hashed_password: str
    firm_ids: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.username or len(self.username.strip()) < 1:
            raise ValueError("Username is required")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
