"""
Exception hierarchy for the catalog core.

Use cases raise these; API controllers translate them into HTTP responses.
Every error carries a safe user-facing message so internal details never
reach the client.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "Internal server error"
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(CatalogError):
    """Raised when client input is rejected."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)


class ImageValidationError(ValidationError):
    """Raised when an inbound image has a disallowed file type."""

    def __init__(self, filename: str, allowed: str):
        super().__init__(
            f"Only image files ({allowed}) are allowed",
            details={"filename": filename},
        )
        self.filename = filename


class VendorAlreadyExistsError(ValidationError):
    """Raised when registering an email that already belongs to a vendor."""

    def __init__(self, email: str):
        super().__init__(
            "Vendor with this email already exists",
            details={"email": email},
        )
        self.email = email


# -----------------------------------------------------------------------------
# Not found
# -----------------------------------------------------------------------------


class NotFoundError(CatalogError):
    """Raised when a referenced catalog entity does not exist."""

    def __init__(self, entity: str, entity_id: str, message: str):
        super().__init__(
            f"{message}: {entity_id}",
            user_message=message,
            details={"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class VendorNotFoundError(NotFoundError):
    def __init__(self, vendor_id: str):
        super().__init__("vendor", vendor_id, "Vendor not found")


class FirmNotFoundError(NotFoundError):
    def __init__(self, firm_id: str):
        super().__init__("firm", firm_id, "No firm found")


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: str):
        super().__init__("product", product_id, "No product found")


# -----------------------------------------------------------------------------
# External services
# -----------------------------------------------------------------------------


class ExternalServiceError(CatalogError):
    """Base exception for external service errors."""

    def __init__(self, message: str, service_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.service_name = service_name


class RemoteUploadError(ExternalServiceError):
    """Raised when the remote asset service rejects or fails an image upload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message,
            service_name="Cloudinary",
            details={"status_code": status_code} if status_code is not None else None,
        )
        self.status_code = status_code


# -----------------------------------------------------------------------------
# Graph linkage
# -----------------------------------------------------------------------------


class ParentLinkError(CatalogError):
    """
    Raised when the child record was written but the parent's back-reference
    update failed. The child is left in place (no rollback).
    """

    def __init__(self, parent: str, parent_id: str, child: str, child_id: str, cause: BaseException):
        super().__init__(
            f"Failed to update {parent} {parent_id} reference to {child} {child_id}: {cause}",
            details={
                "parent": parent,
                "parent_id": parent_id,
                "child": child,
                "child_id": child_id,
            },
        )
        self.parent_id = parent_id
        self.child_id = child_id
