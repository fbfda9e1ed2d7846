"""External service clients for communicating with external systems"""

from .cloudinary_client import CloudinaryGateway, build_incoming_transformation

__all__ = [
    "CloudinaryGateway",
    "build_incoming_transformation",
]
