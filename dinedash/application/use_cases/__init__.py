from .auth import (
    RegisterVendorUseCase,
    LoginVendorUseCase,
    AuthenticateVendorUseCase,
    GetCurrentVendorUseCase,
)
from .firm import CreateFirmUseCase, DeleteFirmUseCase
from .product import (
    CreateProductUseCase,
    ListProductsByFirmUseCase,
    DeleteProductUseCase,
)

__all__ = [
    "RegisterVendorUseCase",
    "LoginVendorUseCase",
    "AuthenticateVendorUseCase",
    "GetCurrentVendorUseCase",
    "CreateFirmUseCase",
    "DeleteFirmUseCase",
    "CreateProductUseCase",
    "ListProductsByFirmUseCase",
    "DeleteProductUseCase",
]
