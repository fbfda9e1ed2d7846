from .register_vendor import RegisterVendorUseCase
from .login_vendor import LoginVendorUseCase
from .authenticate_vendor import AuthenticateVendorUseCase
from .get_current_vendor import GetCurrentVendorUseCase

__all__ = [
    "RegisterVendorUseCase",
    "LoginVendorUseCase",
    "AuthenticateVendorUseCase",
    "GetCurrentVendorUseCase",
]
