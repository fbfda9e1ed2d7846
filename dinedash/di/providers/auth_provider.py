from typing import TYPE_CHECKING
from ...domain.repositories.vendor_repository import VendorRepository
from ...application.use_cases.auth.register_vendor import RegisterVendorUseCase
from ...application.use_cases.auth.login_vendor import LoginVendorUseCase
from ...application.use_cases.auth.authenticate_vendor import AuthenticateVendorUseCase
from ...application.use_cases.auth.get_current_vendor import GetCurrentVendorUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Vendor authentication use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all vendor authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterVendorUseCase,
            lambda: RegisterVendorUseCase(
                vendor_repository=container.get(VendorRepository)
            )
        )
        
        container.register_factory(
            LoginVendorUseCase,
            lambda: LoginVendorUseCase(
                vendor_repository=container.get(VendorRepository)
            )
        )
        
        container.register_factory(AuthenticateVendorUseCase, AuthenticateVendorUseCase)
        
        container.register_factory(
            GetCurrentVendorUseCase,
            lambda: GetCurrentVendorUseCase(
                vendor_repository=container.get(VendorRepository)
            )
        )
