# Local application imports
from ....domain.repositories.firm_repository import FirmRepository
from ....domain.repositories.product_repository import ProductRepository
from ....domain.exceptions import FirmNotFoundError
from ...dto.product_dto import FirmProductsResponse, to_product_response


class ListProductsByFirmUseCase:
    """Use case for listing a firm's products together with the firm's name"""
    
    def __init__(self, firm_repository: FirmRepository, product_repository: ProductRepository) -> None:
        self.firm_repository = firm_repository
        self.product_repository = product_repository
    
    async def execute(self, firm_id: str) -> FirmProductsResponse:
        """
        List products whose owning firm is firm_id
        
        Raises:
            FirmNotFoundError: If the firm does not exist
        """
        firm = await self.firm_repository.find_by_id(firm_id)
        if firm is None:
            raise FirmNotFoundError(firm_id)
        
        products = await self.product_repository.find_by_firm(firm.id or firm_id)
        return FirmProductsResponse(
            firm_display_name=firm.firm_name,
            products=[to_product_response(product) for product in products],
        )
