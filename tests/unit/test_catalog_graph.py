"""
Back-reference consistency of the vendor -> firm -> product graph across
creation, deletion and concurrent requests.
"""
import asyncio
from unittest.mock import AsyncMock

import pytest

from dinedash.application.dto.firm_dto import FirmCreateRequest
from dinedash.application.dto.product_dto import ProductCreateRequest
from dinedash.application.dto.vendor_dto import VendorContext
from dinedash.application.services.image_pipeline import ImagePipeline
from dinedash.application.use_cases.firm import CreateFirmUseCase, DeleteFirmUseCase
from dinedash.application.use_cases.product import CreateProductUseCase, DeleteProductUseCase


@pytest.fixture
def pipeline():
    stub = AsyncMock(spec=ImagePipeline)
    stub.ingest.return_value = None
    return stub


def assert_graph_consistent(vendor_repo, firm_repo, product_repo):
    for firm in firm_repo.firms.values():
        assert firm.id in vendor_repo.vendors[firm.vendor_id].firm_ids
    for vendor in vendor_repo.vendors.values():
        for firm_id in vendor.firm_ids:
            assert firm_repo.firms[firm_id].vendor_id == vendor.id
    for product in product_repo.products.values():
        assert product.id in firm_repo.firms[product.firm_id].product_ids
    for firm in firm_repo.firms.values():
        for product_id in firm.product_ids:
            assert product_repo.products[product_id].firm_id == firm.id


class TestCatalogGraph:
    """Tests for back-references across whole create/delete sequences"""

    @pytest.mark.asyncio
    async def test_create_and_delete_keep_back_references(
        self, vendor, vendor_repo, firm_repo, product_repo, pipeline
    ):
        context = VendorContext(vendor_id=vendor.id)
        create_firm = CreateFirmUseCase(vendor_repo, firm_repo, pipeline)
        create_product = CreateProductUseCase(firm_repo, product_repo, pipeline)

        diner = await create_firm.execute(context, FirmCreateRequest(firm_name="Test Diner"))
        cafe = await create_firm.execute(context, FirmCreateRequest(firm_name="Corner Cafe"))
        dosa = await create_product.execute(diner.firm_id, ProductCreateRequest(product_name="Dosa", price="80"))
        await create_product.execute(diner.firm_id, ProductCreateRequest(product_name="Vada", price="40"))
        await create_product.execute(cafe.firm_id, ProductCreateRequest(product_name="Latte", price="150"))
        assert_graph_consistent(vendor_repo, firm_repo, product_repo)

        await DeleteProductUseCase(firm_repo, product_repo).execute(dosa.id)
        assert_graph_consistent(vendor_repo, firm_repo, product_repo)

        await DeleteFirmUseCase(vendor_repo, firm_repo, product_repo).execute(diner.firm_id)
        assert_graph_consistent(vendor_repo, firm_repo, product_repo)
        assert vendor_repo.vendors[vendor.id].firm_ids == [cafe.firm_id]
        assert [p.product_name for p in product_repo.products.values()] == ["Latte"]

    @pytest.mark.asyncio
    async def test_concurrent_firm_creation_links_both(
        self, vendor, vendor_repo, firm_repo, pipeline
    ):
        context = VendorContext(vendor_id=vendor.id)
        use_case = CreateFirmUseCase(vendor_repo, firm_repo, pipeline)

        first, second = await asyncio.gather(
            use_case.execute(context, FirmCreateRequest(firm_name="North Outlet")),
            use_case.execute(context, FirmCreateRequest(firm_name="South Outlet")),
        )

        assert set(firm_repo.firms) == {first.firm_id, second.firm_id}
        assert sorted(vendor_repo.vendors[vendor.id].firm_ids) == sorted([first.firm_id, second.firm_id])

    @pytest.mark.asyncio
    async def test_concurrent_product_creation_links_all(
        self, vendor, vendor_repo, firm_repo, product_repo, pipeline
    ):
        firm = await CreateFirmUseCase(vendor_repo, firm_repo, pipeline).execute(
            VendorContext(vendor_id=vendor.id), FirmCreateRequest(firm_name="Test Diner")
        )
        use_case = CreateProductUseCase(firm_repo, product_repo, pipeline)

        results = await asyncio.gather(*[
            use_case.execute(firm.firm_id, ProductCreateRequest(product_name=f"Item {i}", price=str(i)))
            for i in range(1, 6)
        ])

        assert len(product_repo.products) == 5
        assert sorted(firm_repo.firms[firm.firm_id].product_ids) == sorted(r.id for r in results)
        assert_graph_consistent(vendor_repo, firm_repo, product_repo)
