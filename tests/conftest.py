"""
Shared pytest fixtures for dinedash tests.

In-memory repositories implement the domain repository interfaces so graph
invariants can be checked without MongoDB. Each write yields to the event
loop once, so concurrent use cases really interleave.
"""
import asyncio
import copy
import io
import uuid
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest

from dinedash.domain.models import Firm, Product, Vendor
from dinedash.domain.repositories import FirmRepository, ProductRepository, VendorRepository


class InMemoryVendorRepository(VendorRepository):
    def __init__(self) -> None:
        self.vendors: Dict[str, Vendor] = {}

    async def find_by_id(self, vendor_id: str) -> Optional[Vendor]:
        vendor = self.vendors.get(vendor_id)
        return copy.deepcopy(vendor) if vendor else None

    async def find_by_email(self, email: str) -> Optional[Vendor]:
        for vendor in self.vendors.values():
            if vendor.email == email:
                return copy.deepcopy(vendor)
        return None

    async def create(self, vendor: Vendor) -> Vendor:
        await asyncio.sleep(0)
        stored = copy.deepcopy(vendor)
        stored.id = uuid.uuid4().hex
        self.vendors[stored.id] = stored
        return copy.deepcopy(stored)

    async def add_firm(self, vendor_id: str, firm_id: str) -> bool:
        await asyncio.sleep(0)
        vendor = self.vendors.get(vendor_id)
        if vendor is None:
            return False
        if firm_id not in vendor.firm_ids:
            vendor.firm_ids.append(firm_id)
        return True

    async def remove_firm(self, vendor_id: str, firm_id: str) -> bool:
        await asyncio.sleep(0)
        vendor = self.vendors.get(vendor_id)
        if vendor is None:
            return False
        vendor.firm_ids = [f for f in vendor.firm_ids if f != firm_id]
        return True


class InMemoryFirmRepository(FirmRepository):
    def __init__(self) -> None:
        self.firms: Dict[str, Firm] = {}

    async def find_by_id(self, firm_id: str) -> Optional[Firm]:
        firm = self.firms.get(firm_id)
        return copy.deepcopy(firm) if firm else None

    async def create(self, firm: Firm) -> Firm:
        await asyncio.sleep(0)
        stored = copy.deepcopy(firm)
        stored.id = uuid.uuid4().hex
        self.firms[stored.id] = stored
        return copy.deepcopy(stored)

    async def delete(self, firm_id: str) -> Optional[Firm]:
        await asyncio.sleep(0)
        return self.firms.pop(firm_id, None)

    async def add_product(self, firm_id: str, product_id: str) -> bool:
        await asyncio.sleep(0)
        firm = self.firms.get(firm_id)
        if firm is None:
            return False
        if product_id not in firm.product_ids:
            firm.product_ids.append(product_id)
        return True

    async def remove_product(self, firm_id: str, product_id: str) -> bool:
        await asyncio.sleep(0)
        firm = self.firms.get(firm_id)
        if firm is None:
            return False
        firm.product_ids = [p for p in firm.product_ids if p != product_id]
        return True


class InMemoryProductRepository(ProductRepository):
    def __init__(self) -> None:
        self.products: Dict[str, Product] = {}

    async def find_by_firm(self, firm_id: str) -> List[Product]:
        return [copy.deepcopy(p) for p in self.products.values() if p.firm_id == firm_id]

    async def create(self, product: Product) -> Product:
        await asyncio.sleep(0)
        stored = copy.deepcopy(product)
        stored.id = uuid.uuid4().hex
        self.products[stored.id] = stored
        return copy.deepcopy(stored)

    async def delete(self, product_id: str) -> Optional[Product]:
        await asyncio.sleep(0)
        return self.products.pop(product_id, None)

    async def delete_by_firm(self, firm_id: str) -> int:
        await asyncio.sleep(0)
        doomed = [pid for pid, p in self.products.items() if p.firm_id == firm_id]
        for pid in doomed:
            del self.products[pid]
        return len(doomed)


def make_reader(data: bytes):
    """Async chunk reader over in-memory bytes, shaped like UploadFile.read."""
    buffer = io.BytesIO(data)

    async def read(size: int = -1) -> bytes:
        return buffer.read(size)

    return read


@pytest.fixture
def vendor_repo() -> InMemoryVendorRepository:
    return InMemoryVendorRepository()


@pytest.fixture
def firm_repo() -> InMemoryFirmRepository:
    return InMemoryFirmRepository()


@pytest.fixture
def product_repo() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def vendor(vendor_repo) -> Vendor:
    """A stored vendor with no firms."""
    stored = Vendor(
        id="vendor-1",
        username="diner-owner",
        email="owner@example.com",
        hashed_password="$2b$12$hashed",
    )
    vendor_repo.vendors[stored.id] = stored
    return stored


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("dinedash.core.config.get_settings", return_value=mock), patch(
        "dinedash.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def reader_factory():
    """Build async readers over bytes for ImageUpload / StagingStore.stage."""
    return make_reader
