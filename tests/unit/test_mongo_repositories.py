"""
Unit tests for the Motor repositories, against mocked collections.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from dinedash.domain.exceptions import VendorAlreadyExistsError
from dinedash.domain.models import Firm, Product, Vendor
from dinedash.infrastructure.db.mongo_firm_repository import MongoFirmRepository
from dinedash.infrastructure.db.mongo_product_repository import MongoProductRepository
from dinedash.infrastructure.db.mongo_vendor_repository import MongoVendorRepository

VENDOR_OID = ObjectId()
FIRM_OID = ObjectId()


@pytest.fixture
def collection():
    return AsyncMock()


class TestMongoVendorRepository:
    """Tests for MongoVendorRepository back-reference updates"""

    @pytest.mark.asyncio
    async def test_add_firm_uses_add_to_set(self, collection):
        collection.update_one.return_value = MagicMock(matched_count=1)
        repo = MongoVendorRepository(vendor_collection=collection)

        assert await repo.add_firm(str(VENDOR_OID), "firm-1") is True
        collection.update_one.assert_awaited_once_with(
            {"_id": VENDOR_OID}, {"$addToSet": {"firm_ids": "firm-1"}}
        )

    @pytest.mark.asyncio
    async def test_remove_firm_uses_pull(self, collection):
        collection.update_one.return_value = MagicMock(matched_count=0)
        repo = MongoVendorRepository(vendor_collection=collection)

        assert await repo.remove_firm(str(VENDOR_OID), "firm-1") is False
        collection.update_one.assert_awaited_once_with(
            {"_id": VENDOR_OID}, {"$pull": {"firm_ids": "firm-1"}}
        )

    @pytest.mark.asyncio
    async def test_invalid_id_is_not_found(self, collection):
        repo = MongoVendorRepository(vendor_collection=collection)
        assert await repo.find_by_id("not-an-object-id") is None
        assert await repo.add_firm("not-an-object-id", "firm-1") is False
        collection.find_one.assert_not_awaited()
        collection.update_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_ensures_unique_email_index_once(self, collection):
        collection.insert_one.return_value = MagicMock(inserted_id=VENDOR_OID)
        collection.find_one.return_value = {
            "_id": VENDOR_OID,
            "username": "diner-owner",
            "email": "owner@example.com",
            "hashed_password": "hashed",
            "firm_ids": [],
        }
        repo = MongoVendorRepository(vendor_collection=collection)
        vendor = Vendor(id=None, username="diner-owner", email="owner@example.com", hashed_password="hashed")

        created = await repo.create(vendor)
        await repo.create(vendor)

        assert created.id == str(VENDOR_OID)
        collection.create_index.assert_awaited_once_with("email", unique=True)
        assert collection.insert_one.await_count == 2

    @pytest.mark.asyncio
    async def test_duplicate_email_insert_is_rejected(self, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")
        repo = MongoVendorRepository(vendor_collection=collection)
        vendor = Vendor(id=None, username="diner-owner", email="owner@example.com", hashed_password="hashed")

        with pytest.raises(VendorAlreadyExistsError) as exc_info:
            await repo.create(vendor)

        assert exc_info.value.email == "owner@example.com"
        collection.find_one.assert_not_awaited()


class TestMongoFirmRepository:
    """Tests for MongoFirmRepository"""

    @pytest.mark.asyncio
    async def test_insert_maps_document(self, collection):
        collection.insert_one.return_value = MagicMock(inserted_id=FIRM_OID)
        collection.find_one.return_value = {
            "_id": FIRM_OID,
            "vendor_id": str(VENDOR_OID),
            "firm_name": "Test Diner",
            "category": ["veg"],
            "product_ids": [],
        }

        repo = MongoFirmRepository(firm_collection=collection)
        saved = await repo.create(Firm(id=None, vendor_id=str(VENDOR_OID), firm_name="Test Diner", category=["veg"]))

        assert saved.id == str(FIRM_OID)
        assert saved.category == ["veg"]
        assert saved.image_url is None
        inserted = collection.insert_one.call_args.args[0]
        assert inserted["firm_name"] == "Test Diner"
        assert inserted["product_ids"] == []

    @pytest.mark.asyncio
    async def test_delete_missing_returns_none(self, collection):
        collection.find_one_and_delete.return_value = None
        repo = MongoFirmRepository(firm_collection=collection)
        assert await repo.delete(str(FIRM_OID)) is None

    @pytest.mark.asyncio
    async def test_find_error_is_wrapped(self, collection):
        collection.find_one.side_effect = Exception("connection refused")
        repo = MongoFirmRepository(firm_collection=collection)
        with pytest.raises(RuntimeError, match="Error finding firm"):
            await repo.find_by_id(str(FIRM_OID))


class TestMongoProductRepository:
    """Tests for MongoProductRepository"""

    @pytest.mark.asyncio
    async def test_delete_by_firm_returns_count(self, collection):
        collection.delete_many.return_value = MagicMock(deleted_count=3)
        repo = MongoProductRepository(product_collection=collection)

        assert await repo.delete_by_firm("firm-1") == 3
        collection.delete_many.assert_awaited_once_with({"firm_id": "firm-1"})

    @pytest.mark.asyncio
    async def test_create_inserts_new_document(self, collection):
        product_oid = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=product_oid)
        collection.find_one.return_value = {
            "_id": product_oid,
            "firm_id": str(FIRM_OID),
            "product_name": "Masala Dosa",
            "price": "120",
        }
        repo = MongoProductRepository(product_collection=collection)

        created = await repo.create(Product(id=None, firm_id=str(FIRM_OID), product_name="Masala Dosa", price="120"))

        assert created.id == str(product_oid)
        assert "_id" not in collection.insert_one.call_args.args[0]
        collection.update_one.assert_not_awaited()
