from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_vendor_collection,
    get_firm_collection,
    get_product_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database and catalog collections in the container.
        This is the only place where database connections are registered.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("vendor_collection", get_vendor_collection())
        container.register_singleton("firm_collection", get_firm_collection())
        container.register_singleton("product_collection", get_product_collection())
