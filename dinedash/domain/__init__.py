"""Catalog domain: Vendor/Firm/Product models, repository contracts and errors."""
